"""Structured search path event logging.

Responsibilities:
- Emit concise, deterministic `key=value` event lines through `loguru`.
- Keep the library silent unless a caller opts in with a sink.
"""

from __future__ import annotations

from typing import TextIO

from loguru import logger as _loguru_logger


_PACKAGE_NAME = "searchpath"


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


def _is_package_record(record: dict) -> bool:
    return str(record["name"]).startswith(_PACKAGE_NAME)


class SearchLogger:
    """Emit admission and lookup events for one or more search paths.

    Without a sink, events go to whatever handlers the application configured,
    and nothing is emitted while the package is disabled in loguru. With a
    sink, the package is enabled and a handler filtered to this package is
    added until `close()` is called.
    """

    def __init__(self, sink: TextIO | None = None, level: str = "DEBUG") -> None:
        """Initialize the logger and attach an optional dedicated sink."""

        self._handler_id: int | None = None
        if sink is not None:
            _loguru_logger.enable(_PACKAGE_NAME)
            self._handler_id = _loguru_logger.add(
                sink,
                format="{message}",
                level=level,
                colorize=False,
                filter=_is_package_record,
            )

    def close(self) -> None:
        """Detach the dedicated sink and silence the package again."""

        if self._handler_id is not None:
            _loguru_logger.remove(self._handler_id)
            _loguru_logger.disable(_PACKAGE_NAME)
            self._handler_id = None

    def _emit(self, level: str, event: str, search_path: str, **context: object) -> None:
        """Emit one structured event line."""

        line = (
            f"[searchpath] level={level} event={event} "
            f"search_path={_sanitize_context_value(search_path)}{_format_context(context)}"
        )
        _loguru_logger.log(level, line)

    def log_admit(self, search_path: str, kind: str, entry: object) -> None:
        """Emit an admitted-entry event."""

        self._emit("DEBUG", "admit", search_path, kind=kind, entry=entry)

    def log_reject(self, search_path: str, entry: object, reason: str) -> None:
        """Emit a rejected-entry event; rejection is otherwise silent."""

        self._emit("DEBUG", "reject", search_path, entry=entry, reason=reason)

    def log_found(self, search_path: str, name: str, kind: str, location: object) -> None:
        """Emit a successful lookup event."""

        self._emit("DEBUG", "found", search_path, name=name, kind=kind, location=location)

    def log_not_found(self, search_path: str, name: str, kind: str) -> None:
        """Emit an exhausted lookup event."""

        self._emit("DEBUG", "not_found", search_path, name=name, kind=kind)

    def log_scan_error(self, search_path: str, directory: object, error_type: str) -> None:
        """Emit a directory enumeration failure."""

        self._emit("WARNING", "scan_error", search_path, directory=directory, error_type=error_type)

    def log_probe(
        self,
        search_path: str,
        url: str,
        reachable: bool,
        status_code: int | None,
        failure_kind: str | None,
    ) -> None:
        """Emit the outcome of one remote reachability probe."""

        self._emit(
            "DEBUG",
            "probe",
            search_path,
            url=url,
            reachable="true" if reachable else "false",
            status=status_code if status_code is not None else "none",
            failure=failure_kind or "none",
        )
