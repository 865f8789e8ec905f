"""Unit tests for structured search path event logging."""

from __future__ import annotations

import io
from pathlib import Path

from loguru import logger as loguru_logger
import pytest

from searchpath import SearchLogger, SearchPath
from searchpath.telemetry.logger import _format_context, _sanitize_context_value


@pytest.fixture
def captured() -> io.StringIO:
    """Provide an in-memory sink attached for the duration of one test."""

    return io.StringIO()


def test_format_context_is_sorted_and_sanitized() -> None:
    """Context keys should be sorted and values reduced to shell-safe tokens."""

    assert _format_context({}) == ""
    assert _format_context({"b": "x y", "a": ""}) == " a=none b=x_y"
    assert _sanitize_context_value("/tmp/dir-1:2") == "/tmp/dir-1:2"


def test_search_logger_emits_admission_events(captured: io.StringIO, search_root: Path) -> None:
    """Admissions and silent rejections should both be visible through the sink."""

    logger = SearchLogger(sink=captured)
    try:
        search_path = SearchPath("MYPATH", environ={}, logger=logger)
        search_path.add_directory(str(search_root))
        search_path.add_directory(str(search_root / "missing"))
    finally:
        logger.close()

    lines = captured.getvalue().splitlines()
    assert lines == [
        f"[searchpath] level=DEBUG event=admit search_path=MYPATH "
        f"entry={_sanitize_context_value(search_root)} kind=directory",
        f"[searchpath] level=DEBUG event=reject search_path=MYPATH "
        f"entry={_sanitize_context_value(search_root / 'missing')} reason=does_not_exist",
    ]


def test_search_logger_emits_lookup_events(captured: io.StringIO) -> None:
    """Failed lookups should log a not-found event before raising."""

    logger = SearchLogger(sink=captured)
    try:
        search_path = SearchPath("MYPATH", environ={}, logger=logger)
        with pytest.raises(LookupError):
            search_path.find("ghost")
    finally:
        logger.close()

    assert captured.getvalue().splitlines() == [
        "[searchpath] level=DEBUG event=not_found search_path=MYPATH kind=any name=ghost"
    ]


def test_search_logger_close_detaches_sink(captured: io.StringIO) -> None:
    """No events should reach the sink once the logger is closed."""

    logger = SearchLogger(sink=captured)
    logger.close()
    logger.close()

    SearchPath("MYPATH", environ={}, logger=logger).add_directory("")

    assert captured.getvalue() == ""


def test_search_logger_close_silences_package_for_other_handlers() -> None:
    """Closing a sink logger should leave the package disabled for app handlers."""

    SearchLogger(sink=io.StringIO()).close()
    records: list[object] = []
    handler_id = loguru_logger.add(records.append, level="DEBUG")
    try:
        SearchPath("MYPATH", environ={}, logger=SearchLogger()).add_directory("")
    finally:
        loguru_logger.remove(handler_id)

    assert records == []


def test_search_logger_level_filters_debug_events(captured: io.StringIO) -> None:
    """A higher sink level should drop debug admission events."""

    logger = SearchLogger(sink=captured, level="WARNING")
    try:
        SearchPath("MYPATH", environ={}, logger=logger).add_directory("")
    finally:
        logger.close()

    assert captured.getvalue() == ""
