"""Configuration model and loaders for searchpath.

Responsibilities:
- Define search path settings as a typed, validated dataclass.
- Resolve the platform default delimiter once, from the host OS family.
- Provide loader entry points for environment- and YAML-based configuration.

Key types:
- `SearchPathConfig`: settings shared by every search path built from it.
- `ConfigLoader`: static construction helpers for `SearchPathConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import (
    normalize_optional_string,
    parse_delimiter,
    parse_positive_float,
    parse_required_boolean,
)


_WINDOWS_DELIMITER = ";"
_POSIX_DELIMITER = ":"
_DEFAULT_PROBE_TIMEOUT_SECONDS = 10.0
_DEFAULT_USER_AGENT = "searchpath"


def default_delimiter(os_name: str | None = None) -> str:
    """Return the conventional path-list delimiter for an OS family.

    Args:
        os_name: Value shaped like `os.name`; the running interpreter's is used
            when omitted.
    """

    family = os.name if os_name is None else os_name
    if family == "nt":
        return _WINDOWS_DELIMITER
    return _POSIX_DELIMITER


@dataclass(frozen=True, slots=True)
class SearchPathConfig:
    """Settings applied to a search path and its collaborators.

    Attributes:
        delimiter: Character splitting an environment variable into entries.
        remote_enabled: Whether `http`/`https` base locations are admitted and probed.
        probe_timeout_seconds: Timeout for one remote reachability probe.
        user_agent: `User-Agent` header sent with remote probes.
    """

    delimiter: str = field(default_factory=default_delimiter)
    remote_enabled: bool = False
    probe_timeout_seconds: float = _DEFAULT_PROBE_TIMEOUT_SECONDS
    user_agent: str = _DEFAULT_USER_AGENT

    def validate(self) -> None:
        """Validate settings, raising `ValueError` on the first invalid field."""

        parse_delimiter(self.delimiter, "delimiter")
        if not isinstance(self.remote_enabled, bool):
            raise ValueError("`remote_enabled` must be a boolean.")
        parse_positive_float(self.probe_timeout_seconds, "probe_timeout_seconds")
        if not isinstance(self.user_agent, str) or not self.user_agent.strip():
            raise ValueError("`user_agent` must be a non-empty string.")

    def with_delimiter(self, delimiter: str) -> SearchPathConfig:
        """Return a validated copy of this config using another delimiter."""

        updated = SearchPathConfig(
            delimiter=delimiter,
            remote_enabled=self.remote_enabled,
            probe_timeout_seconds=self.probe_timeout_seconds,
            user_agent=self.user_agent,
        )
        updated.validate()
        return updated


class ConfigLoader:
    """Factory methods for creating `SearchPathConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {
            "delimiter",
            "remote_enabled",
            "probe_timeout_seconds",
            "user_agent",
        }
    )

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> SearchPathConfig:
        """Create a validated config from `SEARCHPATH_*` environment variables.

        Blank values fall back to defaults. The delimiter is read verbatim so a
        whitespace delimiter can be configured.
        """

        env_map: Mapping[str, str] = os.environ if env is None else env

        raw_delimiter = env_map.get("SEARCHPATH_DELIMITER", "")
        delimiter = (
            parse_delimiter(raw_delimiter, "SEARCHPATH_DELIMITER")
            if raw_delimiter
            else default_delimiter()
        )

        remote_text = normalize_optional_string(env_map.get("SEARCHPATH_REMOTE_ENABLED"))
        remote_enabled = (
            parse_required_boolean(remote_text, "SEARCHPATH_REMOTE_ENABLED")
            if remote_text is not None
            else False
        )

        timeout_text = normalize_optional_string(env_map.get("SEARCHPATH_PROBE_TIMEOUT"))
        probe_timeout = (
            parse_positive_float(timeout_text, "SEARCHPATH_PROBE_TIMEOUT")
            if timeout_text is not None
            else _DEFAULT_PROBE_TIMEOUT_SECONDS
        )

        user_agent = (
            normalize_optional_string(env_map.get("SEARCHPATH_USER_AGENT"))
            or _DEFAULT_USER_AGENT
        )

        config = SearchPathConfig(
            delimiter=delimiter,
            remote_enabled=remote_enabled,
            probe_timeout_seconds=probe_timeout,
            user_agent=user_agent,
        )
        config.validate()
        return config

    @staticmethod
    def from_yaml(path: Path) -> SearchPathConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)
        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` could not be parsed: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> SearchPathConfig:
        """Build a validated config from a mapping payload."""

        unknown = sorted(str(key) for key in set(payload) - ConfigLoader._SUPPORTED_YAML_KEYS)
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        delimiter = (
            parse_delimiter(payload["delimiter"], "delimiter")
            if payload.get("delimiter") is not None
            else default_delimiter()
        )
        remote_enabled = (
            parse_required_boolean(payload["remote_enabled"], "remote_enabled")
            if payload.get("remote_enabled") is not None
            else False
        )
        probe_timeout = (
            parse_positive_float(payload["probe_timeout_seconds"], "probe_timeout_seconds")
            if payload.get("probe_timeout_seconds") is not None
            else _DEFAULT_PROBE_TIMEOUT_SECONDS
        )
        user_agent = (
            normalize_optional_string(payload.get("user_agent")) or _DEFAULT_USER_AGENT
        )

        config = SearchPathConfig(
            delimiter=delimiter,
            remote_enabled=remote_enabled,
            probe_timeout_seconds=probe_timeout,
            user_agent=user_agent,
        )
        config.validate()
        return config
