"""Domain exceptions for search path lookups and configuration."""

from __future__ import annotations

from pathlib import Path

from .models.datatypes import EntryKind


class SearchPathError(Exception):
    """Base class for failures surfaced by a search path."""


class EntryNotFoundError(SearchPathError, LookupError):
    """Raised when no entry of the requested kind matches a name."""

    def __init__(
        self,
        *,
        kind: EntryKind,
        name: str,
        search_path_name: str,
    ) -> None:
        """Initialize a not-found error carrying the lookup diagnostics."""

        super().__init__(
            f"Could not find type '{kind.name}' called '{name}' "
            f"in search path '{search_path_name}'"
        )
        self.kind = kind
        self.name = name
        self.search_path_name = search_path_name


class SearchScanError(SearchPathError):
    """Raised when a directory could not be enumerated during a lookup.

    The underlying `OSError` is chained as `__cause__`.
    """

    def __init__(
        self,
        *,
        directory: Path,
        name: str,
        search_path_name: str,
        detail: str,
    ) -> None:
        """Initialize a scan error for one directory of a search path."""

        super().__init__(
            f"Could not scan '{directory}' for '{name}' "
            f"in search path '{search_path_name}': {detail}"
        )
        self.directory = directory
        self.name = name
        self.search_path_name = search_path_name
        self.detail = detail


class RemoteLocationError(ValueError):
    """Raised when text cannot be parsed as a supported remote location."""
