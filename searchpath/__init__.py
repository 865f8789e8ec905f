"""Top-level package for searchpath.

This package builds ordered search roots from `PATH`-style environment
variables (directories and, optionally, `http`/`https` base locations) and
resolves bare names to their first match. The main entry point is
`SearchPath`.

Log events are emitted through `loguru` and the package is disabled there by
default; call `loguru.logger.enable("searchpath")` or pass a sink to
`SearchLogger` to see them.
"""

from loguru import logger as _loguru_logger

from .config import ConfigLoader, SearchPathConfig, default_delimiter
from .errors import (
    EntryNotFoundError,
    RemoteLocationError,
    SearchPathError,
    SearchScanError,
)
from .models.datatypes import EntryKind, FoundEntry, PathViolation, ViolationKind
from .remote import RemoteLocation, ResourceProber
from .search_path import SearchPath
from .telemetry.logger import SearchLogger

_loguru_logger.disable("searchpath")

__all__ = [
    "ConfigLoader",
    "EntryKind",
    "EntryNotFoundError",
    "FoundEntry",
    "PathViolation",
    "RemoteLocation",
    "RemoteLocationError",
    "ResourceProber",
    "SearchLogger",
    "SearchPath",
    "SearchPathConfig",
    "SearchPathError",
    "SearchScanError",
    "ViolationKind",
    "__version__",
    "default_delimiter",
]

__version__ = "0.1.0"
