"""Core datatypes shared across searchpath modules.

Responsibilities:
- Name the entry kinds a lookup can request or report.
- Represent lookup results, classified entries and validation findings as
  immutable records.

Key types:
- `EntryKind`, `FoundEntry`, `EntryRoute`, `ClassifiedEntry`,
  `ViolationKind`, and `PathViolation`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class EntryKind(Enum):
    """Kind of entry requested from, or reported by, a search path lookup."""

    FILE = "file"
    DIRECTORY = "directory"
    RESOURCE = "resource"
    ANY = "any"

    @property
    def is_local(self) -> bool:
        """Return whether this kind is satisfied by scanning local directories."""

        return self is not EntryKind.RESOURCE

    @property
    def is_remote(self) -> bool:
        """Return whether this kind is satisfied by probing remote bases."""

        return self in (EntryKind.RESOURCE, EntryKind.ANY)


@dataclass(frozen=True, slots=True)
class FoundEntry:
    """Location of the first entry matching a lookup.

    Attributes:
        kind: Kind actually found (`FILE`, `DIRECTORY` or `RESOURCE`).
        location: Filesystem path for local matches, URL text for resources.
    """

    kind: EntryKind
    location: Path | str

    @property
    def path(self) -> Path | None:
        """Return the local path, or `None` for remote resources."""

        if isinstance(self.location, Path):
            return self.location
        return None

    @property
    def url(self) -> str | None:
        """Return the resource URL, or `None` for local matches."""

        if isinstance(self.location, str):
            return self.location
        return None

    def __str__(self) -> str:
        return str(self.location)


class EntryRoute(Enum):
    """Admission path selected for a raw entry string."""

    DIRECTORY = "directory"
    REMOTE = "remote"


@dataclass(frozen=True, slots=True)
class ClassifiedEntry:
    """Result of classifying one raw entry string.

    Attributes:
        route: Admission path the entry should take.
        value: Directory path text for `DIRECTORY`, normalized URL text for `REMOTE`.
        original: The untouched input string.
    """

    route: EntryRoute
    value: str
    original: str


class ViolationKind(Enum):
    """Reason an admitted entry no longer satisfies the admission checks."""

    DOES_NOT_EXIST = "does_not_exist"
    CANNOT_READ = "cannot_read"


@dataclass(frozen=True, slots=True)
class PathViolation:
    """One finding reported by `SearchPath.validate`.

    Attributes:
        entry: Directory path or remote base URL text that failed re-checking.
        kind: Why the entry failed.
    """

    entry: str
    kind: ViolationKind

    def __str__(self) -> str:
        if self.kind is ViolationKind.DOES_NOT_EXIST:
            return f"'{self.entry}' does not exist"
        return f"'{self.entry}' cannot be read"
