"""Filesystem metadata collaborator used by search paths.

Responsibilities:
- Answer existence, kind and readability questions about local paths.
- Enumerate a directory's immediate children, reading kind metadata on demand.
- Canonicalize admitted directories so different spellings compare equal.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
import stat
from typing import Protocol


@dataclass(frozen=True, slots=True)
class ChildEntry:
    """One immediate child of a scanned directory.

    Kind metadata is read only when asked for, following symlinks, so
    children that cannot be stat'ed do not affect a scan that never looks
    at them.

    Attributes:
        name: Filename component of the child.
        path: Full path of the child inside the scanned directory.
    """

    name: str
    path: Path

    def is_directory(self) -> bool:
        """Return whether the child is a directory.

        Raises:
            OSError: If the child's metadata cannot be read.
        """

        return stat.S_ISDIR(os.stat(self.path).st_mode)

    def is_file(self) -> bool:
        """Return whether the child is a regular file.

        Raises:
            OSError: If the child's metadata cannot be read.
        """

        return stat.S_ISREG(os.stat(self.path).st_mode)


class FilesystemProvider(Protocol):
    """Protocol for the filesystem operations a search path depends on."""

    def exists(self, path: str) -> bool:
        """Return whether anything exists at `path`."""

    def is_directory(self, path: str) -> bool:
        """Return whether `path` is a directory."""

    def is_file(self, path: str) -> bool:
        """Return whether `path` is a regular file."""

    def is_readable(self, path: str) -> bool:
        """Return whether the directory at `path` can be enumerated."""

    def list_children(self, path: Path) -> list[ChildEntry]:
        """Return the immediate children of a directory, raising `OSError` on failure."""

    def canonicalize(self, path: str) -> Path:
        """Return the canonical absolute form of `path`."""


class LocalFilesystem:
    """`FilesystemProvider` backed by the host operating system."""

    def exists(self, path: str) -> bool:
        """Return whether anything exists at `path`; empty text never exists."""

        return bool(path) and os.path.exists(path)

    def is_directory(self, path: str) -> bool:
        return bool(path) and os.path.isdir(path)

    def is_file(self, path: str) -> bool:
        return bool(path) and os.path.isfile(path)

    def is_readable(self, path: str) -> bool:
        """Return whether the directory at `path` can actually be opened for listing."""

        if not path:
            return False
        try:
            with os.scandir(path):
                return True
        except OSError:
            return False

    def list_children(self, path: Path) -> list[ChildEntry]:
        """Enumerate immediate children of `path` in platform order.

        Raises:
            OSError: If the directory cannot be opened or read.
        """

        with os.scandir(path) as entries:
            return [ChildEntry(name=entry.name, path=Path(entry.path)) for entry in entries]

    def canonicalize(self, path: str) -> Path:
        """Return an absolute path with symlinks and `..` segments resolved.

        Resolution is best-effort: components that do not exist are kept as spelled.
        """

        return Path(os.path.realpath(path))
