"""Search path resolution engine.

Responsibilities:
- Hold an ordered list of admitted directories and, when the remote
  capability is enabled, remote base locations.
- Admit entries silently: candidates failing the checks are dropped without
  raising, and `validate()` is the explicit way to learn what is wrong.
- Resolve a bare name to its first match, local directories first, then
  remote bases.

Key types:
- `SearchPath`: the ordered collection and its add/contains/find/validate operations.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from .config import SearchPathConfig
from .entries import classify_entry
from .errors import EntryNotFoundError, RemoteLocationError, SearchScanError
from .filesystem import FilesystemProvider, LocalFilesystem
from .models.datatypes import (
    EntryKind,
    EntryRoute,
    FoundEntry,
    PathViolation,
    ViolationKind,
)
from .parsing import parse_delimiter
from .remote import RemoteLocation, ResourceProbe, ResourceProber
from .telemetry.logger import SearchLogger


class SearchPath:
    """Ordered set of search roots built from environment variables or code.

    A `SearchPath` is not safe for concurrent mutation; callers sharing one
    instance across threads must serialize access themselves.
    """

    def __init__(
        self,
        name: str = "",
        *,
        config: SearchPathConfig | None = None,
        filesystem: FilesystemProvider | None = None,
        prober: ResourceProbe | None = None,
        environ: Mapping[str, str] | None = None,
        logger: SearchLogger | None = None,
    ) -> None:
        """Create an empty search path.

        Args:
            name: Label used in diagnostics, usually the variable name.
            config: Delimiter and remote settings; platform defaults when omitted.
            filesystem: Filesystem collaborator, the host filesystem by default.
            prober: Remote reachability collaborator, a `HEAD`-request prober by default.
            environ: Environment mapping read by `add_from_variable*`, `os.environ` by default.
            logger: Event logger for admission and lookup diagnostics.

        Raises:
            ValueError: If `config` is invalid.
        """

        resolved_config = config if config is not None else SearchPathConfig()
        resolved_config.validate()

        self._name = name
        self._config = resolved_config
        self._filesystem: FilesystemProvider = (
            filesystem if filesystem is not None else LocalFilesystem()
        )
        self._prober: ResourceProbe = (
            prober
            if prober is not None
            else ResourceProber(
                timeout_seconds=resolved_config.probe_timeout_seconds,
                user_agent=resolved_config.user_agent,
            )
        )
        self._environ: Mapping[str, str] = os.environ if environ is None else environ
        self._logger = logger if logger is not None else SearchLogger()
        self._directories: list[Path] = []
        self._remote_bases: list[RemoteLocation] = []

    @classmethod
    def create(cls, name: str, **options: object) -> SearchPath:
        """Create a search path populated from the environment variable `name`.

        An unset variable yields an empty search path. Keyword options are
        passed to the constructor.
        """

        search_path = cls(name, **options)  # type: ignore[arg-type]
        search_path.add_from_variable(name)
        return search_path

    @classmethod
    def create_with_delimiter(
        cls,
        name: str,
        delimiter: str,
        *,
        config: SearchPathConfig | None = None,
        **options: object,
    ) -> SearchPath:
        """Create a search path from `name` using `delimiter` from here on.

        Raises:
            ValueError: If `delimiter` is not exactly one character.
        """

        base_config = config if config is not None else SearchPathConfig()
        return cls.create(name, config=base_config.with_delimiter(delimiter), **options)

    @property
    def name(self) -> str:
        return self._name

    @property
    def delimiter(self) -> str:
        return self._config.delimiter

    @property
    def config(self) -> SearchPathConfig:
        return self._config

    @property
    def remote_enabled(self) -> bool:
        return self._config.remote_enabled

    @property
    def directories(self) -> tuple[Path, ...]:
        """Admitted directories in search order."""

        return tuple(self._directories)

    @property
    def remote_bases(self) -> tuple[RemoteLocation, ...]:
        """Admitted remote base locations in search order."""

        return tuple(self._remote_bases)

    def add(self, entry: str) -> None:
        """Route an entry to remote or directory admission based on its form."""

        classified = classify_entry(entry, remote_enabled=self.remote_enabled)
        if classified.route is EntryRoute.REMOTE:
            self.add_remote_base(RemoteLocation.parse(classified.value))
            return
        self.add_directory(classified.value)

    def add_directory(self, directory: str | os.PathLike[str]) -> None:
        """Admit a directory if it exists, is a directory and can be listed.

        The canonical absolute form is stored. Rejected candidates leave the
        search path unchanged.
        """

        text = os.fspath(directory)
        reason = self._directory_rejection_reason(text)
        if reason is not None:
            self._logger.log_reject(self._name, text, reason)
            return

        canonical = self._filesystem.canonicalize(text)
        self._directories.append(canonical)
        self._logger.log_admit(self._name, EntryRoute.DIRECTORY.value, canonical)

    def add_remote_base(self, location: RemoteLocation) -> None:
        """Admit a remote base location without probing it.

        Reachability is only checked when a lookup joins a name onto the base.
        Ignored when the remote capability is disabled.
        """

        if not self.remote_enabled:
            self._logger.log_reject(self._name, location.url, "remote_disabled")
            return
        self._remote_bases.append(location)
        self._logger.log_admit(self._name, EntryRoute.REMOTE.value, location.url)

    def add_from_variable(self, var_name: str) -> None:
        """Add each entry of environment variable `var_name`, split on the delimiter.

        An unset variable is ignored.
        """

        self._add_from_variable(var_name, self.delimiter)

    def add_from_variable_with_delimiter(self, var_name: str, delimiter: str) -> None:
        """Add entries of `var_name` split on `delimiter` for this call only.

        Raises:
            ValueError: If `delimiter` is not exactly one character.
        """

        self._add_from_variable(var_name, parse_delimiter(delimiter, "delimiter"))

    def contains(self, entry: str) -> bool:
        """Return whether `entry` matches an admitted directory or remote base."""

        classified = classify_entry(entry, remote_enabled=self.remote_enabled)
        if classified.route is EntryRoute.REMOTE:
            try:
                location = RemoteLocation.parse(classified.value)
            except RemoteLocationError:
                return False
            return location in self._remote_bases

        if not classified.value:
            return False
        try:
            canonical = self._filesystem.canonicalize(classified.value)
        except (OSError, ValueError):
            # e.g. text with an embedded NUL cannot name any directory
            return False
        return canonical in self._directories

    def find(self, name: str) -> FoundEntry:
        """Find the first entry of any kind called `name`.

        Raises:
            EntryNotFoundError: If nothing matches.
            SearchScanError: If an admitted directory cannot be enumerated.
        """

        return self.find_type(name, EntryKind.ANY)

    def find_type(self, name: str, kind: EntryKind) -> FoundEntry:
        """Find the first entry called `name` that is of `kind`.

        Directories are scanned in insertion order and only their immediate
        children are compared, by exact filename. Remote bases are consulted
        afterwards for `RESOURCE` and `ANY` lookups when the remote capability
        is enabled.

        Raises:
            EntryNotFoundError: If nothing matches.
            SearchScanError: If an admitted directory cannot be enumerated.
        """

        found: FoundEntry | None = None
        if kind.is_local:
            found = self._find_local(name, kind)
        if found is None and kind.is_remote and self.remote_enabled:
            found = self._find_remote(name)

        if found is None:
            self._logger.log_not_found(self._name, name, kind.value)
            raise EntryNotFoundError(kind=kind, name=name, search_path_name=self._name)

        self._logger.log_found(self._name, name, found.kind.value, found.location)
        return found

    def validate(self) -> list[PathViolation]:
        """Re-check every admitted entry and report those that no longer qualify.

        Nothing is removed. Remote bases are probed only when the remote
        capability is enabled; an unreachable base is reported as not existing.
        """

        violations: list[PathViolation] = []
        for directory in self._directories:
            text = str(directory)
            if not self._filesystem.exists(text):
                violations.append(PathViolation(entry=text, kind=ViolationKind.DOES_NOT_EXIST))
            elif not self._filesystem.is_directory(text) or not self._filesystem.is_readable(text):
                violations.append(PathViolation(entry=text, kind=ViolationKind.CANNOT_READ))

        if self.remote_enabled:
            for base in self._remote_bases:
                result = self._prober.probe(base)
                self._logger.log_probe(
                    self._name, result.url, result.reachable, result.status_code, result.failure_kind
                )
                if not result.reachable:
                    violations.append(
                        PathViolation(entry=base.url, kind=ViolationKind.DOES_NOT_EXIST)
                    )
        return violations

    def _add_from_variable(self, var_name: str, delimiter: str) -> None:
        value = self._environ.get(var_name)
        if value is None:
            return
        for part in value.split(delimiter):
            self.add(part)

    def _directory_rejection_reason(self, text: str) -> str | None:
        """Return why `text` cannot be admitted as a directory, or `None`."""

        if not self._filesystem.exists(text):
            return "does_not_exist"
        if not self._filesystem.is_directory(text):
            return "not_a_directory"
        if not self._filesystem.is_readable(text):
            return "cannot_read"
        return None

    def _find_local(self, name: str, kind: EntryKind) -> FoundEntry | None:
        for directory in self._directories:
            try:
                found = self._match_in_directory(directory, name, kind)
            except OSError as exc:
                self._logger.log_scan_error(self._name, directory, type(exc).__name__)
                raise SearchScanError(
                    directory=directory,
                    name=name,
                    search_path_name=self._name,
                    detail=str(exc),
                ) from exc
            if found is not None:
                return found
        return None

    def _match_in_directory(
        self, directory: Path, name: str, kind: EntryKind
    ) -> FoundEntry | None:
        """Return the child of `directory` called `name` if it is of `kind`.

        Only the child whose name matches has its metadata read.
        """

        for child in self._filesystem.list_children(directory):
            if child.name != name:
                continue
            if kind is EntryKind.ANY:
                found_kind = EntryKind.DIRECTORY if child.is_directory() else EntryKind.FILE
                return FoundEntry(kind=found_kind, location=child.path)
            if kind is EntryKind.DIRECTORY and child.is_directory():
                return FoundEntry(kind=EntryKind.DIRECTORY, location=child.path)
            if kind is EntryKind.FILE and child.is_file():
                return FoundEntry(kind=EntryKind.FILE, location=child.path)
        return None

    def _find_remote(self, name: str) -> FoundEntry | None:
        for base in self._remote_bases:
            try:
                candidate = base.join(name)
            except RemoteLocationError:
                # name resolved to a non-http location, e.g. "ftp://host/x"
                continue
            result = self._prober.probe(candidate)
            self._logger.log_probe(
                self._name, result.url, result.reachable, result.status_code, result.failure_kind
            )
            if result.reachable:
                return FoundEntry(kind=EntryKind.RESOURCE, location=candidate.url)
        return None

    def __str__(self) -> str:
        directories = [str(directory) for directory in self._directories]
        text = f"Search Path '{self._name}': Directories: {directories}"
        if self.remote_enabled:
            urls = [base.url for base in self._remote_bases]
            text += f", URLs: {urls}"
        return text

    def __repr__(self) -> str:
        return (
            f"SearchPath(name={self._name!r}, delimiter={self.delimiter!r}, "
            f"directories={len(self._directories)}, remote_bases={len(self._remote_bases)})"
        )
