"""Classification of raw entry strings into admission routes."""

from __future__ import annotations

from urllib.parse import unquote, urlsplit

from .errors import RemoteLocationError
from .models.datatypes import ClassifiedEntry, EntryRoute
from .remote import REMOTE_SCHEMES, RemoteLocation


_FILE_SCHEME = "file"


def classify_entry(text: str, *, remote_enabled: bool) -> ClassifiedEntry:
    """Select the admission route for one raw entry string.

    `http`/`https` locations with a host route to remote admission, `file`
    locations route to directory admission of their decoded path, and
    everything else (including any string when remote support is disabled) is
    treated as a directory path verbatim. Never raises.
    """

    as_directory = ClassifiedEntry(route=EntryRoute.DIRECTORY, value=text, original=text)
    if not remote_enabled:
        return as_directory

    try:
        scheme = urlsplit(text).scheme.lower()
    except ValueError:
        return as_directory

    if scheme in REMOTE_SCHEMES:
        try:
            location = RemoteLocation.parse(text)
        except RemoteLocationError:
            return as_directory
        return ClassifiedEntry(route=EntryRoute.REMOTE, value=location.url, original=text)

    if scheme == _FILE_SCHEME:
        return ClassifiedEntry(
            route=EntryRoute.DIRECTORY,
            value=unquote(urlsplit(text).path),
            original=text,
        )

    return as_directory
