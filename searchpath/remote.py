"""Remote base locations and HTTP reachability probing.

Responsibilities:
- Parse and normalize `http`/`https` base locations.
- Join a bare resource name onto a base location.
- Probe a candidate location with a header-only request that never follows
  redirects, classifying only 2xx responses as reachable.
"""

from __future__ import annotations

from dataclasses import dataclass
import socket
from typing import Protocol
from urllib.parse import urljoin, urlsplit, urlunsplit

import requests

from .errors import RemoteLocationError


REMOTE_SCHEMES = frozenset({"http", "https"})


@dataclass(frozen=True, slots=True)
class RemoteLocation:
    """A normalized `http`/`https` location.

    Scheme and host name are lowercased and an empty path becomes `/`, so two
    spellings of the same base compare equal. Credentials keep their case.

    Attributes:
        scheme: `http` or `https`.
        host: Network location, including port and credentials when present.
        path: Path component, never empty.
        query: Query string without the leading `?`.
    """

    scheme: str
    host: str
    path: str = "/"
    query: str = ""

    @classmethod
    def parse(cls, text: str) -> RemoteLocation:
        """Parse text into a remote location.

        Raises:
            RemoteLocationError: If the text has no supported scheme, no host
                or an invalid port.
        """

        try:
            parts = urlsplit(text.strip())
        except ValueError as exc:
            raise RemoteLocationError(f"'{text}' is not a valid URL: {exc}") from exc

        scheme = parts.scheme.lower()
        if scheme not in REMOTE_SCHEMES:
            raise RemoteLocationError(f"'{text}' does not use an http or https scheme.")
        hostname = parts.hostname
        if not hostname:
            raise RemoteLocationError(f"'{text}' has no host.")
        try:
            port = parts.port
        except ValueError as exc:
            raise RemoteLocationError(f"'{text}' has an invalid port: {exc}") from exc

        # only the host name is case-insensitive; credentials keep their spelling
        host = f"[{hostname}]" if ":" in hostname else hostname
        if port is not None:
            host = f"{host}:{port}"
        userinfo, at_sign, _ = parts.netloc.rpartition("@")
        if at_sign:
            host = f"{userinfo}@{host}"

        return cls(
            scheme=scheme,
            host=host,
            path=parts.path or "/",
            query=parts.query,
        )

    @property
    def url(self) -> str:
        """Return the location as URL text."""

        return urlunsplit((self.scheme, self.host, self.path, self.query, ""))

    def join(self, name: str) -> RemoteLocation:
        """Resolve `name` against this location using standard URL reference rules."""

        return RemoteLocation.parse(urljoin(self.url, name))

    def __str__(self) -> str:
        return self.url


@dataclass(frozen=True, slots=True)
class ProbeResult:
    """Outcome of one reachability probe.

    Attributes:
        url: Probed URL text.
        reachable: Whether the response status was in the 2xx range.
        status_code: HTTP status, or `None` when no response was received.
        failure_kind: `http_status`, `timeout` or `transport` when not reachable.
    """

    url: str
    reachable: bool
    status_code: int | None = None
    failure_kind: str | None = None


class ResourceProbe(Protocol):
    """Protocol for checking whether a resource exists at a remote location."""

    def probe(self, location: RemoteLocation) -> ProbeResult:
        """Probe one location without following redirects."""


class ResourceProber:
    """requests-based `ResourceProbe` issuing `HEAD` requests."""

    def __init__(
        self,
        *,
        timeout_seconds: float = 10.0,
        user_agent: str = "searchpath",
        session: requests.Session | None = None,
    ) -> None:
        """Initialize probe settings; `session` allows connection reuse."""

        self.timeout_seconds = timeout_seconds
        self.user_agent = user_agent
        self.session = session

    def probe(self, location: RemoteLocation) -> ProbeResult:
        """Send a `HEAD` request and classify the response.

        Transport failures are reported as not reachable rather than raised.
        """

        url = location.url
        head = self.session.head if self.session is not None else requests.head
        try:
            response = head(
                url,
                allow_redirects=False,
                timeout=self.timeout_seconds,
                headers={"User-Agent": self.user_agent},
            )
        except (requests.RequestException, OSError) as exc:
            return ProbeResult(
                url=url,
                reachable=False,
                failure_kind=self._classify_transport_failure(exc),
            )

        status_code = int(response.status_code)
        if 200 <= status_code <= 299:
            return ProbeResult(url=url, reachable=True, status_code=status_code)
        return ProbeResult(
            url=url,
            reachable=False,
            status_code=status_code,
            failure_kind="http_status",
        )

    def is_reachable(self, location: RemoteLocation) -> bool:
        """Return whether a 2xx response was received from `location`."""

        return self.probe(location).reachable

    @staticmethod
    def _classify_transport_failure(reason: object) -> str:
        """Classify network-layer failures into diagnostic kinds."""

        if isinstance(reason, TimeoutError | socket.timeout | requests.Timeout):
            return "timeout"
        return "transport"
