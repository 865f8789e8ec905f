"""Integration-test fixtures that keep search path tests off the network."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _block_remote_probes(monkeypatch: pytest.MonkeyPatch) -> None:
    """Fail loudly if an integration test reaches the real HTTP prober."""

    def _unexpected_head(url: str, **kwargs: object) -> None:
        """Reject any unmocked network probe."""

        _ = kwargs
        raise AssertionError(f"Unexpected network probe for {url}")

    monkeypatch.setattr("searchpath.remote.requests.head", _unexpected_head)
