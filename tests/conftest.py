"""Shared pytest fixtures for the full searchpath test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.fakes import RecordingProber


@pytest.fixture
def search_root(tmp_path: Path) -> Path:
    """Provide a canonical temporary directory to admit into search paths."""

    root = tmp_path / "root"
    root.mkdir()
    return root.resolve()


@pytest.fixture
def recording_prober() -> RecordingProber:
    """Provide a probe double with nothing reachable until configured."""

    return RecordingProber()
