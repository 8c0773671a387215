from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for building websites and faking external probes.
"""

import os
import sys
from pathlib import Path
from typing import Callable, Dict, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from linkup.infra.network.probe_client import ProbeResult  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
class FakeProber:
    """
    Deterministic stand-in for the HTTP probe client.

    URLs listed in 'statuses' answer with that code, URLs listed in
    'failures' raise a transport error, anything else answers 200.
    """

    def __init__(self, statuses: Dict[str, int] = None, failures: List[str] = None) -> None:
        self.statuses = statuses or {}
        self.failures = set(failures or [])
        self.calls: List[str] = []

    def __call__(self, url: str) -> ProbeResult:
        self.calls.append(url)
        if url in self.failures:
            return ProbeResult(url=url, error="connection refused")
        return ProbeResult(url=url, status_code=self.statuses.get(url, 200))


@pytest.fixture
def fake_prober() -> FakeProber:
    """Return a prober where every URL is reachable."""
    return FakeProber()


@pytest.fixture
def write_site(tmp_path: Path) -> Callable[[Dict[str, str]], Path]:
    """
    Return a helper that materializes a website under tmp_path.

    The helper takes a mapping of site-relative paths to file contents.
    """
    def _write(files: Dict[str, str]) -> Path:
        root = tmp_path / "site"
        for rel, content in files.items():
            target = root / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        root.mkdir(exist_ok=True)
        return root
    return _write


@pytest.fixture
def prober_factory() -> Callable[..., FakeProber]:
    """Return the FakeProber class for tests that need custom answers."""
    return FakeProber
