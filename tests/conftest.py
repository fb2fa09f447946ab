"""Shared test fixtures and collection-time capability gating for snapassert."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

from snapassert.configuration import CI_ENV_VARS


def _can_symlink() -> bool:
    """Return True when the current platform and user may create symlinks."""
    if not hasattr(os, "symlink"):
        return False
    with tempfile.TemporaryDirectory() as tmp:
        link = Path(tmp) / "link"
        try:
            link.symlink_to(Path(tmp) / "target")
        except (OSError, NotImplementedError):
            return False
    return True


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip tests whose filesystem capabilities are unavailable."""
    capability_available = {"requires_symlinks": _can_symlink()}
    reasons = {"requires_symlinks": "Symlinks cannot be created on this platform"}

    for item in items:
        required = {mark.name for mark in item.iter_markers() if mark.name in capability_available}
        for marker in sorted(required):
            if not capability_available[marker]:
                item.add_marker(pytest.mark.skip(reason=reasons[marker]))


@pytest.fixture
def clean_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove CI markers and SNAPASSERT_* overrides from the process environment."""
    for name in CI_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    for name in list(os.environ):
        if name.startswith("SNAPASSERT_"):
            monkeypatch.delenv(name, raising=False)
