"""pytest integration: ``--update-snapshots`` option and snapshot fixtures."""

from __future__ import annotations

import re
from collections.abc import Callable
from pathlib import Path

import pytest

from snapassert.configuration import AssertionConfig, load_assertion_config
from snapassert.string_assert import StringAssert

SNAPSHOT_DIR_NAME = "__snapshots__"

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_.-]+")


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("snapassert")
    group.addoption(
        "--update-snapshots",
        action="store_true",
        default=False,
        help="Rewrite mismatching snapshot files instead of failing (ignored under CI).",
    )
    parser.addini("snapassert_config", help="Path to a YAML file with snapassert settings.", default="")


@pytest.fixture(scope="session")
def assertion_config(pytestconfig: pytest.Config) -> AssertionConfig:
    """Session-wide assertion config from ini file, environment and CLI option."""
    config_file = str(pytestconfig.getini("snapassert_config") or "").strip()
    config_path = Path(pytestconfig.rootpath) / config_file if config_file else None
    config = load_assertion_config(config_path=config_path)
    if pytestconfig.getoption("update_snapshots"):
        config = config.model_copy(update={"update_snapshots": True})
    return config


def snapshot_path_for(node_path: Path, test_name: str, name: str | None = None) -> Path:
    """Return the snapshot file used by one test (and optional sub-name)."""
    stem = _UNSAFE_CHARS.sub("_", test_name).strip("_")
    if name:
        stem = f"{stem}-{_UNSAFE_CHARS.sub('_', name).strip('_')}"
    return node_path.parent / SNAPSHOT_DIR_NAME / node_path.stem / f"{stem}.txt"


@pytest.fixture
def snapshot(request: pytest.FixtureRequest, assertion_config: AssertionConfig) -> Callable[..., StringAssert]:
    """Match a string against this test's snapshot file."""

    def _match(actual: str, name: str | None = None) -> StringAssert:
        target = snapshot_path_for(Path(request.node.path), request.node.name, name)
        return StringAssert(actual, assertion_config).matches_snapshot(target)

    return _match
