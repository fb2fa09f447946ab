"""Unit tests for assertion configuration loading."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from snapassert.configuration import (
    CI_ENV_VARS,
    AssertionConfig,
    ConfigLoadError,
    is_running_under_ci,
    load_assertion_config,
)


def test_defaults() -> None:
    config = AssertionConfig()
    assert config.update_snapshots is False
    assert config.ci is False
    assert config.content_preview_limit == 16384
    assert config.update_mode is False


def test_update_mode_requires_opt_in_outside_ci() -> None:
    assert AssertionConfig(update_snapshots=True).update_mode is True
    assert AssertionConfig(update_snapshots=True, ci=True).update_mode is False


def test_negative_preview_limit_rejected() -> None:
    with pytest.raises(ValidationError):
        AssertionConfig(content_preview_limit=-1)


@pytest.mark.parametrize("name", CI_ENV_VARS)
def test_is_running_under_ci_detects_markers(name: str) -> None:
    assert is_running_under_ci({name: "1"}) is True


@pytest.mark.parametrize("value", ["", "0", "false", "No", " off "])
def test_is_running_under_ci_ignores_false_like_values(value: str) -> None:
    assert is_running_under_ci({"CI": value}) is False


def test_load_uses_env_overrides() -> None:
    config = load_assertion_config(
        environ={
            "SNAPASSERT_UPDATE_SNAPSHOTS": "yes",
            "SNAPASSERT_CONTENT_PREVIEW_LIMIT": "10",
            "SNAPASSERT_ENCODING": "latin-1",
            "SNAPASSERT_CREATE_MISSING_SNAPSHOTS": "false",
        }
    )
    assert config.update_snapshots is True
    assert config.content_preview_limit == 10
    assert config.encoding == "latin-1"
    assert config.create_missing_snapshots is False
    assert config.update_mode is True


def test_load_under_ci_disables_update_mode_even_with_opt_in() -> None:
    config = load_assertion_config(environ={"SNAPASSERT_UPDATE_SNAPSHOTS": "1", "TEAMCITY_VERSION": "2023.1"})
    assert config.update_snapshots is True
    assert config.ci is True
    assert config.update_mode is False


def test_load_invalid_bool_raises() -> None:
    with pytest.raises(ConfigLoadError, match="SNAPASSERT_UPDATE_SNAPSHOTS"):
        load_assertion_config(environ={"SNAPASSERT_UPDATE_SNAPSHOTS": "maybe"})


def test_load_yaml_section_then_env_wins(tmp_path: Path) -> None:
    target = tmp_path / "snapassert.yaml"
    target.write_text("snapassert:\n  update_snapshots: true\n  content_preview_limit: 5\n", encoding="utf-8")
    config = load_assertion_config(config_path=target, environ={"SNAPASSERT_CONTENT_PREVIEW_LIMIT": "7"})
    assert config.update_snapshots is True
    assert config.content_preview_limit == 7


def test_load_yaml_flat_mapping(tmp_path: Path) -> None:
    target = tmp_path / "snapassert.yaml"
    target.write_text("encoding: utf-16\n", encoding="utf-8")
    assert load_assertion_config(config_path=target, environ={}).encoding == "utf-16"


def test_load_missing_or_empty_yaml_uses_defaults(tmp_path: Path) -> None:
    assert load_assertion_config(config_path=tmp_path / "missing.yaml", environ={}) == AssertionConfig()
    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")
    assert load_assertion_config(config_path=empty, environ={}) == AssertionConfig()


def test_load_yaml_error_has_line_column(tmp_path: Path) -> None:
    target = tmp_path / "snapassert.yaml"
    target.write_text("snapassert:\n  update_snapshots: [\n", encoding="utf-8")
    with pytest.raises(ConfigLoadError, match="snapassert.yaml:"):
        load_assertion_config(config_path=target, environ={})


def test_load_yaml_non_mapping_root_raises(tmp_path: Path) -> None:
    target = tmp_path / "snapassert.yaml"
    target.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigLoadError, match="root must be mapping"):
        load_assertion_config(config_path=target, environ={})


def test_load_invalid_env_value_raises_config_error() -> None:
    with pytest.raises(ConfigLoadError, match="content_preview_limit"):
        load_assertion_config(environ={"SNAPASSERT_CONTENT_PREVIEW_LIMIT": "-1"})


def test_load_invalid_yaml_value_raises_config_error(tmp_path: Path) -> None:
    target = tmp_path / "snapassert.yaml"
    target.write_text("update_snapshots: maybe\n", encoding="utf-8")
    with pytest.raises(ConfigLoadError, match="update_snapshots"):
        load_assertion_config(config_path=target, environ={})


def test_load_non_utf8_yaml_raises_config_error(tmp_path: Path) -> None:
    target = tmp_path / "snapassert.yaml"
    target.write_bytes(b"encoding: \xff\xfe\n")
    with pytest.raises(ConfigLoadError, match="not valid UTF-8"):
        load_assertion_config(config_path=target, environ={})


def test_load_ignores_ci_key_in_yaml(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    target = tmp_path / "snapassert.yaml"
    target.write_text("ci: true\nupdate_snapshots: true\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="snapassert"):
        config = load_assertion_config(config_path=target, environ={})
    assert config.ci is False
    assert config.update_mode is True
    assert "Ignoring 'ci'" in caplog.text
