"""Configuration for snapshot handling and failure reporting."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

CI_ENV_VARS = (
    "CI",
    "CONTINUOUS_INTEGRATION",
    "BUILD_NUMBER",
    "TEAMCITY_VERSION",
    "GITHUB_ACTIONS",
    "GITLAB_CI",
    "JENKINS_URL",
    "TF_BUILD",
)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class ConfigLoadError(ValueError):
    """Raised when assertion configuration cannot be loaded."""


class AssertionConfig(BaseModel):
    """Runtime switches for path and snapshot assertions."""

    update_snapshots: bool = False
    ci: bool = False
    content_preview_limit: int = Field(default=16 * 1024, ge=0)
    encoding: str = Field(default="utf-8", min_length=1)
    create_missing_snapshots: bool = True

    @property
    def update_mode(self) -> bool:
        """Whether snapshot mismatches overwrite the snapshot instead of failing."""
        return self.update_snapshots and not self.ci


def is_running_under_ci(environ: Mapping[str, str] | None = None) -> bool:
    """Return True when a known CI marker variable is set."""
    env = os.environ if environ is None else environ
    for name in CI_ENV_VARS:
        value = env.get(name, "").strip()
        if value and value.lower() not in _FALSE_VALUES:
            return True
    return False


def load_assertion_config(
    *,
    config_path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> AssertionConfig:
    """Load config from YAML file, apply SNAPASSERT_* overrides and detect CI.

    CI status always comes from the environment; a ``ci`` key in the file is
    ignored.
    """
    base: dict[str, Any] = {}
    if config_path is not None:
        base = _load_yaml_config(Path(config_path))
    if "ci" in base:
        logger.warning("Ignoring 'ci' in %s, CI status is detected from the environment", config_path)
        del base["ci"]

    env = dict(os.environ if environ is None else environ)
    merged = {**base, **_load_env_overrides(env), "ci": is_running_under_ci(env)}
    try:
        config = AssertionConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigLoadError(f"Invalid assertion config: {exc}") from exc
    logger.debug("Loaded assertion config: update_mode=%s ci=%s", config.update_mode, config.ci)
    return config


def _load_yaml_config(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigLoadError(f"Config file is not valid UTF-8: {path}") from exc
    if not text.strip():
        return {}
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        if mark is not None:
            raise ConfigLoadError(f"Invalid YAML at {path}:{mark.line + 1}:{mark.column + 1}") from exc
        raise ConfigLoadError(f"Invalid YAML at {path}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Config root must be mapping: {path}")
    section = data.get("snapassert", data)
    if not isinstance(section, dict):
        raise ConfigLoadError(f"'snapassert' section must be mapping: {path}")
    return dict(section)


def _parse_flag(value: str) -> bool:
    normalized = value.strip().lower()
    if normalized not in _TRUE_VALUES | _FALSE_VALUES:
        raise ValueError(f"invalid boolean value: {value}")
    return normalized in _TRUE_VALUES


_ENV_FIELDS: dict[str, Callable[[str], Any]] = {
    "update_snapshots": _parse_flag,
    "content_preview_limit": int,
    "encoding": str,
    "create_missing_snapshots": _parse_flag,
}


def _load_env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for field_name, parse in _ENV_FIELDS.items():
        env_name = f"SNAPASSERT_{field_name.upper()}"
        raw = environ.get(env_name, "")
        if not raw:
            continue
        try:
            overrides[field_name] = parse(raw)
        except ValueError as exc:
            raise ConfigLoadError(f"{env_name}: {exc}") from exc
    return overrides
