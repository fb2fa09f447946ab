"""Entry points selecting the assertion facade for a subject."""

from __future__ import annotations

import os
from typing import overload

from snapassert.configuration import AssertionConfig
from snapassert.path_assert import PathAssert
from snapassert.string_assert import StringAssert


@overload
def assert_that(subject: str, config: AssertionConfig | None = None) -> StringAssert: ...


@overload
def assert_that(subject: os.PathLike[str], config: AssertionConfig | None = None) -> PathAssert: ...


def assert_that(
    subject: str | os.PathLike[str],
    config: AssertionConfig | None = None,
) -> StringAssert | PathAssert:
    """Return StringAssert for strings and PathAssert for path-like subjects."""
    if isinstance(subject, str):
        return StringAssert(subject, config)
    if isinstance(subject, os.PathLike):
        return PathAssert(subject, config)
    raise TypeError(f"Unsupported assertion subject: {type(subject).__name__}")


def assert_that_path(path: str | os.PathLike[str] | None, config: AssertionConfig | None = None) -> PathAssert:
    return PathAssert(path, config)


def assert_that_string(text: str | None, config: AssertionConfig | None = None) -> StringAssert:
    return StringAssert(text, config)
