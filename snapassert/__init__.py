"""Fluent path, file content and snapshot assertions for test suites."""

from snapassert.api import assert_that, assert_that_path, assert_that_string
from snapassert.comparison import MatchResult, compare_file_content, normalize_and_compare
from snapassert.configuration import AssertionConfig, ConfigLoadError, is_running_under_ci, load_assertion_config
from snapassert.exceptions import (
    AssertionFailure,
    ContentMismatch,
    ExistenceViolation,
    NotDirectory,
    NotFound,
    SetMismatch,
)
from snapassert.path_assert import PathAssert
from snapassert.string_assert import StringAssert
from snapassert.text import convert_line_separators, trim_indent

__all__ = [
    "AssertionConfig",
    "AssertionFailure",
    "ConfigLoadError",
    "ContentMismatch",
    "ExistenceViolation",
    "MatchResult",
    "NotDirectory",
    "NotFound",
    "PathAssert",
    "SetMismatch",
    "StringAssert",
    "assert_that",
    "assert_that_path",
    "assert_that_string",
    "compare_file_content",
    "convert_line_separators",
    "is_running_under_ci",
    "load_assertion_config",
    "normalize_and_compare",
    "trim_indent",
]
