"""Shared content comparison used by path and string assertions."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from snapassert.exceptions import ContentMismatch, NotFound
from snapassert.text import DEFAULT_ENCODING, convert_line_separators, read_text, trim_indent, unified_diff, write_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchResult:
    """Normalized expected/actual pair and whether they matched."""

    expected: str
    actual: str
    matched: bool

    def diff(self) -> str:
        """Return a unified diff of expected vs actual."""
        return unified_diff(self.expected, self.actual)

    def raise_for_mismatch(self, path: Path | None = None) -> None:
        """Raise ContentMismatch when the texts differ."""
        if not self.matched:
            raise ContentMismatch(self.expected, self.actual, path)


def normalize_and_compare(
    expected: str,
    actual: str,
    *,
    trim_expected: bool = True,
    normalize_expected: bool = False,
) -> MatchResult:
    """Compare texts after normalizing line separators on the actual side.

    ``trim_expected`` strips common indentation from an expected literal;
    ``normalize_expected`` also converts its line separators, which is what
    file-sourced expectations need.
    """
    if normalize_expected:
        expected = convert_line_separators(expected)
    if trim_expected:
        expected = trim_indent(expected)
    actual = convert_line_separators(actual)
    return MatchResult(expected=expected, actual=actual, matched=expected == actual)


def compare_file_content(
    actual: str,
    path: Path,
    *,
    update_if_mismatch: bool = False,
    encoding: str = DEFAULT_ENCODING,
) -> MatchResult:
    """Compare ``actual`` with the text stored at ``path``.

    On mismatch the file is overwritten with ``actual`` when
    ``update_if_mismatch`` is set, otherwise ContentMismatch is raised.
    """
    if not path.is_file():
        raise NotFound(path, "to be a regular file")
    expected = read_text(path, encoding)
    result = normalize_and_compare(expected, actual, trim_expected=False, normalize_expected=True)
    if result.matched:
        return result
    if update_if_mismatch:
        logger.warning("Content of %s does not match, updating it", path)
        write_text(path, actual, encoding)
        return result
    raise ContentMismatch(result.expected, result.actual, path)
