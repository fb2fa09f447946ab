"""Assertion failures raised by snapassert facades.

Every failure subclasses ``AssertionError`` so test runners report it as a
regular test failure rather than an error.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from snapassert.text import unified_diff


class AssertionFailure(AssertionError):
    """Base class for all snapassert assertion failures."""

    pass


class ExistenceViolation(AssertionFailure):
    """Raised when a path exists but was expected to be absent."""

    def __init__(self, path: Path, content: str | None = None) -> None:
        self.path = path
        self.content = content
        message = f"Expecting path:\n\t{path}\nnot to exist"
        if content is not None:
            message += f", content:\n\n{content}\n"
        super().__init__(message)


class NotFound(AssertionFailure):
    """Raised when an expected file is missing or is not a regular file."""

    def __init__(self, path: Path, reason: str = "to exist") -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Expecting path:\n\t{path}\n{reason}")


class NotDirectory(AssertionFailure):
    """Raised when an expected directory is missing or has the wrong type."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Expecting path:\n\t{path}\nto be a directory")


class ContentMismatch(AssertionFailure):
    """Raised when two texts differ after normalization.

    ``expected`` and ``actual`` are kept verbatim (post-normalization) so a
    reporter can render its own diff; the message already carries a unified one.
    """

    def __init__(self, expected: str, actual: str, path: Path | None = None) -> None:
        self.expected = expected
        self.actual = actual
        self.path = path
        header = "Content mismatch" if path is None else f"Content mismatch for {path}"
        super().__init__(f"{header}\n{unified_diff(expected, actual)}")


class SetMismatch(AssertionFailure):
    """Raised when directory children differ from the expected names."""

    def __init__(
        self,
        path: Path,
        *,
        missing: Sequence[str] = (),
        unexpected: Sequence[str] = (),
        duplicates: Sequence[str] = (),
    ) -> None:
        self.path = path
        self.missing = list(missing)
        self.unexpected = list(unexpected)
        self.duplicates = list(duplicates)
        lines = [f"Expecting directory:\n\t{path}\nto contain only the given children"]
        if self.missing:
            lines.append(f"but could not find: {self.missing}")
        if self.unexpected:
            lines.append(f"and found unexpected: {self.unexpected}")
        if self.duplicates:
            lines.append(f"duplicate expected names: {self.duplicates}")
        super().__init__("\n".join(lines))
