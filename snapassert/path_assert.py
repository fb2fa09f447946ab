"""Fluent assertions on filesystem paths."""

from __future__ import annotations

import os
from pathlib import Path, PurePath

from snapassert.comparison import normalize_and_compare
from snapassert.configuration import AssertionConfig
from snapassert.exceptions import AssertionFailure, ExistenceViolation, NotDirectory, NotFound, SetMismatch
from snapassert.text import read_text

ChildName = str | os.PathLike[str]


class PathAssert:
    """Assertions about one path: existence, text content and directory listing."""

    def __init__(self, actual: str | os.PathLike[str] | None, config: AssertionConfig | None = None) -> None:
        self.actual = Path(actual) if actual is not None else None
        self.config = config or AssertionConfig()

    def _path(self) -> Path:
        if self.actual is None:
            raise AssertionFailure("Expecting actual path not to be None")
        return self.actual

    def exists(self) -> PathAssert:
        """Assert the path exists, following symlinks."""
        path = self._path()
        if not path.exists():
            raise NotFound(path)
        return self

    def is_regular_file(self) -> PathAssert:
        """Assert the path is an existing regular file."""
        path = self._path()
        if not path.is_file():
            reason = "to be a regular file" if path.exists() else "to exist"
            raise NotFound(path, reason)
        return self

    def is_directory(self) -> PathAssert:
        """Assert the path is an existing directory."""
        path = self._path()
        if not path.is_dir():
            raise NotDirectory(path)
        return self

    def does_not_exist(self) -> PathAssert:
        """Assert nothing exists at the path, without following symlinks.

        When a small regular file is found its content is included in the
        failure message.
        """
        path = self._path()
        if not os.path.lexists(path):
            return self
        content: str | None = None
        if path.is_file() and path.stat().st_size < self.config.content_preview_limit:
            content = path.read_text(encoding=self.config.encoding, errors="replace")
        raise ExistenceViolation(path, content)

    def has_content(self, expected: str) -> PathAssert:
        """Assert the file text equals ``expected`` after indent stripping."""
        return self.is_equal_to(expected)

    def is_equal_to(self, expected: str) -> PathAssert:
        """Assert the file text equals ``expected`` after indent stripping."""
        self.is_regular_file()
        path = self._path()
        result = normalize_and_compare(expected, read_text(path, self.config.encoding))
        result.raise_for_mismatch(path)
        return self

    def has_children(self, *names: ChildName) -> PathAssert:
        """Assert the directory's immediate children are exactly ``names``.

        A ``str`` name matches any child whose path ends with it component-wise,
        so ``"a.txt"`` matches ``<dir>/a.txt``. A path-like name must equal the
        child path.
        """
        self.is_directory()
        path = self._path()
        children = sorted(path.iterdir())

        duplicates = _duplicate_names(names)
        if duplicates:
            raise SetMismatch(path, duplicates=duplicates)

        matched_children: set[Path] = set()
        missing: list[str] = []
        for name in names:
            hits = [child for child in children if _child_matches(child, name)]
            if not hits:
                missing.append(os.fspath(name))
            matched_children.update(hits)
        unexpected = [child.name for child in children if child not in matched_children]
        if missing or unexpected:
            raise SetMismatch(path, missing=missing, unexpected=unexpected)
        return self


def _child_matches(child: Path, name: ChildName) -> bool:
    if isinstance(name, os.PathLike):
        return child == Path(name)
    suffix = PurePath(name).parts
    if not suffix:
        return False
    return child.parts[-len(suffix) :] == suffix


def _duplicate_names(names: tuple[ChildName, ...]) -> list[str]:
    seen: set[object] = set()
    duplicates: list[str] = []
    for name in names:
        key: object = Path(name) if isinstance(name, os.PathLike) else name
        if key in seen:
            duplicates.append(os.fspath(name))
        seen.add(key)
    return duplicates
