"""Fluent assertions on in-memory strings, including snapshot matching."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from snapassert.comparison import compare_file_content, normalize_and_compare
from snapassert.configuration import AssertionConfig
from snapassert.exceptions import AssertionFailure, NotFound
from snapassert.text import write_text

logger = logging.getLogger(__name__)


class StringAssert:
    """Assertions comparing one string with literals, files and snapshots."""

    def __init__(self, actual: str | None, config: AssertionConfig | None = None) -> None:
        self.actual = actual
        self.config = config or AssertionConfig()

    def _text(self) -> str:
        if self.actual is None:
            raise AssertionFailure("Expecting actual string not to be None")
        return self.actual

    def is_equal_to(self, expected: str) -> StringAssert:
        """Assert equality with an expected literal after indent stripping."""
        normalize_and_compare(expected, self._text()).raise_for_mismatch()
        return self

    def is_equal_to_file(self, path: str | os.PathLike[str]) -> StringAssert:
        """Assert equality with the full text of ``path``."""
        compare_file_content(self._text(), Path(path), encoding=self.config.encoding)
        return self

    def matches_snapshot(
        self,
        snapshot_path: str | os.PathLike[str],
        config: AssertionConfig | None = None,
    ) -> StringAssert:
        """Assert equality with a snapshot file, creating it on first run.

        A mismatch rewrites the snapshot instead of failing when
        ``config.update_mode`` is on.
        """
        actual = self._text()
        config = config or self.config
        snapshot = Path(snapshot_path)
        if not os.path.lexists(snapshot):
            if not config.create_missing_snapshots:
                raise NotFound(snapshot, "to exist (snapshot creation is disabled)")
            logger.info("Write a new snapshot %s", snapshot.name)
            write_text(snapshot, actual, config.encoding)
            return self
        compare_file_content(actual, snapshot, update_if_mismatch=config.update_mode, encoding=config.encoding)
        return self
