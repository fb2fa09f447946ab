"""Text normalization and file text helpers shared by the assertion facades."""

from __future__ import annotations

import difflib
from pathlib import Path

DEFAULT_ENCODING = "utf-8"


def convert_line_separators(text: str) -> str:
    """Convert ``\\r\\n`` and lone ``\\r`` separators to ``\\n``."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def trim_indent(text: str) -> str:
    """Strip the minimal common indentation from a multi-line literal.

    The first and last lines are dropped when blank, so a literal written as
    ``\"\"\"\\n    a\\n    b\\n    \"\"\"`` becomes ``"a\\nb"``. Blank lines do not
    take part in computing the common indent. Any line separator style is
    accepted and the result is joined with ``\\n``.
    """
    lines = convert_line_separators(text).split("\n")
    indents = [_indent_width(line) for line in lines if line.strip()]
    min_indent = min(indents) if indents else 0
    last_index = len(lines) - 1
    result: list[str] = []
    for index, line in enumerate(lines):
        if index in (0, last_index) and not line.strip():
            continue
        result.append(line[min_indent:])
    return "\n".join(result)


def _indent_width(line: str) -> int:
    return len(line) - len(line.lstrip())


def read_text(path: Path, encoding: str = DEFAULT_ENCODING) -> str:
    """Read a file's text without newline translation."""
    with path.open("r", encoding=encoding, newline="") as handle:
        return handle.read()


def write_text(path: Path, text: str, encoding: str = DEFAULT_ENCODING) -> None:
    """Write text verbatim, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding=encoding, newline="") as handle:
        handle.write(text)


def unified_diff(expected: str, actual: str) -> str:
    """Render a unified diff from ``expected`` to ``actual``."""
    diff = difflib.unified_diff(
        expected.splitlines(keepends=True),
        actual.splitlines(keepends=True),
        fromfile="expected",
        tofile="actual",
    )
    rendered = "".join(line if line.endswith("\n") else f"{line}\n" for line in diff)
    if rendered:
        return rendered
    return f"expected: {expected!r}\nactual:   {actual!r}\n"
