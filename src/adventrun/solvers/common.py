# topmark:header:start
#
#   project      : AdventRun
#   file         : common.py
#   file_relpath : src/adventrun/solvers/common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parsing helpers shared by the day modules.

Solvers receive the raw file contents. These helpers normalize line endings and
surrounding blank lines so that every day tolerates a trailing newline and
``\\r\\n`` files.
"""

from __future__ import annotations

import re
from typing import Final

_INT_RE: Final[re.Pattern[str]] = re.compile(r"-?\d+")


class PuzzleInputError(ValueError):
    """Raised by solvers when the input does not match the day's format."""


def lines(text: str) -> list[str]:
    """Return the non-trailing lines of ``text`` (surrounding blank lines dropped)."""
    stripped = text.replace("\r\n", "\n").strip("\n")
    if not stripped.strip():
        raise PuzzleInputError("input is empty")
    return stripped.split("\n")


def blocks(text: str) -> list[list[str]]:
    """Split ``text`` into blank-line separated groups of lines."""
    groups: list[list[str]] = [[]]
    for line in lines(text):
        if line.strip():
            groups[-1].append(line)
        elif groups[-1]:
            groups.append([])
    return [g for g in groups if g]


def ints(line: str) -> list[int]:
    """Return all (optionally negative) integers found in ``line``."""
    return [int(m) for m in _INT_RE.findall(line)]


def grid(text: str) -> list[str]:
    """Return the rows of a rectangular character grid.

    Raises:
        PuzzleInputError: If rows have different widths.
    """
    rows = [row.rstrip() for row in lines(text)]
    width = len(rows[0])
    for number, row in enumerate(rows, start=1):
        if len(row) != width:
            raise PuzzleInputError(f"row {number} has width {len(row)}, expected {width}")
    return rows


def split_once(line: str, sep: str, *, what: str = "line") -> tuple[str, str]:
    """Split ``line`` on the first ``sep``.

    Raises:
        PuzzleInputError: If ``sep`` is absent.
    """
    head, found, tail = line.partition(sep)
    if not found:
        raise PuzzleInputError(f"malformed {what}: {line!r} (missing {sep!r})")
    return head, tail


def shoelace_area(vertices: list[tuple[int, int]]) -> int:
    """Return the absolute area of a simple polygon given by its vertices, in order."""
    total = 0
    for (r1, c1), (r2, c2) in zip(vertices, vertices[1:] + vertices[:1]):
        total += r1 * c2 - r2 * c1
    return abs(total) // 2
