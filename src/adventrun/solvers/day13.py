# topmark:header:start
#
#   project      : AdventRun
#   file         : day13.py
#   file_relpath : src/adventrun/solvers/day13.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Day 13: Point of Incidence."""

from __future__ import annotations

from adventrun.registry.solvers import SolverEntry
from adventrun.solvers.common import PuzzleInputError, blocks


def mismatches(a: str, b: str) -> int:
    return sum(x != y for x, y in zip(a, b))


def reflection_line(rows: list[str], smudges: int) -> int:
    """Return the number of rows above a horizontal mirror, or 0 if there is none.

    A mirror is accepted when the reflected rows differ in exactly ``smudges``
    characters in total.
    """
    for r in range(1, len(rows)):
        above = rows[:r][::-1]
        below = rows[r:]
        if sum(mismatches(a, b) for a, b in zip(above, below)) == smudges:
            return r
    return 0


def summarize(pattern: list[str], smudges: int) -> int:
    row = reflection_line(pattern, smudges)
    if row:
        return 100 * row
    columns = ["".join(col) for col in zip(*pattern)]
    column = reflection_line(columns, smudges)
    if column:
        return column
    raise PuzzleInputError(f"no line of reflection with {smudges} smudge(s) in pattern")


def part1(text: str) -> int:
    return sum(summarize(p, 0) for p in blocks(text))


def part2(text: str) -> int:
    return sum(summarize(p, 1) for p in blocks(text))


ENTRY = SolverEntry(day=13, part1=part1, part2=part2, title="Point of Incidence")
