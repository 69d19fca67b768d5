# topmark:header:start
#
#   project      : AdventRun
#   file         : day12.py
#   file_relpath : src/adventrun/solvers/day12.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Day 12: Hot Springs.

Arrangements are counted with a memoised walk over (position, group index):
a ``.`` skips one spring, a ``#`` must start a whole damaged group followed
by an operational spring or the end of the row. ``?`` tries both.
"""

from __future__ import annotations

from functools import cache

from adventrun.registry.solvers import SolverEntry
from adventrun.solvers.common import PuzzleInputError, ints, lines

_SPRINGS = frozenset(".#?")


def arrangements(springs: str, groups: tuple[int, ...]) -> int:
    n = len(springs)

    @cache
    def count(i: int, j: int) -> int:
        if j == len(groups):
            return 0 if "#" in springs[i:] else 1
        if i >= n:
            return 0
        total = 0
        ch = springs[i]
        if ch in ".?":
            total += count(i + 1, j)
        if ch in "#?":
            end = i + groups[j]
            if end <= n and "." not in springs[i:end] and (end == n or springs[end] != "#"):
                total += count(end + 1, j + 1)
        return total

    return count(0, 0)


def parse_row(line: str) -> tuple[str, tuple[int, ...]]:
    parts = line.split()
    if len(parts) != 2 or set(parts[0]) - _SPRINGS:
        raise PuzzleInputError(f"malformed condition record: {line!r}")
    return parts[0], tuple(ints(parts[1]))


def unfold(springs: str, groups: tuple[int, ...], times: int = 5) -> tuple[str, tuple[int, ...]]:
    return "?".join([springs] * times), groups * times


def part1(text: str) -> int:
    return sum(arrangements(*parse_row(line)) for line in lines(text))


def part2(text: str) -> int:
    return sum(arrangements(*unfold(*parse_row(line))) for line in lines(text))


ENTRY = SolverEntry(day=12, part1=part1, part2=part2, title="Hot Springs")
