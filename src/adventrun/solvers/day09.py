# topmark:header:start
#
#   project      : AdventRun
#   file         : day09.py
#   file_relpath : src/adventrun/solvers/day09.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Day 9: Mirage Maintenance."""

from __future__ import annotations

from adventrun.registry.solvers import SolverEntry
from adventrun.solvers.common import PuzzleInputError, ints, lines


def differences(values: list[int]) -> list[int]:
    return [b - a for a, b in zip(values, values[1:])]


def extrapolate(values: list[int]) -> int:
    """Return the next value of ``values`` by repeated differencing."""
    if not values:
        raise PuzzleInputError("empty history")
    total = 0
    while any(values):
        total += values[-1]
        values = differences(values)
        if not values:
            raise PuzzleInputError("history does not reduce to zeros")
    return total


def parse_histories(text: str) -> list[list[int]]:
    return [ints(line) for line in lines(text)]


def part1(text: str) -> int:
    return sum(extrapolate(h) for h in parse_histories(text))


def part2(text: str) -> int:
    return sum(extrapolate(h[::-1]) for h in parse_histories(text))


ENTRY = SolverEntry(day=9, part1=part1, part2=part2, title="Mirage Maintenance")
