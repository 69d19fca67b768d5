# topmark:header:start
#
#   project      : AdventRun
#   file         : day11.py
#   file_relpath : src/adventrun/solvers/day11.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Day 11: Cosmic Expansion.

Every empty row and column is replaced by ``factor`` empty rows/columns. The
pairwise Manhattan distance splits into independent row and column sums, each
computed in one pass over the sorted coordinates.
"""

from __future__ import annotations

from adventrun.registry.solvers import SolverEntry
from adventrun.solvers.common import PuzzleInputError, grid


def expand(coords: list[int], factor: int) -> list[int]:
    """Return sorted coordinates after widening each gap by ``factor``."""
    occupied = sorted(set(coords))
    shift: dict[int, int] = {}
    empty_before = 0
    previous = -1
    for value in occupied:
        empty_before += value - previous - 1
        shift[value] = value + empty_before * (factor - 1)
        previous = value
    return sorted(shift[c] for c in coords)


def pairwise_sum(sorted_coords: list[int]) -> int:
    n = len(sorted_coords)
    return sum(x * (2 * i - n + 1) for i, x in enumerate(sorted_coords))


def total_distance(text: str, factor: int) -> int:
    """Sum of shortest paths between all galaxy pairs for an expansion ``factor``."""
    if factor < 1:
        raise ValueError(f"expansion factor must be >= 1, got {factor}")
    galaxies = [(r, c) for r, row in enumerate(grid(text)) for c, ch in enumerate(row) if ch == "#"]
    if not galaxies:
        raise PuzzleInputError("no galaxies in the image")
    rows = expand([r for r, _ in galaxies], factor)
    cols = expand([c for _, c in galaxies], factor)
    return pairwise_sum(rows) + pairwise_sum(cols)


def part1(text: str) -> int:
    return total_distance(text, 2)


def part2(text: str) -> int:
    return total_distance(text, 1_000_000)


ENTRY = SolverEntry(day=11, part1=part1, part2=part2, title="Cosmic Expansion")
