# topmark:header:start
#
#   project      : AdventRun
#   file         : day21.py
#   file_relpath : src/adventrun/solvers/day21.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Day 21: Step Counter."""

from __future__ import annotations

from collections import deque

from adventrun.registry.solvers import SolverEntry
from adventrun.solvers.common import PuzzleInputError, grid

PART1_STEPS = 64
PART2_STEPS = 26501365

Position = tuple[int, int]


def find_start(rows: list[str]) -> Position:
    for r, row in enumerate(rows):
        c = row.find("S")
        if c >= 0:
            return r, c
    raise PuzzleInputError("no starting position 'S' in the map")


def distances(rows: list[str], limit: int, *, infinite: bool = False) -> dict[Position, int]:
    """Breadth-first step counts from ``S`` to every plot within ``limit`` steps.

    With ``infinite`` the map repeats in every direction; otherwise its edges are walls.
    """
    height, width = len(rows), len(rows[0])
    start = find_start(rows)
    seen = {start: 0}
    queue = deque([start])
    while queue:
        r, c = queue.popleft()
        step = seen[(r, c)] + 1
        if step > limit:
            continue
        for nr, nc in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if (nr, nc) in seen:
                continue
            if not infinite and not (0 <= nr < height and 0 <= nc < width):
                continue
            if rows[nr % height][nc % width] == "#":
                continue
            seen[(nr, nc)] = step
            queue.append((nr, nc))
    return seen


def count_reachable(seen: dict[Position, int], steps: int) -> int:
    # A plot reached early can be revisited by stepping back and forth, so only parity matters.
    return sum(1 for d in seen.values() if d <= steps and d % 2 == steps % 2)


def reachable(rows: list[str], steps: int, *, infinite: bool = False) -> int:
    """Number of plots on which a walk of exactly ``steps`` steps can end."""
    return count_reachable(distances(rows, steps, infinite=infinite), steps)


def part1(text: str) -> int:
    return reachable(grid(text), PART1_STEPS)


def extrapolate(rows: list[str], steps: int) -> int:
    """Count reachable plots on the tiled map for a very large ``steps``.

    The count grows quadratically in the number of whole tiles crossed, so three
    samples one tile apart determine it.
    """
    size = len(rows)
    if size != len(rows[0]):
        raise PuzzleInputError(f"map must be square, got {size}x{len(rows[0])}")
    remainder, tiles = steps % size, steps // size
    samples = [remainder + k * size for k in range(3)]
    if tiles < 3:
        return reachable(rows, steps, infinite=True)
    seen = distances(rows, samples[-1], infinite=True)
    a0, a1, a2 = (count_reachable(seen, s) for s in samples)
    return a0 + tiles * (a1 - a0) + tiles * (tiles - 1) // 2 * (a2 - 2 * a1 + a0)


def part2(text: str) -> int:
    return extrapolate(grid(text), PART2_STEPS)


ENTRY = SolverEntry(day=21, part1=part1, part2=part2, title="Step Counter")
