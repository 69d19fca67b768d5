# topmark:header:start
#
#   project      : AdventRun
#   file         : day10.py
#   file_relpath : src/adventrun/solvers/day10.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Day 10: Pipe Maze.

The loop through ``S`` is traced once. Part 1 is half its length. Part 2 counts
enclosed tiles with the shoelace formula and Pick's theorem:
``interior = area - boundary / 2 + 1``.
"""

from __future__ import annotations

from adventrun.registry.solvers import SolverEntry
from adventrun.solvers.common import PuzzleInputError, grid, shoelace_area

Direction = tuple[int, int]

NORTH: Direction = (-1, 0)
SOUTH: Direction = (1, 0)
EAST: Direction = (0, 1)
WEST: Direction = (0, -1)

PIPES: dict[str, tuple[Direction, Direction]] = {
    "|": (NORTH, SOUTH),
    "-": (EAST, WEST),
    "L": (NORTH, EAST),
    "J": (NORTH, WEST),
    "7": (SOUTH, WEST),
    "F": (SOUTH, EAST),
}


def find_start(rows: list[str]) -> tuple[int, int]:
    for r, row in enumerate(rows):
        c = row.find("S")
        if c >= 0:
            return r, c
    raise PuzzleInputError("no start tile 'S' in the maze")


def start_connections(rows: list[str], start: tuple[int, int]) -> list[Direction]:
    """Return the directions from ``start`` whose neighbour pipe connects back."""
    r, c = start
    found: list[Direction] = []
    for dr, dc in (NORTH, SOUTH, EAST, WEST):
        nr, nc = r + dr, c + dc
        if not (0 <= nr < len(rows) and 0 <= nc < len(rows[0])):
            continue
        if (-dr, -dc) in PIPES.get(rows[nr][nc], ()):
            found.append((dr, dc))
    return found


def trace_loop(rows: list[str]) -> list[tuple[int, int]]:
    """Return the loop tiles in walking order, starting at ``S``."""
    start = find_start(rows)
    connections = start_connections(rows, start)
    if len(connections) != 2:
        raise PuzzleInputError(
            f"start tile connects to {len(connections)} pipes, expected exactly 2"
        )
    heading = connections[0]
    pos = start
    loop = [start]
    while True:
        pos = (pos[0] + heading[0], pos[1] + heading[1])
        if pos == start:
            return loop
        tile = rows[pos[0]][pos[1]]
        ends = PIPES.get(tile)
        back = (-heading[0], -heading[1])
        if ends is None or back not in ends:
            raise PuzzleInputError(f"loop is broken at {pos} ({tile!r})")
        heading = ends[0] if ends[1] == back else ends[1]
        loop.append(pos)


def part1(text: str) -> int:
    return len(trace_loop(grid(text))) // 2


def part2(text: str) -> int:
    loop = trace_loop(grid(text))
    return shoelace_area(loop) - len(loop) // 2 + 1


ENTRY = SolverEntry(day=10, part1=part1, part2=part2, title="Pipe Maze")
