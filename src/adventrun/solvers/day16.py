# topmark:header:start
#
#   project      : AdventRun
#   file         : day16.py
#   file_relpath : src/adventrun/solvers/day16.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Day 16: The Floor Will Be Lava."""

from __future__ import annotations

from adventrun.registry.solvers import SolverEntry
from adventrun.solvers.common import grid

Beam = tuple[int, int, int, int]


def deflect(tile: str, dr: int, dc: int) -> list[tuple[int, int]]:
    """Return the outgoing headings for a beam moving (dr, dc) into ``tile``."""
    if tile == "/":
        return [(-dc, -dr)]
    if tile == "\\":
        return [(dc, dr)]
    if tile == "|" and dc:
        return [(-1, 0), (1, 0)]
    if tile == "-" and dr:
        return [(0, -1), (0, 1)]
    return [(dr, dc)]


def energized(rows: list[str], start: Beam) -> int:
    """Count tiles visited by a beam entering at ``start`` (row, col, dr, dc)."""
    height, width = len(rows), len(rows[0])
    seen: set[Beam] = set()
    stack = [start]
    while stack:
        beam = stack.pop()
        r, c, dr, dc = beam
        if not (0 <= r < height and 0 <= c < width) or beam in seen:
            continue
        seen.add(beam)
        for ndr, ndc in deflect(rows[r][c], dr, dc):
            stack.append((r + ndr, c + ndc, ndr, ndc))
    return len({(r, c) for r, c, _, _ in seen})


def edge_entries(height: int, width: int) -> list[Beam]:
    entries: list[Beam] = []
    for r in range(height):
        entries.append((r, 0, 0, 1))
        entries.append((r, width - 1, 0, -1))
    for c in range(width):
        entries.append((0, c, 1, 0))
        entries.append((height - 1, c, -1, 0))
    return entries


def part1(text: str) -> int:
    return energized(grid(text), (0, 0, 0, 1))


def part2(text: str) -> int:
    rows = grid(text)
    return max(energized(rows, beam) for beam in edge_entries(len(rows), len(rows[0])))


ENTRY = SolverEntry(day=16, part1=part1, part2=part2, title="The Floor Will Be Lava")
