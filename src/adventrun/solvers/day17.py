# topmark:header:start
#
#   project      : AdventRun
#   file         : day17.py
#   file_relpath : src/adventrun/solvers/day17.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Day 17: Clumsy Crucible.

Dijkstra over (row, col, axis of the last move). Each expansion turns onto the
other axis and pushes every stop between ``min_run`` and ``max_run`` tiles
away, so a crucible never stops before it has moved ``min_run`` tiles.
"""

from __future__ import annotations

import heapq

from adventrun.registry.solvers import SolverEntry
from adventrun.solvers.common import PuzzleInputError, grid

HORIZONTAL = 0
VERTICAL = 1


def parse_heat(text: str) -> list[list[int]]:
    rows = grid(text)
    if not all(row.isdigit() for row in rows):
        raise PuzzleInputError("heat loss map must contain digits only")
    return [[int(ch) for ch in row] for row in rows]


def least_heat_loss(heat: list[list[int]], min_run: int, max_run: int) -> int:
    height, width = len(heat), len(heat[0])
    target = (height - 1, width - 1)
    best: dict[tuple[int, int, int], int] = {}
    queue = [(0, 0, 0, HORIZONTAL), (0, 0, 0, VERTICAL)]
    while queue:
        cost, r, c, axis = heapq.heappop(queue)
        if (r, c) == target:
            return cost
        if best.get((r, c, axis), cost + 1) <= cost:
            continue
        best[(r, c, axis)] = cost
        turn = VERTICAL if axis == HORIZONTAL else HORIZONTAL
        for sign in (1, -1):
            dr, dc = (sign, 0) if turn == VERTICAL else (0, sign)
            total = cost
            for step in range(1, max_run + 1):
                nr, nc = r + dr * step, c + dc * step
                if not (0 <= nr < height and 0 <= nc < width):
                    break
                total += heat[nr][nc]
                if step >= min_run:
                    heapq.heappush(queue, (total, nr, nc, turn))
    raise PuzzleInputError("no route reaches the factory")


def part1(text: str) -> int:
    return least_heat_loss(parse_heat(text), 1, 3)


def part2(text: str) -> int:
    return least_heat_loss(parse_heat(text), 4, 10)


ENTRY = SolverEntry(day=17, part1=part1, part2=part2, title="Clumsy Crucible")
