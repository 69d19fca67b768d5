# topmark:header:start
#
#   project      : AdventRun
#   file         : day22.py
#   file_relpath : src/adventrun/solvers/day22.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Day 22: Sand Slabs.

Bricks are settled lowest-first onto a height map of the ``(x, y)`` floor. Each
settled brick remembers which bricks it rests on; both parts work from that
support relation alone.
"""

from __future__ import annotations

from itertools import product
from typing import NamedTuple

from adventrun.registry.solvers import SolverEntry
from adventrun.solvers.common import PuzzleInputError, ints, lines


class Brick(NamedTuple):
    x1: int
    y1: int
    z1: int
    x2: int
    y2: int
    z2: int

    def footprint(self):
        return product(range(self.x1, self.x2 + 1), range(self.y1, self.y2 + 1))


def parse_bricks(text: str) -> list[Brick]:
    bricks = []
    for line in lines(text):
        values = ints(line)
        if "~" not in line or len(values) != 6 or min(values) < 0:
            raise PuzzleInputError(f"malformed brick: {line!r}")
        x1, y1, z1, x2, y2, z2 = values
        low, high = zip(*map(sorted, ((x1, x2), (y1, y2), (z1, z2))))
        bricks.append(Brick(*low, *high))
    return bricks


def settle(bricks: list[Brick]) -> list[frozenset[int]]:
    """Drop every brick as far as it goes.

    Returns:
        list[frozenset[int]]: For each brick in settling order, the indices of the
            bricks directly beneath it. Supporters always precede the brick they hold.
    """
    tops: dict[tuple[int, int], tuple[int, int]] = {}
    supports: list[frozenset[int]] = []
    for index, brick in enumerate(sorted(bricks, key=lambda b: b.z1)):
        cells = list(brick.footprint())
        below = [tops[cell] for cell in cells if cell in tops]
        floor = max((z for z, _ in below), default=0)
        supports.append(frozenset(i for z, i in below if z == floor))
        top = floor + 1 + brick.z2 - brick.z1
        for cell in cells:
            tops[cell] = (top, index)
    return supports


def part1(text: str) -> int:
    supports = settle(parse_bricks(text))
    load_bearing = {next(iter(s)) for s in supports if len(s) == 1}
    return len(supports) - len(load_bearing)


def part2(text: str) -> int:
    supports = settle(parse_bricks(text))
    total = 0
    for removed in range(len(supports)):
        fallen = {removed}
        for index in range(removed + 1, len(supports)):
            if supports[index] and supports[index] <= fallen:
                fallen.add(index)
        total += len(fallen) - 1
    return total


ENTRY = SolverEntry(day=22, part1=part1, part2=part2, title="Sand Slabs")
