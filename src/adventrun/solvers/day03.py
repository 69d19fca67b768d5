# topmark:header:start
#
#   project      : AdventRun
#   file         : day03.py
#   file_relpath : src/adventrun/solvers/day03.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Day 3: Gear Ratios.

Numbers adjacent (diagonals included) to any symbol are part numbers. A gear
is a ``*`` adjacent to exactly two part numbers; its ratio is their product.
"""

from __future__ import annotations

import math
import re
from collections import defaultdict
from dataclasses import dataclass

from adventrun.registry.solvers import SolverEntry
from adventrun.solvers.common import grid

_NUMBER_RE = re.compile(r"\d+")


@dataclass(frozen=True)
class Number:
    value: int
    row: int
    start: int
    end: int  # exclusive

    def neighbours(self, height: int, width: int) -> list[tuple[int, int]]:
        cells: list[tuple[int, int]] = []
        for r in range(max(self.row - 1, 0), min(self.row + 2, height)):
            for c in range(max(self.start - 1, 0), min(self.end + 1, width)):
                if r != self.row or not self.start <= c < self.end:
                    cells.append((r, c))
        return cells


def is_symbol(ch: str) -> bool:
    return ch != "." and not ch.isdigit()


def find_numbers(rows: list[str]) -> list[Number]:
    return [
        Number(value=int(m.group()), row=r, start=m.start(), end=m.end())
        for r, row in enumerate(rows)
        for m in _NUMBER_RE.finditer(row)
    ]


def part1(text: str) -> int:
    rows = grid(text)
    height, width = len(rows), len(rows[0])
    return sum(
        n.value
        for n in find_numbers(rows)
        if any(is_symbol(rows[r][c]) for r, c in n.neighbours(height, width))
    )


def part2(text: str) -> int:
    rows = grid(text)
    height, width = len(rows), len(rows[0])
    gears: defaultdict[tuple[int, int], list[int]] = defaultdict(list)
    for n in find_numbers(rows):
        for r, c in n.neighbours(height, width):
            if rows[r][c] == "*":
                gears[(r, c)].append(n.value)
    return sum(math.prod(values) for values in gears.values() if len(values) == 2)


ENTRY = SolverEntry(day=3, part1=part1, part2=part2, title="Gear Ratios")
