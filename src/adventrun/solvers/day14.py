# topmark:header:start
#
#   project      : AdventRun
#   file         : day14.py
#   file_relpath : src/adventrun/solvers/day14.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Day 14: Parabolic Reflector Dish.

The platform is kept as a list of row lists. A spin cycle is four rounds of
"tilt north, rotate clockwise", which visits north, west, south and east in
turn and ends in the original orientation.
"""

from __future__ import annotations

from adventrun.registry.solvers import SolverEntry
from adventrun.solvers.common import grid

Platform = list[list[str]]

SPIN_CYCLES = 1_000_000_000


def tilt_north(platform: Platform) -> None:
    """Roll every ``O`` as far north as it goes, in place."""
    for c in range(len(platform[0])):
        free = 0
        for r, row in enumerate(platform):
            tile = row[c]
            if tile == "#":
                free = r + 1
            elif tile == "O":
                if free != r:
                    platform[free][c] = "O"
                    row[c] = "."
                free += 1


def rotate_clockwise(platform: Platform) -> Platform:
    return [list(col) for col in zip(*platform[::-1])]


def spin(platform: Platform) -> Platform:
    for _ in range(4):
        tilt_north(platform)
        platform = rotate_clockwise(platform)
    return platform


def north_load(platform: Platform) -> int:
    height = len(platform)
    return sum(row.count("O") * (height - r) for r, row in enumerate(platform))


def snapshot(platform: Platform) -> tuple[str, ...]:
    return tuple("".join(row) for row in platform)


def part1(text: str) -> int:
    platform = [list(row) for row in grid(text)]
    tilt_north(platform)
    return north_load(platform)


def part2(text: str) -> int:
    platform = [list(row) for row in grid(text)]
    seen: dict[tuple[str, ...], int] = {}
    loads: list[int] = []
    for cycle in range(SPIN_CYCLES):
        key = snapshot(platform)
        if key in seen:
            first = seen[key]
            return loads[first + (SPIN_CYCLES - first) % (cycle - first)]
        seen[key] = cycle
        loads.append(north_load(platform))
        platform = spin(platform)
    return north_load(platform)


ENTRY = SolverEntry(day=14, part1=part1, part2=part2, title="Parabolic Reflector Dish")
