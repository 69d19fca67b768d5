# topmark:header:start
#
#   project      : AdventRun
#   file         : day18.py
#   file_relpath : src/adventrun/solvers/day18.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Day 18: Lavaduct Lagoon.

The lagoon volume is the polygon's interior plus its trench:
``shoelace area + perimeter / 2 + 1`` (Pick's theorem).
"""

from __future__ import annotations

import re
from typing import Final

from adventrun.registry.solvers import SolverEntry
from adventrun.solvers.common import PuzzleInputError, lines, shoelace_area

_STEP_RE: Final[re.Pattern[str]] = re.compile(r"^([UDLR]) (\d+) \(#([0-9a-fA-F]{6})\)$")

HEADINGS: Final[dict[str, tuple[int, int]]] = {
    "U": (-1, 0),
    "D": (1, 0),
    "L": (0, -1),
    "R": (0, 1),
}

Step = tuple[str, int]


def parse_plan(text: str) -> list[tuple[Step, Step]]:
    """Return (plain, decoded-from-colour) steps for each line of the dig plan."""
    plan: list[tuple[Step, Step]] = []
    for line in lines(text):
        match = _STEP_RE.match(line.strip())
        if match is None:
            raise PuzzleInputError(f"malformed dig plan step: {line!r}")
        heading, meters, colour = match.groups()
        if colour[5] not in "0123":
            raise PuzzleInputError(f"colour {colour!r} does not encode a direction")
        decoded = ("RDLU"[int(colour[5])], int(colour[:5], 16))
        plan.append(((heading, int(meters)), decoded))
    return plan


def lagoon_volume(steps: list[Step]) -> int:
    r = c = 0
    perimeter = 0
    vertices = [(0, 0)]
    for heading, meters in steps:
        dr, dc = HEADINGS[heading]
        r, c = r + dr * meters, c + dc * meters
        perimeter += meters
        vertices.append((r, c))
    return shoelace_area(vertices) + perimeter // 2 + 1


def part1(text: str) -> int:
    return lagoon_volume([plain for plain, _ in parse_plan(text)])


def part2(text: str) -> int:
    return lagoon_volume([decoded for _, decoded in parse_plan(text)])


ENTRY = SolverEntry(day=18, part1=part1, part2=part2, title="Lavaduct Lagoon")
