# topmark:header:start
#
#   project      : AdventRun
#   file         : day06.py
#   file_relpath : src/adventrun/solvers/day06.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Day 6: Wait For It.

Holding the button for ``h`` ms out of a race of ``t`` ms covers ``h * (t - h)``
mm. The winning hold times form a contiguous range around ``t / 2``, found
from the quadratic's roots with exact integer arithmetic.
"""

from __future__ import annotations

import math

from adventrun.registry.solvers import SolverEntry
from adventrun.solvers.common import PuzzleInputError, ints, lines, split_once


def ways_to_win(time: int, record: int) -> int:
    """Count hold times whose distance beats ``record``."""

    def beats(hold: int) -> bool:
        return hold * (time - hold) > record

    discriminant = time * time - 4 * record
    if discriminant < 0:
        return 0
    low = max((time - math.isqrt(discriminant)) // 2, 0)
    while low <= time and not beats(low):
        low += 1
    while low > 0 and beats(low - 1):
        low -= 1
    high = time - low
    return high - low + 1 if low <= high else 0


def parse_races(text: str) -> tuple[list[int], list[int]]:
    rows = lines(text)
    if len(rows) != 2:
        raise PuzzleInputError(f"expected 'Time:' and 'Distance:' lines, got {len(rows)} lines")
    _, times = split_once(rows[0], ":", what="time line")
    _, distances = split_once(rows[1], ":", what="distance line")
    return ints(times), ints(distances)


def part1(text: str) -> int:
    times, records = parse_races(text)
    if len(times) != len(records):
        raise PuzzleInputError("time and distance lists have different lengths")
    return math.prod(ways_to_win(t, d) for t, d in zip(times, records))


def part2(text: str) -> int:
    times, records = parse_races(text)
    time = int("".join(str(t) for t in times))
    record = int("".join(str(d) for d in records))
    return ways_to_win(time, record)


ENTRY = SolverEntry(day=6, part1=part1, part2=part2, title="Wait For It")
