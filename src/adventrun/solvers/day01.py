# topmark:header:start
#
#   project      : AdventRun
#   file         : day01.py
#   file_relpath : src/adventrun/solvers/day01.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Day 1: Trebuchet?!

Each line hides a two-digit calibration value made of its first and last digit.
Part 2 also counts digits spelled out as words; spelled digits may overlap
(``"oneight"`` yields 1 then 8).
"""

from __future__ import annotations

from adventrun.registry.solvers import SolverEntry
from adventrun.solvers.common import PuzzleInputError, lines

WORDS: dict[str, int] = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}


def digits(line: str, *, spelled: bool = False) -> list[int]:
    """Return every digit found in ``line``, in order of appearance."""
    found: list[int] = []
    for i, ch in enumerate(line):
        if ch.isdigit():
            found.append(int(ch))
        elif spelled:
            for word, value in WORDS.items():
                if line.startswith(word, i):
                    found.append(value)
                    break
    return found


def calibration_value(line: str, *, spelled: bool = False) -> int:
    """Combine the first and last digit of ``line`` into a two-digit number."""
    found = digits(line, spelled=spelled)
    if not found:
        raise PuzzleInputError(f"no digit found in line {line!r}")
    return found[0] * 10 + found[-1]


def part1(text: str) -> int:
    return sum(calibration_value(line) for line in lines(text))


def part2(text: str) -> int:
    return sum(calibration_value(line, spelled=True) for line in lines(text))


ENTRY = SolverEntry(day=1, part1=part1, part2=part2, title="Trebuchet?!")
