# topmark:header:start
#
#   project      : AdventRun
#   file         : day15.py
#   file_relpath : src/adventrun/solvers/day15.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Day 15: Lens Library."""

from __future__ import annotations

from adventrun.registry.solvers import SolverEntry
from adventrun.solvers.common import PuzzleInputError, lines


def holiday_hash(step: str) -> int:
    """Return the HASH value of ``step`` (0-255)."""
    value = 0
    for ch in step:
        value = (value + ord(ch)) * 17 % 256
    return value


def parse_steps(text: str) -> list[str]:
    steps = "".join(lines(text)).split(",")
    if any(not step for step in steps):
        raise PuzzleInputError("initialization sequence contains an empty step")
    return steps


def arrange(steps: list[str]) -> list[dict[str, int]]:
    """Run the HASHMAP procedure and return the 256 boxes.

    Dicts keep insertion order, and replacing a value keeps the lens in its slot.
    """
    boxes: list[dict[str, int]] = [{} for _ in range(256)]
    for step in steps:
        if step.endswith("-"):
            label = step[:-1]
            boxes[holiday_hash(label)].pop(label, None)
            continue
        label, sep, focal = step.partition("=")
        if not sep or not focal.isdigit():
            raise PuzzleInputError(f"malformed step: {step!r}")
        boxes[holiday_hash(label)][label] = int(focal)
    return boxes


def focusing_power(boxes: list[dict[str, int]]) -> int:
    return sum(
        box_number * slot * focal
        for box_number, box in enumerate(boxes, start=1)
        for slot, focal in enumerate(box.values(), start=1)
    )


def part1(text: str) -> int:
    return sum(holiday_hash(step) for step in parse_steps(text))


def part2(text: str) -> int:
    return focusing_power(arrange(parse_steps(text)))


ENTRY = SolverEntry(day=15, part1=part1, part2=part2, title="Lens Library")
