# topmark:header:start
#
#   project      : AdventRun
#   file         : day19.py
#   file_relpath : src/adventrun/solvers/day19.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Day 19: Aplenty.

Every part starts at workflow ``in`` and is routed until it reaches ``A``
(accepted) or ``R`` (rejected). Part 2 pushes whole rating ranges through the
workflows instead of single parts, splitting a range at each condition.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Final

from adventrun.registry.solvers import SolverEntry
from adventrun.solvers.common import PuzzleInputError, blocks

_WORKFLOW_RE: Final[re.Pattern[str]] = re.compile(r"^([a-z]+)\{(.+)\}$")
_RULE_RE: Final[re.Pattern[str]] = re.compile(r"^([xmas])([<>])(\d+):([a-zA-Z]+)$")
_PART_RE: Final[re.Pattern[str]] = re.compile(r"^\{x=(\d+),m=(\d+),a=(\d+),s=(\d+)\}$")

CATEGORIES = "xmas"
RATING_RANGE = (1, 4000)

Part = dict[str, int]
Ranges = dict[str, tuple[int, int]]  # inclusive bounds per category


@dataclass(frozen=True)
class Rule:
    category: str
    op: str
    value: int
    target: str

    def matches(self, part: Part) -> bool:
        rating = part[self.category]
        return rating < self.value if self.op == "<" else rating > self.value

    def split(self, low: int, high: int) -> tuple[tuple[int, int], tuple[int, int]]:
        """Split ``low..high`` into the (matching, remaining) sub-ranges; either may be empty."""
        if self.op == "<":
            return (low, min(high, self.value - 1)), (max(low, self.value), high)
        return (max(low, self.value + 1), high), (low, min(high, self.value))


@dataclass(frozen=True)
class Workflow:
    name: str
    rules: tuple[Rule, ...]
    fallback: str

    def route(self, part: Part) -> str:
        for rule in self.rules:
            if rule.matches(part):
                return rule.target
        return self.fallback


def parse_workflow(line: str) -> Workflow:
    match = _WORKFLOW_RE.match(line.strip())
    if match is None:
        raise PuzzleInputError(f"malformed workflow: {line!r}")
    *conditions, fallback = match.group(2).split(",")
    rules: list[Rule] = []
    for condition in conditions:
        rule = _RULE_RE.match(condition)
        if rule is None:
            raise PuzzleInputError(f"malformed rule {condition!r} in {line!r}")
        rules.append(Rule(rule.group(1), rule.group(2), int(rule.group(3)), rule.group(4)))
    return Workflow(name=match.group(1), rules=tuple(rules), fallback=fallback)


def parse_part(line: str) -> Part:
    match = _PART_RE.match(line.strip())
    if match is None:
        raise PuzzleInputError(f"malformed part rating: {line!r}")
    return dict(zip(CATEGORIES, (int(g) for g in match.groups())))


def parse_system(text: str) -> tuple[dict[str, Workflow], list[Part]]:
    sections = blocks(text)
    if len(sections) != 2:
        raise PuzzleInputError(f"expected workflows and parts sections, got {len(sections)}")
    workflows = {w.name: w for w in map(parse_workflow, sections[0])}
    if "in" not in workflows:
        raise PuzzleInputError("no 'in' workflow")
    return workflows, [parse_part(line) for line in sections[1]]


def _workflow(workflows: dict[str, Workflow], name: str) -> Workflow:
    try:
        return workflows[name]
    except KeyError:
        raise PuzzleInputError(f"unknown workflow {name!r}") from None


def accepts(workflows: dict[str, Workflow], part: Part) -> bool:
    name = "in"
    visited: set[str] = set()
    while name not in ("A", "R"):
        if name in visited:
            raise PuzzleInputError(f"workflows loop at {name!r}")
        visited.add(name)
        name = _workflow(workflows, name).route(part)
    return name == "A"


def count_accepted(workflows: dict[str, Workflow], name: str, ranges: Ranges) -> int:
    """Count rating combinations within ``ranges`` that ``name`` ends up accepting."""
    if name == "R":
        return 0
    if name == "A":
        return math.prod(high - low + 1 for low, high in ranges.values())
    workflow = _workflow(workflows, name)
    ranges = dict(ranges)
    total = 0
    for rule in workflow.rules:
        taken, rest = rule.split(*ranges[rule.category])
        if taken[0] <= taken[1]:
            total += count_accepted(workflows, rule.target, {**ranges, rule.category: taken})
        if rest[0] > rest[1]:
            return total
        ranges[rule.category] = rest
    return total + count_accepted(workflows, workflow.fallback, ranges)


def part1(text: str) -> int:
    workflows, parts = parse_system(text)
    return sum(sum(part.values()) for part in parts if accepts(workflows, part))


def part2(text: str) -> int:
    workflows, _ = parse_system(text)
    return count_accepted(workflows, "in", {c: RATING_RANGE for c in CATEGORIES})


ENTRY = SolverEntry(day=19, part1=part1, part2=part2, title="Aplenty")
