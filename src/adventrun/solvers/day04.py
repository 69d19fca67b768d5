# topmark:header:start
#
#   project      : AdventRun
#   file         : day04.py
#   file_relpath : src/adventrun/solvers/day04.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Day 4: Scratchcards."""

from __future__ import annotations

import re
from dataclasses import dataclass

from adventrun.registry.solvers import SolverEntry
from adventrun.solvers.common import PuzzleInputError, ints, lines, split_once

_CARD_RE = re.compile(r"^Card\s+(\d+)$")


@dataclass(frozen=True)
class Card:
    number: int
    winning: frozenset[int]
    numbers: tuple[int, ...]

    @property
    def matches(self) -> int:
        return sum(1 for n in self.numbers if n in self.winning)

    @property
    def score(self) -> int:
        return 1 << (self.matches - 1) if self.matches else 0


def parse_card(line: str) -> Card:
    head, tail = split_once(line, ":", what="card")
    match = _CARD_RE.match(head.strip())
    if match is None:
        raise PuzzleInputError(f"malformed card header: {head!r}")
    winning, numbers = split_once(tail, "|", what="card")
    return Card(
        number=int(match.group(1)),
        winning=frozenset(ints(winning)),
        numbers=tuple(ints(numbers)),
    )


def part1(text: str) -> int:
    return sum(parse_card(line).score for line in lines(text))


def part2(text: str) -> int:
    cards = [parse_card(line) for line in lines(text)]
    copies = [1] * len(cards)
    for i, card in enumerate(cards):
        for j in range(i + 1, min(i + 1 + card.matches, len(cards))):
            copies[j] += copies[i]
    return sum(copies)


ENTRY = SolverEntry(day=4, part1=part1, part2=part2, title="Scratchcards")
