# topmark:header:start
#
#   project      : AdventRun
#   file         : day07.py
#   file_relpath : src/adventrun/solvers/day07.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Day 7: Camel Cards.

Hands rank first by type, then card by card. In part 2 ``J`` is a joker: it
counts as whatever card makes the strongest type, but is the weakest card when
breaking ties.
"""

from __future__ import annotations

from collections import Counter
from enum import IntEnum

from adventrun.registry.solvers import SolverEntry
from adventrun.solvers.common import PuzzleInputError, lines

CARDS = "23456789TJQKA"
CARDS_WITH_JOKER = "J23456789TQKA"


class HandType(IntEnum):
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    FULL_HOUSE = 4
    FOUR_OF_A_KIND = 5
    FIVE_OF_A_KIND = 6


def hand_type(hand: str, *, jokers: bool = False) -> HandType:
    counts = Counter(hand)
    wild = counts.pop("J", 0) if jokers else 0
    shape = sorted(counts.values(), reverse=True) or [0]
    shape[0] += wild
    if shape[0] == 5:
        return HandType.FIVE_OF_A_KIND
    if shape[0] == 4:
        return HandType.FOUR_OF_A_KIND
    if shape[0] == 3:
        return HandType.FULL_HOUSE if shape[1] == 2 else HandType.THREE_OF_A_KIND
    if shape[0] == 2:
        return HandType.TWO_PAIR if shape[1] == 2 else HandType.ONE_PAIR
    return HandType.HIGH_CARD


def sort_key(hand: str, *, jokers: bool = False) -> tuple[int, ...]:
    order = CARDS_WITH_JOKER if jokers else CARDS
    return (hand_type(hand, jokers=jokers), *(order.index(c) for c in hand))


def parse_hands(text: str) -> list[tuple[str, int]]:
    hands: list[tuple[str, int]] = []
    for line in lines(text):
        parts = line.split()
        if len(parts) != 2 or len(parts[0]) != 5 or any(c not in CARDS for c in parts[0]):
            raise PuzzleInputError(f"malformed hand: {line!r}")
        hands.append((parts[0], int(parts[1])))
    return hands


def total_winnings(text: str, *, jokers: bool) -> int:
    hands = sorted(parse_hands(text), key=lambda hb: sort_key(hb[0], jokers=jokers))
    return sum(rank * bid for rank, (_, bid) in enumerate(hands, start=1))


def part1(text: str) -> int:
    return total_winnings(text, jokers=False)


def part2(text: str) -> int:
    return total_winnings(text, jokers=True)


ENTRY = SolverEntry(day=7, part1=part1, part2=part2, title="Camel Cards")
