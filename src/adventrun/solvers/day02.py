# topmark:header:start
#
#   project      : AdventRun
#   file         : day02.py
#   file_relpath : src/adventrun/solvers/day02.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Day 2: Cube Conundrum."""

from __future__ import annotations

import re
from dataclasses import dataclass

from adventrun.registry.solvers import SolverEntry
from adventrun.solvers.common import PuzzleInputError, lines, split_once

_GAME_RE = re.compile(r"^Game (\d+)$")
_DRAW_RE = re.compile(r"^(\d+) (red|green|blue)$")


@dataclass(frozen=True)
class CubeSet:
    red: int = 0
    green: int = 0
    blue: int = 0

    def contains(self, other: CubeSet) -> bool:
        return self.red >= other.red and self.green >= other.green and self.blue >= other.blue

    @property
    def power(self) -> int:
        return self.red * self.green * self.blue


@dataclass(frozen=True)
class Game:
    number: int
    sets: tuple[CubeSet, ...]

    def is_possible(self, bag: CubeSet) -> bool:
        return all(bag.contains(s) for s in self.sets)

    def min_set(self) -> CubeSet:
        return CubeSet(
            red=max(s.red for s in self.sets),
            green=max(s.green for s in self.sets),
            blue=max(s.blue for s in self.sets),
        )


def parse_set(text: str) -> CubeSet:
    counts: dict[str, int] = {}
    for draw in text.split(","):
        match = _DRAW_RE.match(draw.strip())
        if match is None:
            raise PuzzleInputError(f"malformed draw: {draw.strip()!r}")
        counts[match.group(2)] = int(match.group(1))
    return CubeSet(**counts)


def parse_game(line: str) -> Game:
    head, tail = split_once(line, ":", what="game")
    match = _GAME_RE.match(head.strip())
    if match is None:
        raise PuzzleInputError(f"malformed game header: {head!r}")
    sets = tuple(parse_set(part) for part in tail.split(";"))
    return Game(number=int(match.group(1)), sets=sets)


BAG = CubeSet(red=12, green=13, blue=14)


def part1(text: str) -> int:
    games = [parse_game(line) for line in lines(text)]
    return sum(g.number for g in games if g.is_possible(BAG))


def part2(text: str) -> int:
    return sum(parse_game(line).min_set().power for line in lines(text))


ENTRY = SolverEntry(day=2, part1=part1, part2=part2, title="Cube Conundrum")
