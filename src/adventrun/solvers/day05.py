# topmark:header:start
#
#   project      : AdventRun
#   file         : day05.py
#   file_relpath : src/adventrun/solvers/day05.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Day 5: If You Give A Seed A Fertilizer.

Part 2 treats the seed list as ``(start, length)`` pairs. Instead of mapping
every seed, whole intervals are pushed through each map and split where they
straddle a rule boundary.
"""

from __future__ import annotations

from dataclasses import dataclass

from adventrun.registry.solvers import SolverEntry
from adventrun.solvers.common import PuzzleInputError, ints, lines, split_once

Interval = tuple[int, int]  # [start, end)


@dataclass(frozen=True)
class Rule:
    dest: int
    source: int
    length: int

    @property
    def end(self) -> int:
        return self.source + self.length

    @property
    def offset(self) -> int:
        return self.dest - self.source


@dataclass(frozen=True)
class RangeMap:
    name: str
    rules: tuple[Rule, ...]

    def apply(self, value: int) -> int:
        for rule in self.rules:
            if rule.source <= value < rule.end:
                return value + rule.offset
        return value

    def apply_intervals(self, intervals: list[Interval]) -> list[Interval]:
        result: list[Interval] = []
        pending = list(intervals)
        while pending:
            start, end = pending.pop()
            for rule in self.rules:
                lo, hi = max(start, rule.source), min(end, rule.end)
                if lo >= hi:
                    continue
                result.append((lo + rule.offset, hi + rule.offset))
                if start < lo:
                    pending.append((start, lo))
                if hi < end:
                    pending.append((hi, end))
                break
            else:
                result.append((start, end))
        return result


@dataclass(frozen=True)
class Almanac:
    seeds: tuple[int, ...]
    maps: tuple[RangeMap, ...]


def parse_almanac(text: str) -> Almanac:
    all_lines = lines(text)
    head, tail = split_once(all_lines[0], ":", what="seeds line")
    if head.strip() != "seeds":
        raise PuzzleInputError(f"expected a 'seeds:' line, got {all_lines[0]!r}")
    seeds = tuple(ints(tail))

    maps: list[RangeMap] = []
    name: str | None = None
    rules: list[Rule] = []
    for line in all_lines[1:]:
        line = line.strip()
        if not line:
            continue
        if line.endswith("map:"):
            if name is not None:
                maps.append(RangeMap(name, tuple(rules)))
            name, rules = line.removesuffix("map:").strip(), []
            continue
        values = ints(line)
        if name is None or len(values) != 3:
            raise PuzzleInputError(f"malformed map line: {line!r}")
        rules.append(Rule(*values))
    if name is not None:
        maps.append(RangeMap(name, tuple(rules)))
    if not maps:
        raise PuzzleInputError("almanac has no maps")
    return Almanac(seeds=seeds, maps=tuple(maps))


def part1(text: str) -> int:
    almanac = parse_almanac(text)
    locations = []
    for seed in almanac.seeds:
        for range_map in almanac.maps:
            seed = range_map.apply(seed)
        locations.append(seed)
    return min(locations)


def part2(text: str) -> int:
    almanac = parse_almanac(text)
    if len(almanac.seeds) % 2:
        raise PuzzleInputError("seed ranges must come in (start, length) pairs")
    intervals: list[Interval] = [
        (start, start + length)
        for start, length in zip(almanac.seeds[::2], almanac.seeds[1::2])
        if length > 0
    ]
    for range_map in almanac.maps:
        intervals = range_map.apply_intervals(intervals)
    return min(start for start, _ in intervals)


ENTRY = SolverEntry(day=5, part1=part1, part2=part2, title="If You Give A Seed A Fertilizer")
