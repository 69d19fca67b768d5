# topmark:header:start
#
#   project      : AdventRun
#   file         : day08.py
#   file_relpath : src/adventrun/solvers/day08.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Day 8: Haunted Wasteland.

Part 2 walks every ``..A`` node at once. Each ghost runs a cycle whose length
equals its first arrival at a ``..Z`` node, so the answer is the least common
multiple of those arrival times.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from itertools import cycle

from adventrun.registry.solvers import SolverEntry
from adventrun.solvers.common import PuzzleInputError, lines

_NODE_RE = re.compile(r"^(\w+)\s*=\s*\((\w+),\s*(\w+)\)$")

Network = dict[str, tuple[str, str]]


def parse_map(text: str) -> tuple[str, Network]:
    first, *rest = lines(text)
    instructions = first.strip()
    if not instructions or set(instructions) - {"L", "R"}:
        raise PuzzleInputError(f"instructions must be L/R only: {instructions!r}")
    network: Network = {}
    for line in rest:
        if not line.strip():
            continue
        match = _NODE_RE.match(line.strip())
        if match is None:
            raise PuzzleInputError(f"malformed node: {line!r}")
        network[match.group(1)] = (match.group(2), match.group(3))
    return instructions, network


def steps_until(
    instructions: str,
    network: Network,
    start: str,
    done: Callable[[str], bool],
) -> int:
    node = start
    limit = len(instructions) * (len(network) + 1)
    for steps, turn in enumerate(cycle(instructions), start=1):
        if node not in network:
            raise PuzzleInputError(f"unknown node {node!r}")
        node = network[node][0 if turn == "L" else 1]
        if done(node):
            return steps
        if steps > limit:
            raise PuzzleInputError(f"no exit reachable from {start!r}")
    raise AssertionError("unreachable")


def part1(text: str) -> int:
    instructions, network = parse_map(text)
    if "AAA" not in network:
        raise PuzzleInputError("network has no 'AAA' node")
    return steps_until(instructions, network, "AAA", lambda n: n == "ZZZ")


def part2(text: str) -> int:
    instructions, network = parse_map(text)
    starts = [node for node in network if node.endswith("A")]
    if not starts:
        raise PuzzleInputError("network has no node ending in 'A'")
    return math.lcm(
        *(steps_until(instructions, network, s, lambda n: n.endswith("Z")) for s in starts)
    )


ENTRY = SolverEntry(day=8, part1=part1, part2=part2, title="Haunted Wasteland")
