# topmark:header:start
#
#   project      : AdventRun
#   file         : day20.py
#   file_relpath : src/adventrun/solvers/day20.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Day 20: Pulse Propagation.

Pulses are processed strictly in the order they are sent (a FIFO queue).
Part 2 assumes the usual shape of real inputs: ``rx`` is fed by a single
conjunction whose inputs each send a high pulse on a fixed cycle, so the
answer is the least common multiple of those cycle lengths.
"""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field

from adventrun.registry.solvers import SolverEntry
from adventrun.solvers.common import PuzzleInputError, lines, split_once

BROADCASTER = "broadcaster"
FLIP_FLOP = "%"
CONJUNCTION = "&"

BUTTON_PRESSES = 1000
PRESS_LIMIT = 100_000

Pulse = tuple[str, str, bool]  # sender, receiver, high


@dataclass
class Module:
    name: str
    kind: str
    outputs: tuple[str, ...]
    on: bool = False
    memory: dict[str, bool] = field(default_factory=dict)

    def receive(self, sender: str, high: bool) -> bool | None:
        """Update state and return the pulse to send, or None to stay silent."""
        if self.kind == FLIP_FLOP:
            if high:
                return None
            self.on = not self.on
            return self.on
        if self.kind == CONJUNCTION:
            self.memory[sender] = high
            return not all(self.memory.values())
        return high


def parse_modules(text: str) -> dict[str, Module]:
    modules: dict[str, Module] = {}
    for line in lines(text):
        head, tail = split_once(line, "->", what="module")
        label = head.strip()
        outputs = tuple(o.strip() for o in tail.split(",") if o.strip())
        if label == BROADCASTER:
            module = Module(label, BROADCASTER, outputs)
        elif label[:1] in (FLIP_FLOP, CONJUNCTION) and label[1:].isalpha():
            module = Module(label[1:], label[0], outputs)
        else:
            raise PuzzleInputError(f"malformed module: {line!r}")
        modules[module.name] = module
    if BROADCASTER not in modules:
        raise PuzzleInputError("no broadcaster module")
    for module in modules.values():
        for output in module.outputs:
            target = modules.get(output)
            if target is not None and target.kind == CONJUNCTION:
                target.memory[module.name] = False
    return modules


def press(modules: dict[str, Module], watch: str | None = None) -> tuple[int, int, set[str]]:
    """Push the button once.

    Returns:
        tuple[int, int, set[str]]: Low and high pulse counts, and the senders of
            high pulses received by ``watch`` during this press.
    """
    low = high = 0
    senders: set[str] = set()
    queue: deque[Pulse] = deque([("button", BROADCASTER, False)])
    while queue:
        sender, receiver, is_high = queue.popleft()
        if is_high:
            high += 1
            if receiver == watch:
                senders.add(sender)
        else:
            low += 1
        module = modules.get(receiver)
        if module is None:
            continue
        sent = module.receive(sender, is_high)
        if sent is not None:
            queue.extend((receiver, output, sent) for output in module.outputs)
    return low, high, senders


def part1(text: str) -> int:
    modules = parse_modules(text)
    low = high = 0
    for _ in range(BUTTON_PRESSES):
        pressed_low, pressed_high, _ = press(modules)
        low += pressed_low
        high += pressed_high
    return low * high


def part2(text: str) -> int:
    modules = parse_modules(text)
    feeders = [m for m in modules.values() if "rx" in m.outputs]
    if len(feeders) != 1 or feeders[0].kind != CONJUNCTION:
        raise PuzzleInputError("'rx' must be fed by exactly one conjunction module")
    feeder = feeders[0]
    first_high: dict[str, int] = {}
    for presses in range(1, PRESS_LIMIT + 1):
        _, _, senders = press(modules, watch=feeder.name)
        for sender in senders:
            first_high.setdefault(sender, presses)
        if len(first_high) == len(feeder.memory):
            return math.lcm(*first_high.values())
    raise PuzzleInputError(f"no cycle found within {PRESS_LIMIT} presses")


ENTRY = SolverEntry(day=20, part1=part1, part2=part2, title="Pulse Propagation")
