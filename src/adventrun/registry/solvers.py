# topmark:header:start
#
#   project      : AdventRun
#   file         : solvers.py
#   file_relpath : src/adventrun/registry/solvers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry mapping day numbers to their pair of solver units.

The registry is a plain table: selecting part 1 or part 2 is a field access and
the registry never looks inside a solver. Built-in days are discovered once (see
[`register_all_solvers`][adventrun.solvers.register_all_solvers]); days without a
module are simply absent.

Notes:
    * Public views (`as_mapping()`, `days()`, `get()`) expose the composed table
      as read-only data.
    * `register()` / `unregister()` mutate process-global state and are meant for
      tests and experiments; wrap them in try/finally.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING, TypeAlias

from adventrun.config.logging import get_logger
from adventrun.core.errors import ArgumentError, UnimplementedDayError

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

logger = get_logger(__name__)

Solver: TypeAlias = Callable[[str], "int | str"]
"""A solver unit: raw input text in, answer out. Raises on malformed input."""


@dataclass(frozen=True)
class SolverEntry:
    """The two solver units for one day.

    Attributes:
        day (int): Puzzle day.
        part1 (Solver): Part 1 solver.
        part2 (Solver): Part 2 solver.
        title (str): Puzzle title, shown by ``--list-days``.
    """

    day: int
    part1: Solver
    part2: Solver
    title: str = ""

    def solver_for(self, part: int) -> Solver:
        """Return the solver for ``part``.

        Raises:
            ArgumentError: If ``part`` is neither 1 nor 2.
        """
        if part == 1:
            return self.part1
        if part == 2:
            return self.part2
        raise ArgumentError(f"Part must be 1 or 2, got {part}")


class SolverRegistry:
    """Process-global table of solver entries keyed by day."""

    _lock = RLock()
    _entries: dict[int, SolverEntry] = {}

    @classmethod
    def _compose(cls) -> dict[int, SolverEntry]:
        from adventrun.solvers import register_all_solvers

        register_all_solvers()
        return cls._entries

    @classmethod
    def register(cls, entry: SolverEntry) -> None:
        """Register the solver entry for ``entry.day``.

        Registering the very same entry again is a no-op, so a registration pass
        that stopped part-way can be retried.

        Raises:
            ValueError: If the day already has a different entry.
        """
        with cls._lock:
            existing = cls._entries.get(entry.day)
            if existing is entry:
                return
            if existing is not None:
                raise ValueError(f"Day {entry.day} already has a registered solver.")
            logger.debug("Registering solvers for day %d (%s)", entry.day, entry.title)
            cls._entries[entry.day] = entry

    @classmethod
    def unregister(cls, day: int) -> bool:
        """Remove the entry for ``day``. Returns True if an entry was removed."""
        with cls._lock:
            return cls._entries.pop(day, None) is not None

    @classmethod
    def get(cls, day: int) -> SolverEntry | None:
        """Return the entry for ``day``, or None."""
        with cls._lock:
            return cls._compose().get(day)

    @classmethod
    def lookup(cls, day: int) -> SolverEntry:
        """Return the entry for ``day``.

        Raises:
            UnimplementedDayError: If no solver is registered for ``day``; the error
                lists the days that are available.
        """
        with cls._lock:
            entries = cls._compose()
            entry = entries.get(day)
            if entry is None:
                raise UnimplementedDayError(day=day, available=entries.keys())
            return entry

    @classmethod
    def is_registered(cls, day: int) -> bool:
        with cls._lock:
            return day in cls._compose()

    @classmethod
    def days(cls) -> tuple[int, ...]:
        """Return the implemented days (sorted)."""
        with cls._lock:
            return tuple(sorted(cls._compose()))

    @classmethod
    def as_mapping(cls) -> Mapping[int, SolverEntry]:
        """Return a read-only snapshot mapping of day -> entry."""
        with cls._lock:
            return MappingProxyType(dict(cls._compose()))

    @classmethod
    def iter_entries(cls) -> Iterator[SolverEntry]:
        """Iterate over entries in day order."""
        snapshot = cls.as_mapping()
        for day in sorted(snapshot):
            yield snapshot[day]
