# topmark:header:start
#
#   project      : AdventRun
#   file         : request.py
#   file_relpath : src/adventrun/core/request.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structured puzzle requests and the validators used to build them.

The validators accept the raw command-line token (a string) or an already
converted integer, and raise [`ArgumentError`][adventrun.core.errors.ArgumentError]
with a message specific to the failure, so that a non-numeric value and an
out-of-range value never produce the same diagnostic.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from adventrun.constants import MAX_DAY, MIN_DAY, PARTS
from adventrun.core.errors import ArgumentError


@dataclass(frozen=True)
class PuzzleRequest:
    """One (day, part, input) request, consumed once by the dispatcher.

    Range checks are the responsibility of the front-end (see
    [`validate_day`][adventrun.core.request.validate_day] and
    [`validate_part`][adventrun.core.request.validate_part]); the request itself
    only normalizes the optional path.

    Attributes:
        day (int): Puzzle day.
        part (int): Puzzle part (1 or 2).
        input_path (Path | None): Explicit input file, or ``None`` for the
            day-derived default location.
    """

    day: int
    part: int
    input_path: Path | None = None

    def __post_init__(self) -> None:
        if self.input_path is not None and not isinstance(self.input_path, Path):
            object.__setattr__(self, "input_path", Path(self.input_path))

    def __str__(self) -> str:
        return f"day {self.day} part {self.part}"


def _parse_int(value: str | int, *, what: str) -> int:
    if isinstance(value, bool):
        raise ArgumentError(f"{what} must be a whole number, got {value!r}")
    if isinstance(value, int):
        return value
    text = str(value).strip()
    try:
        return int(text, 10)
    except ValueError:
        raise ArgumentError(f"{what} must be a whole number, got {value!r}") from None


def validate_day(value: str | int) -> int:
    """Return the day number, or raise ArgumentError.

    Args:
        value (str | int): Raw day value.

    Returns:
        int: The validated day, within ``MIN_DAY..MAX_DAY``.

    Raises:
        ArgumentError: If the value is not an integer or is out of range.
    """
    day = _parse_int(value, what="Day")
    if not MIN_DAY <= day <= MAX_DAY:
        raise ArgumentError(f"Day must be between {MIN_DAY} and {MAX_DAY}, got {day}")
    return day


def validate_part(value: str | int) -> int:
    """Return the part number, or raise ArgumentError.

    Args:
        value (str | int): Raw part value.

    Returns:
        int: The validated part (1 or 2).

    Raises:
        ArgumentError: If the value is not an integer or not a known part.
    """
    part = _parse_int(value, what="Part")
    if part not in PARTS:
        choices = " or ".join(str(p) for p in PARTS)
        raise ArgumentError(f"Part must be {choices}, got {part}")
    return part


def build_request(
    *,
    day: str | int,
    part: str | int,
    input_path: str | Path | None = None,
) -> PuzzleRequest:
    """Validate raw values and build a PuzzleRequest.

    Args:
        day (str | int): Raw day value.
        part (str | int): Raw part value.
        input_path (str | Path | None): Optional explicit input file.

    Returns:
        PuzzleRequest: The validated request.

    Raises:
        ArgumentError: If the day or the part is invalid.
    """
    return PuzzleRequest(
        day=validate_day(day),
        part=validate_part(part),
        input_path=Path(input_path) if input_path is not None else None,
    )
