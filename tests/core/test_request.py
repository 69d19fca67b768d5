# topmark:header:start
#
#   project      : AdventRun
#   file         : test_request.py
#   file_relpath : tests/core/test_request.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for request validation (day/part parsing and range checks)."""

from __future__ import annotations

from pathlib import Path

import pytest

from adventrun.core.errors import ArgumentError
from adventrun.core.exit_codes import ExitCode
from adventrun.core.request import PuzzleRequest, build_request, validate_day, validate_part


@pytest.mark.parametrize(("raw", "expected"), [("1", 1), (" 7 ", 7), ("25", 25), (12, 12)])
def test_validate_day_accepts_in_range_values(raw: str | int, expected: int) -> None:
    assert validate_day(raw) == expected


@pytest.mark.parametrize("raw", ["0", "26", "-1", 99])
def test_validate_day_rejects_out_of_range(raw: str | int) -> None:
    with pytest.raises(ArgumentError, match="between 1 and 25") as excinfo:
        validate_day(raw)
    assert excinfo.value.exit_code == ExitCode.USAGE_ERROR


@pytest.mark.parametrize("raw", ["abc", "1.5", "", "seven", True])
def test_validate_day_rejects_non_numeric(raw: str | bool) -> None:
    with pytest.raises(ArgumentError, match="whole number"):
        validate_day(raw)


def test_non_numeric_and_out_of_range_messages_differ() -> None:
    with pytest.raises(ArgumentError) as non_numeric:
        validate_day("x")
    with pytest.raises(ArgumentError) as out_of_range:
        validate_day("30")
    assert str(non_numeric.value) != str(out_of_range.value)


@pytest.mark.parametrize("raw", ["1", "2", 1, 2])
def test_validate_part_accepts_known_parts(raw: str | int) -> None:
    assert validate_part(raw) in (1, 2)


@pytest.mark.parametrize("raw", ["0", "3", -2])
def test_validate_part_rejects_unknown_parts(raw: str | int) -> None:
    with pytest.raises(ArgumentError, match="Part must be 1 or 2"):
        validate_part(raw)


def test_build_request_normalizes_path() -> None:
    request = build_request(day="3", part="2", input_path="data/x.txt")
    assert request == PuzzleRequest(day=3, part=2, input_path=Path("data/x.txt"))
    assert str(request) == "day 3 part 2"


def test_request_without_path_uses_default_location() -> None:
    assert build_request(day=1, part=1).input_path is None


def test_request_coerces_string_path() -> None:
    request = PuzzleRequest(day=1, part=1, input_path="in.txt")  # type: ignore[arg-type]
    assert request.input_path == Path("in.txt")
