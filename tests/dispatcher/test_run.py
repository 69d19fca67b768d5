# topmark:header:start
#
#   project      : AdventRun
#   file         : test_run.py
#   file_relpath : tests/dispatcher/test_run.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the dispatcher: check ordering and failure classification."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from adventrun import dispatcher
from adventrun.core.errors import (
    InputNotFoundError,
    SolverError,
    UnimplementedDayError,
)
from adventrun.core.exit_codes import ExitCode
from adventrun.core.outcomes import Failure, Success
from adventrun.core.request import PuzzleRequest
from adventrun.dispatcher import invoke_solver, run
from adventrun.registry.solvers import SolverEntry
from tests.conftest import write_input
from tests.solvers import examples as ex

if TYPE_CHECKING:
    from collections.abc import Callable


def _boom(_text: str) -> int:
    raise ValueError("malformed line 3")


def test_success_carries_the_rendered_answer(isolation: Path) -> None:
    write_input(isolation, 9, ex.DAY09)
    outcome = run(PuzzleRequest(day=9, part=1))
    assert isinstance(outcome, Success)
    assert outcome.answer == "114"
    assert outcome.elapsed >= 0


def test_explicit_input_path(tmp_path: Path) -> None:
    path = tmp_path / "example.txt"
    path.write_text(ex.DAY06, encoding="utf-8")
    outcome = run(PuzzleRequest(day=6, part=2, input_path=path))
    assert isinstance(outcome, Success)
    assert outcome.answer == "71503"


def test_unimplemented_day_wins_over_missing_input(
    isolation: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    def fail_on_read(*_args: object, **_kwargs: object) -> None:
        pytest.fail("input must not be resolved for an unimplemented day")

    monkeypatch.setattr(dispatcher, "resolve_input", fail_on_read)

    outcome = run(PuzzleRequest(day=23, part=1))

    assert isinstance(outcome, Failure)
    assert isinstance(outcome.error, UnimplementedDayError)
    assert outcome.exit_code == ExitCode.UNIMPLEMENTED_DAY


def test_out_of_range_day_is_reported_as_unimplemented(isolation: Path) -> None:
    outcome = run(PuzzleRequest(day=99, part=1))
    assert isinstance(outcome, Failure)
    assert outcome.kind == "unimplemented-day"


def test_missing_default_input(isolation: Path) -> None:
    outcome = run(PuzzleRequest(day=3, part=1))
    assert isinstance(outcome, Failure)
    assert isinstance(outcome.error, InputNotFoundError)
    assert outcome.error.is_default


def test_solver_exception_is_wrapped(
    tmp_path: Path, temporary_entry: Callable[[SolverEntry], SolverEntry]
) -> None:
    temporary_entry(SolverEntry(day=23, part1=_boom, part2=_boom))
    path = tmp_path / "in.txt"
    path.write_text("x\n", encoding="utf-8")

    outcome = run(PuzzleRequest(day=23, part=2, input_path=path))

    assert isinstance(outcome, Failure)
    assert isinstance(outcome.error, SolverError)
    assert str(outcome.error) == "Day 23 part 2 failed: ValueError: malformed line 3"
    assert outcome.exit_code == ExitCode.SOLVER_ERROR


def test_malformed_puzzle_input_is_a_solver_error(tmp_path: Path) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("no digits here\n", encoding="utf-8")
    outcome = run(PuzzleRequest(day=1, part=1, input_path=path))
    assert isinstance(outcome, Failure)
    assert outcome.kind == "solver"
    assert "no digit found" in str(outcome.error)


def test_invoke_solver_stringifies_answers() -> None:
    assert invoke_solver(lambda _t: 42, "", day=1, part=1) == "42"
    assert invoke_solver(lambda _t: "ABC", "", day=1, part=1) == "ABC"


def test_invoke_solver_rejects_missing_answer() -> None:
    with pytest.raises(SolverError, match="solver returned no answer"):
        invoke_solver(lambda _t: None, "", day=1, part=1)  # type: ignore[arg-type,return-value]


def test_solver_receives_the_raw_text(
    tmp_path: Path, temporary_entry: Callable[[SolverEntry], SolverEntry]
) -> None:
    seen: list[str] = []

    def record(text: str) -> int:
        seen.append(text)
        return len(text)

    temporary_entry(SolverEntry(day=25, part1=record, part2=record))
    path = tmp_path / "raw.txt"
    path.write_bytes(b"1\r\n2\r\n\r\n")

    outcome = run(PuzzleRequest(day=25, part=1, input_path=path))

    assert seen == ["1\r\n2\r\n\r\n"]
    assert isinstance(outcome, Success)
    assert outcome.answer == "8"


def test_missing_explicit_input_never_invokes_the_solver(
    tmp_path: Path, temporary_entry: Callable[[SolverEntry], SolverEntry]
) -> None:
    calls: list[str] = []

    def record(text: str) -> int:
        calls.append(text)
        return 0

    temporary_entry(SolverEntry(day=24, part1=record, part2=record))

    outcome = run(PuzzleRequest(day=24, part=1, input_path=tmp_path / "absent.txt"))

    assert isinstance(outcome, Failure)
    assert isinstance(outcome.error, InputNotFoundError)
    assert not outcome.error.is_default
    assert calls == []
