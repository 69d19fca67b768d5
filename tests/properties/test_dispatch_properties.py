# topmark:header:start
#
#   project      : AdventRun
#   file         : test_dispatch_properties.py
#   file_relpath : tests/properties/test_dispatch_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for request handling.

These suites assert:
1) every day without a registered solver is reported as unimplemented,
   regardless of the part and without touching the filesystem,
2) the default input path is ``inputs/dNN.txt`` for every valid day,
3) validators accept exactly the documented ranges, and
4) running the same request twice yields the same answer.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from hypothesis import HealthCheck, assume, given, settings
from hypothesis import strategies as st

from adventrun import dispatcher
from adventrun.core.errors import ArgumentError, UnimplementedDayError
from adventrun.core.outcomes import Failure, Success
from adventrun.core.request import PuzzleRequest, validate_day, validate_part
from adventrun.inputs import default_input_path
from adventrun.registry.solvers import SolverRegistry
from tests.solvers import examples as ex

pytestmark: pytest.MarkDecorator = pytest.mark.integration


@settings(suppress_health_check=[HealthCheck.function_scoped_fixture], max_examples=50)
@given(day=st.integers(min_value=-1000, max_value=1000), part=st.sampled_from([1, 2]))
def test_unregistered_days_never_read_input(
    monkeypatch: pytest.MonkeyPatch, day: int, part: int
) -> None:
    assume(not SolverRegistry.is_registered(day))

    def fail_on_read(*_args: object, **_kwargs: object) -> None:
        raise AssertionError("input resolved for an unimplemented day")

    monkeypatch.setattr(dispatcher, "resolve_input", fail_on_read)

    outcome = dispatcher.run(PuzzleRequest(day=day, part=part))

    assert isinstance(outcome, Failure)
    assert isinstance(outcome.error, UnimplementedDayError)
    assert outcome.error.day == day


@given(day=st.integers(min_value=1, max_value=25))
def test_default_path_is_zero_padded(day: int) -> None:
    path = default_input_path(day)
    assert path.parent == Path("inputs")
    assert path.name == f"d{day:02d}.txt"
    assert len(path.stem) == 3


@given(value=st.integers(min_value=-10_000, max_value=10_000))
def test_day_validator_range(value: int) -> None:
    if 1 <= value <= 25:
        assert validate_day(str(value)) == value
    else:
        with pytest.raises(ArgumentError):
            validate_day(str(value))


@given(value=st.integers())
def test_part_validator_range(value: int) -> None:
    if value in (1, 2):
        assert validate_part(value) == value
    else:
        with pytest.raises(ArgumentError):
            validate_part(value)


@given(text=st.text(alphabet=st.characters(blacklist_categories=("Nd",)), max_size=20))
def test_day_validator_rejects_non_numbers(text: str) -> None:
    with pytest.raises(ArgumentError, match="whole number"):
        validate_day(text)


@settings(suppress_health_check=[HealthCheck.function_scoped_fixture], max_examples=10, deadline=None)
@given(part=st.sampled_from([1, 2]))
def test_runs_are_deterministic(tmp_path: Path, part: int) -> None:
    path = tmp_path / "d12.txt"
    path.write_text(ex.DAY12, encoding="utf-8")
    request = PuzzleRequest(day=12, part=part, input_path=path)

    first = dispatcher.run(request)
    second = dispatcher.run(request)

    assert isinstance(first, Success)
    assert isinstance(second, Success)
    assert first.answer == second.answer
