# topmark:header:start
#
#   project      : AdventRun
#   file         : dispatcher.py
#   file_relpath : src/adventrun/dispatcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dispatch a puzzle request to its solver and render the outcome.

Order of checks (first failure wins):

1. Registry lookup. An unimplemented day is reported as such even when its
   default input file is also missing, and no file is read.
2. Input resolution (explicit path or the day-derived default).
3. Solver invocation. Anything the solver raises becomes a
   [`SolverError`][adventrun.core.errors.SolverError] with day/part context.

Failures are returned, not raised: `run()` always produces a
[`SolverOutcome`][adventrun.core.outcomes.SolverOutcome]. There are no retries;
every failure is deterministic for a given request.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from adventrun.config.logging import get_logger
from adventrun.core.errors import AdventRunError, SolverError
from adventrun.core.exit_codes import ExitCode
from adventrun.core.outcomes import Failure, Success
from adventrun.inputs import resolve_input
from adventrun.registry.solvers import SolverRegistry

if TYPE_CHECKING:
    from adventrun.cli.console_api import ConsoleLike
    from adventrun.config.model import Config
    from adventrun.core.outcomes import SolverOutcome
    from adventrun.core.request import PuzzleRequest
    from adventrun.registry.solvers import Solver

logger = get_logger(__name__)


def invoke_solver(solver: Solver, text: str, *, day: int, part: int) -> str:
    """Call ``solver`` on ``text`` and render its answer.

    Raises:
        SolverError: If the solver raises (any ``Exception``) or returns ``None``.
    """
    try:
        answer = solver(text)
    except Exception as exc:
        logger.debug("Solver for day %d part %d raised", day, part, exc_info=True)
        raise SolverError(day=day, part=part, cause=exc) from exc
    if answer is None:
        raise SolverError(day=day, part=part, cause=ValueError("solver returned no answer"))
    return str(answer)


def run(request: PuzzleRequest, *, config: Config | None = None) -> SolverOutcome:
    """Run one request to completion.

    Args:
        request (PuzzleRequest): The day, part and optional input path.
        config (Config | None): Configuration for the default input location.

    Returns:
        SolverOutcome: ``Success`` with the rendered answer, or ``Failure`` with
            the classified error.
    """
    logger.info("Running %s", request)
    try:
        entry = SolverRegistry.lookup(request.day)
        solver = entry.solver_for(request.part)
        source = resolve_input(request.day, request.input_path, config=config)
        logger.debug("Input: %s (%d characters)", source.path, len(source.text))

        started = time.perf_counter()
        answer = invoke_solver(solver, source.text, day=request.day, part=request.part)
        elapsed = time.perf_counter() - started
    except AdventRunError as exc:
        logger.info("%s failed (%s): %s", request, exc.kind, exc)
        return Failure(request=request, error=exc)

    logger.info("%s solved in %.3fs", request, elapsed)
    return Success(request=request, answer=answer, elapsed=elapsed)


def format_elapsed(seconds: float) -> str:
    """Format a duration as ``HH:MM:SS.ss``."""
    hours, rem = divmod(seconds, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{int(hours):02}:{int(minutes):02}:{secs:05.2f}"


def render_outcome(outcome: SolverOutcome, console: ConsoleLike, *, verbosity: int = 0) -> ExitCode:
    """Print ``outcome`` and return the matching exit code.

    Success prints the answer alone on stdout (with ``verbosity > 0``, the full
    sentence and the solve time). Failure prints a single diagnostic line on
    stderr naming the failure kind.

    Args:
        outcome (SolverOutcome): The outcome to render.
        console (ConsoleLike): Output sink.
        verbosity (int): Program-output verbosity (0 = terse).

    Returns:
        ExitCode: ``SUCCESS`` for a success, the error's exit code otherwise.
    """
    if isinstance(outcome, Success):
        request = outcome.request
        if verbosity > 0:
            console.print(
                f"Answer for day {request.day} part {request.part} is "
                f"{console.styled(outcome.answer, bold=True)}"
            )
            console.print(console.styled(f"Solved in {format_elapsed(outcome.elapsed)}", dim=True))
        else:
            console.print(outcome.answer)
        return ExitCode.SUCCESS

    console.error(f"error[{outcome.kind}]: {outcome.error}")
    return outcome.exit_code
