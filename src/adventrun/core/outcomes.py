# topmark:header:start
#
#   project      : AdventRun
#   file         : outcomes.py
#   file_relpath : src/adventrun/core/outcomes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tagged results of a single run.

Design goals:
- Presentation-free: no ANSI, no console logic.
- Immutable: an outcome is produced once and only read afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from adventrun.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from adventrun.core.errors import AdventRunError
    from adventrun.core.request import PuzzleRequest


@dataclass(frozen=True)
class Success:
    """A computed answer.

    Attributes:
        request (PuzzleRequest): The request that produced the answer.
        answer (str): The answer rendered as text.
        elapsed (float): Solver wall time in seconds (input loading excluded).
    """

    request: PuzzleRequest
    answer: str
    elapsed: float = 0.0

    @property
    def ok(self) -> bool:
        return True

    @property
    def exit_code(self) -> ExitCode:
        return ExitCode.SUCCESS


@dataclass(frozen=True)
class Failure:
    """A reported failure.

    Attributes:
        request (PuzzleRequest): The request that failed.
        error (AdventRunError): The classified error.
    """

    request: PuzzleRequest
    error: AdventRunError

    @property
    def ok(self) -> bool:
        return False

    @property
    def kind(self) -> str:
        return self.error.kind

    @property
    def exit_code(self) -> ExitCode:
        return self.error.exit_code


SolverOutcome: TypeAlias = "Success | Failure"
