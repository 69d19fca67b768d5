# topmark:header:start
#
#   project      : AdventRun
#   file         : errors.py
#   file_relpath : src/adventrun/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Domain errors raised by the AdventRun core.

Every failure the runner can report is an [`AdventRunError`][adventrun.core.errors.AdventRunError]
subclass carrying a stable ``kind`` identifier and the process exit code it maps to.
These exceptions are framework-agnostic; the CLI layer turns them into
Click exceptions or rendered diagnostics.

Usage:
    ```python
    from adventrun.core.errors import UnimplementedDayError

    raise UnimplementedDayError(day=19, available=(1, 2, 3))
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from adventrun.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path


class AdventRunError(Exception):
    """Base class for all AdventRun errors.

    Attributes:
        kind (str): Stable, machine-friendly identifier of the failure family.
        exit_code (ExitCode): Process exit status associated with this failure.
        message (str): Human-readable description.
    """

    kind: ClassVar[str] = "error"
    exit_code: ClassVar[ExitCode] = ExitCode.FAILURE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ArgumentError(AdventRunError):
    """Malformed, missing or out-of-range day/part."""

    kind = "argument"
    exit_code = ExitCode.USAGE_ERROR


class ConfigError(AdventRunError):
    """Invalid configuration value (wrong type or unusable template)."""

    kind = "config"
    exit_code = ExitCode.CONFIG_ERROR


class InputNotFoundError(AdventRunError):
    """The explicit or default input file does not exist.

    Attributes:
        path (Path): The path that was looked up.
        is_default (bool): Whether ``path`` was derived from the day number.
    """

    kind = "input-not-found"
    exit_code = ExitCode.FILE_NOT_FOUND

    def __init__(self, message: str, *, path: Path, is_default: bool) -> None:
        super().__init__(message)
        self.path = path
        self.is_default = is_default


class InputReadError(AdventRunError):
    """The input file exists but could not be read or decoded."""

    kind = "input-read"
    exit_code = ExitCode.IO_ERROR

    def __init__(self, message: str, *, path: Path, exit_code: ExitCode | None = None) -> None:
        super().__init__(message)
        self.path = path
        if exit_code is not None:
            # Instance override, e.g. ENCODING_ERROR for undecodable files
            self.exit_code = exit_code  # type: ignore[misc]


class UnimplementedDayError(AdventRunError):
    """No solver is registered for the requested day."""

    kind = "unimplemented-day"
    exit_code = ExitCode.UNIMPLEMENTED_DAY

    def __init__(self, *, day: int, available: Iterable[int]) -> None:
        self.day = day
        self.available: tuple[int, ...] = tuple(sorted(available))
        listing = ", ".join(str(d) for d in self.available) or "none"
        super().__init__(f"Day {day} is not implemented (available days: {listing})")


class SolverError(AdventRunError):
    """A solver unit raised while computing an answer.

    The original exception is kept as ``cause`` and chained as ``__cause__``.
    """

    kind = "solver"
    exit_code = ExitCode.SOLVER_ERROR

    def __init__(self, *, day: int, part: int, cause: BaseException) -> None:
        self.day = day
        self.part = part
        self.cause = cause
        reason = type(cause).__name__
        if str(cause):
            reason = f"{reason}: {cause}"
        super().__init__(f"Day {day} part {part} failed: {reason}")
        self.__cause__ = cause
