# topmark:header:start
#
#   project      : AdventRun
#   file         : errors.py
#   file_relpath : src/adventrun/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the AdventRun CLI.

Usage:
    Raise these exceptions from the command to abort with a standardized
    message and exit code.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they print a plain ``error: <message>`` line on stderr.
"""

from __future__ import annotations

from typing import IO, Any

import click

from adventrun.core.exit_codes import ExitCode


class AdventRunCliError(click.ClickException):
    """Base class for all AdventRun CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available, else on stderr."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"error: {self.format_message()}")
                return
        click.secho(f"error: {self.format_message()}", file=file, err=file is None, fg="bright_red")


class AdventRunUnexpectedError(AdventRunCliError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR
