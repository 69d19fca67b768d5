# topmark:header:start
#
#   project      : AdventRun
#   file         : options.py
#   file_relpath : src/adventrun/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the AdventRun command.

This module centralizes reusable options (verbosity, color, configuration) and
their resolution logic, so the command itself can stay thin.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from adventrun.cli.cli_types import EnumChoiceParam

P = ParamSpec("P")
R = TypeVar("R")


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds the counting --verbose option to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with the verbosity option added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase output detail (answer sentence and solve time).",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply configuration options to a Click command.

    Adds ``--inputs-dir`` and ``--no-config``.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--inputs-dir",
        "inputs_dir",
        type=click.Path(file_okay=False, dir_okay=True),
        default=None,
        metavar="DIR",
        help="Directory holding default input files (default: inputs).",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore adventrun.toml / [tool.adventrun] (only use defaults).",
    )(f)
    return f
