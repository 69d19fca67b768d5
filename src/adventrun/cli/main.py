# topmark:header:start
#
#   project      : AdventRun
#   file         : main.py
#   file_relpath : src/adventrun/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``adventrun`` command.

Usage:
    adventrun [INPUT_PATH] -d DAY -p PART

Key ideas:
- Click converts and validates ``-d``/``-p`` before the callback runs, so an
  invalid request never reaches the registry or the filesystem.
- Shared state (verbosity, color, console) is placed into ``ctx.obj`` once.
- The callback builds a [`PuzzleRequest`][adventrun.core.request.PuzzleRequest],
  hands it to the dispatcher and exits with the outcome's exit code.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from adventrun.cli.cli_types import DAY, PART
from adventrun.cli.console import ClickConsole
from adventrun.cli.errors import AdventRunUnexpectedError
from adventrun.cli.options import (
    ColorMode,
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_color_mode,
)
from adventrun.config.logging import get_logger, resolve_env_log_level, setup_logging
from adventrun.config.model import Config, load_config
from adventrun.constants import ADVENTRUN_VERSION
from adventrun.core.errors import ConfigError
from adventrun.core.outcomes import Failure, SolverOutcome
from adventrun.core.request import PuzzleRequest
from adventrun.dispatcher import render_outcome, run
from adventrun.registry.solvers import SolverRegistry
from adventrun.solvers import register_all_solvers

if TYPE_CHECKING:
    from adventrun.cli.console_api import ConsoleLike

logger = get_logger(__name__)

register_all_solvers()


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = verbose

    # Internal logging is configured via env only
    level_env = resolve_env_log_level()
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


def resolve_config(*, no_config: bool, inputs_dir: str | None) -> Config:
    """Load the project configuration and apply command-line overrides.

    Raises:
        ConfigError: If the configuration file holds unusable values.
    """
    config = Config.from_defaults() if no_config else load_config()
    if inputs_dir is not None:
        config = config.with_inputs_dir(inputs_dir)
    return config


def print_days(console: ConsoleLike) -> None:
    """Print the implemented days, one per line."""
    for entry in SolverRegistry.iter_entries():
        title = f": {entry.title}" if entry.title else ""
        console.print(f"Day {entry.day:2d}{title}")


def _require(ctx: click.Context, name: str, value: int | None) -> int:
    if value is None:
        param = next(p for p in ctx.command.params if p.name == name)
        raise click.MissingParameter(ctx=ctx, param=param)
    return value


@click.command(
    name="adventrun",
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Run the solver for one puzzle day and part on an input file.\n\n"
    "INPUT_PATH defaults to inputs/dNN.txt (NN = zero-padded day).",
)
@click.argument(
    "input_path",
    required=False,
    type=click.Path(dir_okay=True, path_type=Path),
)
@click.option("-d", "--day", "day", type=DAY, default=None, help="Puzzle day (1-25). Required.")
@click.option("-p", "--part", "part", type=PART, default=None, help="Puzzle part (1 or 2). Required.")
@click.option(
    "--list-days",
    "list_days",
    is_flag=True,
    help="List the implemented days and exit.",
)
@common_config_options
@common_verbose_options
@common_color_options
@click.version_option(ADVENTRUN_VERSION, "--version", prog_name="adventrun", message="%(version)s")
@click.pass_context
def cli(
    ctx: click.Context,
    input_path: Path | None,
    day: int | None,
    part: int | None,
    list_days: bool,
    inputs_dir: str | None,
    no_config: bool,
    verbose: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the AdventRun CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if list_days:
        print_days(console)
        return

    request = PuzzleRequest(
        day=_require(ctx, "day", day),
        part=_require(ctx, "part", part),
        input_path=input_path,
    )
    outcome: SolverOutcome
    try:
        config = resolve_config(no_config=no_config, inputs_dir=inputs_dir)
    except ConfigError as exc:
        outcome = Failure(request, exc)
    else:
        logger.debug("Request: %r; config: %r", request, config)
        try:
            outcome = run(request, config=config)
        except Exception as exc:
            logger.debug("Unexpected error while running %s", request, exc_info=True)
            raise AdventRunUnexpectedError(f"Unexpected error: {exc}") from exc

    exit_code = render_outcome(outcome, console, verbosity=ctx.obj["verbosity_level"])
    ctx.exit(int(exit_code))


if __name__ == "__main__":
    cli()
