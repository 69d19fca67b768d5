# topmark:header:start
#
#   project      : AdventRun
#   file         : inputs.py
#   file_relpath : src/adventrun/inputs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input resolution for puzzle runs.

Given a day and an optional explicit path, determine which file to read and load
its raw text. The text is returned exactly as stored: no newline translation, no
stripping, no validation. Parsing is each solver's own responsibility.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from adventrun.config.logging import get_logger
from adventrun.config.model import Config
from adventrun.core.errors import InputNotFoundError, InputReadError
from adventrun.core.exit_codes import ExitCode

logger = get_logger(__name__)


@dataclass(frozen=True)
class InputSource:
    """A resolved input file and its contents.

    Attributes:
        path (Path): The file that was read (relative paths stay relative).
        text (str): Unmodified file contents.
        is_default (bool): Whether ``path`` was derived from the day number.
    """

    path: Path
    text: str
    is_default: bool = False


def default_input_path(day: int, config: Config | None = None) -> Path:
    """Return the conventional input path for ``day``.

    With the built-in defaults, day 7 maps to ``inputs/d07.txt`` and day 25 to
    ``inputs/d25.txt``.

    Args:
        day (int): Puzzle day.
        config (Config | None): Configuration providing the directory and file
            name template; defaults apply when ``None``.

    Returns:
        Path: The derived path (not checked for existence).
    """
    cfg = config or Config.from_defaults()
    return cfg.inputs_dir / cfg.input_filename(day)


def read_input_text(path: Path) -> str:
    """Read ``path`` as UTF-8 without newline translation.

    Raises:
        OSError: Propagated from the filesystem.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    with path.open("r", encoding="utf-8", newline="") as fh:
        return fh.read()


def resolve_input(
    day: int,
    explicit_path: str | Path | None = None,
    *,
    config: Config | None = None,
) -> InputSource:
    """Resolve and load the input for ``day``.

    Args:
        day (int): Puzzle day, used to derive the default location.
        explicit_path (str | Path | None): File given on the command line; wins over
            the default location when provided.
        config (Config | None): Configuration used for the default location.

    Returns:
        InputSource: The resolved path and its raw text.

    Raises:
        InputNotFoundError: If the file does not exist. For explicit paths the
            OS error text is surfaced verbatim; for default paths the message names
            the expected location.
        InputReadError: If the file exists but cannot be read or decoded.
    """
    is_default = explicit_path is None
    path = default_input_path(day, config) if explicit_path is None else Path(explicit_path)
    logger.debug("Resolving input for day %d: %s (default=%s)", day, path, is_default)

    try:
        text = read_input_text(path)
    except FileNotFoundError as exc:
        if is_default:
            message = (
                f"Input file for day {day} not found at '{path}'. "
                f"Place your puzzle input there or pass a path explicitly."
            )
        else:
            message = str(exc)
        raise InputNotFoundError(message, path=path, is_default=is_default) from exc
    except UnicodeDecodeError as exc:
        raise InputReadError(
            f"Cannot decode '{path}' as UTF-8: {exc}",
            path=path,
            exit_code=ExitCode.ENCODING_ERROR,
        ) from exc
    except OSError as exc:
        raise InputReadError(str(exc), path=path) from exc

    logger.trace("Read %d characters from %s", len(text), path)
    return InputSource(path=path, text=text, is_default=is_default)
