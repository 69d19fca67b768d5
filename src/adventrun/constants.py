# topmark:header:start
#
#   project      : AdventRun
#   file         : constants.py
#   file_relpath : src/adventrun/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AdventRun Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from pathlib import Path
from typing import Final

try:
    ADVENTRUN_VERSION: str = get_version("adventrun")
except PackageNotFoundError:  # running from a source checkout
    ADVENTRUN_VERSION = "0.0.0"

MIN_DAY: Final[int] = 1
MAX_DAY: Final[int] = 25
PARTS: Final[tuple[int, ...]] = (1, 2)

# Conventional location of puzzle inputs: inputs/d07.txt for day 7
DEFAULT_INPUTS_DIR: Final[Path] = Path("inputs")
DEFAULT_INPUT_TEMPLATE: Final[str] = "d{day:02d}.txt"

# Configuration discovery (working directory only)
CONFIG_FILE_NAME: Final[str] = "adventrun.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "adventrun"

LOG_LEVEL_ENV_VAR: Final[str] = "ADVENTRUN_LOG_LEVEL"
