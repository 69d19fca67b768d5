# topmark:header:start
#
#   project      : AdventRun
#   file         : model.py
#   file_relpath : src/adventrun/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration for AdventRun.

Configuration is optional. When present it is read from the working directory,
from ``adventrun.toml`` (top-level keys) or from the ``[tool.adventrun]`` table of
``pyproject.toml``; the first file that exists wins.

Example ``adventrun.toml``:

    ```toml
    inputs_dir = "puzzle-inputs"
    input_template = "day{day:02d}.txt"
    ```

Notes:
    - Relative ``inputs_dir`` values are resolved against the directory of the
      config file that declared them.
    - Unreadable or unparsable TOML is logged and ignored (defaults apply).
    - Present keys with unusable values raise
      [`ConfigError`][adventrun.core.errors.ConfigError].
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from adventrun.config.logging import get_logger
from adventrun.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_INPUT_TEMPLATE,
    DEFAULT_INPUTS_DIR,
    PYPROJECT_FILE_NAME,
    PYPROJECT_TOOL_SECTION,
)
from adventrun.core.errors import ConfigError

logger = get_logger(__name__)

TomlTable = dict[str, Any]

KNOWN_KEYS: frozenset[str] = frozenset({"inputs_dir", "input_template"})


@dataclass(frozen=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        inputs_dir (Path): Directory holding the default input files.
        input_template (str): File name template, formatted with ``day=<int>``.
        source (Path | None): Config file the values came from, if any.
    """

    inputs_dir: Path = DEFAULT_INPUTS_DIR
    input_template: str = DEFAULT_INPUT_TEMPLATE
    source: Path | None = None

    @classmethod
    def from_defaults(cls) -> Config:
        """Return the built-in defaults (``inputs/dNN.txt``)."""
        return cls()

    def with_inputs_dir(self, inputs_dir: str | Path) -> Config:
        """Return a copy with ``inputs_dir`` overridden (e.g. by ``--inputs-dir``)."""
        return replace(self, inputs_dir=Path(inputs_dir))

    def input_filename(self, day: int) -> str:
        """Render the default file name for ``day``."""
        return self.input_template.format(day=day)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document.

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}
    except (TypeError, ValueError) as e:
        logger.error("Unknown error while reading TOML from %s: %s", path, e)
        return {}


def _extract_table(path: Path) -> TomlTable | None:
    data = load_toml_dict(path)
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool = data.get("tool")
    if not isinstance(tool, dict):
        return None
    table = cast("dict[str, Any]", tool).get(PYPROJECT_TOOL_SECTION)
    return cast("TomlTable", table) if isinstance(table, dict) else None


def config_from_table(table: TomlTable, *, source: Path | None = None) -> Config:
    """Build a Config from a parsed TOML table.

    Args:
        table (TomlTable): Parsed settings (top-level keys).
        source (Path | None): File the table came from; relative ``inputs_dir``
            values are resolved against its directory.

    Returns:
        Config: The resulting configuration.

    Raises:
        ConfigError: If a known key holds an unusable value.
    """
    where = f" in {source}" if source else ""
    for key in sorted(set(table) - KNOWN_KEYS):
        logger.warning("Ignoring unknown config key '%s'%s", key, where)

    config = Config(source=source)

    inputs_dir = table.get("inputs_dir")
    if inputs_dir is not None:
        if not isinstance(inputs_dir, str) or not inputs_dir.strip():
            raise ConfigError(f"'inputs_dir' must be a non-empty string{where}")
        path = Path(inputs_dir)
        if source is not None and not path.is_absolute():
            path = source.parent / path
        config = replace(config, inputs_dir=path)

    template = table.get("input_template")
    if template is not None:
        if not isinstance(template, str) or "{day" not in template:
            raise ConfigError(f"'input_template' must be a string containing '{{day}}'{where}")
        try:
            template.format(day=1)
        except (AttributeError, IndexError, KeyError, TypeError, ValueError) as exc:
            raise ConfigError(f"'input_template' is not a valid template{where}: {exc}") from exc
        config = replace(config, input_template=template)

    logger.debug("Resolved config: %s", config)
    return config


def find_config_file(cwd: Path) -> Path | None:
    """Return the first config file present in ``cwd``, if any.

    ``adventrun.toml`` is preferred; ``pyproject.toml`` only counts when it has a
    ``[tool.adventrun]`` table.
    """
    candidate = cwd / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate
    candidate = cwd / PYPROJECT_FILE_NAME
    if candidate.is_file() and _extract_table(candidate) is not None:
        return candidate
    return None


def load_config(cwd: Path | None = None) -> Config:
    """Discover and load the configuration for ``cwd`` (default: current directory).

    Returns:
        Config: Loaded configuration, or defaults when no config file applies.

    Raises:
        ConfigError: If the config file holds unusable values.
    """
    base = cwd if cwd is not None else Path.cwd()
    path = find_config_file(base)
    if path is None:
        logger.debug("No config file found in %s; using defaults", base)
        return Config.from_defaults()
    logger.info("Loading config from %s", path)
    return config_from_table(_extract_table(path) or {}, source=path)
