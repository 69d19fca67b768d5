# topmark:header:start
#
#   project      : AdventRun
#   file         : __init__.py
#   file_relpath : src/adventrun/solvers/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in solver units, one module per day (``day01`` ... ``dayNN``).

Each day module exposes ``part1(text)`` and ``part2(text)`` and a module-level
``ENTRY`` ([`SolverEntry`][adventrun.registry.solvers.SolverEntry]). Adding a day
means adding a module; nothing else needs to change.
"""

from __future__ import annotations

import importlib
import pkgutil
import re
from pathlib import Path

from adventrun.config.logging import get_logger

logger = get_logger(__name__)

_DAY_MODULE_RE = re.compile(r"^day\d{2}$")

_registered = False


def iter_day_module_names() -> list[str]:
    """Return the fully qualified names of the day modules in this package (sorted)."""
    package_dir = Path(__file__).parent
    return sorted(
        f"{__name__}.{module_info.name}"
        for module_info in pkgutil.iter_modules([str(package_dir)])
        if not module_info.ispkg and _DAY_MODULE_RE.match(module_info.name)
    )


def register_all_solvers() -> None:
    """Import all day modules and register their entries (idempotent).

    Not thread safe; the runner is single-threaded and registers at start-up.
    """
    global _registered
    if _registered:
        return
    from adventrun.registry.solvers import SolverEntry, SolverRegistry

    count = 0
    for module_name in iter_day_module_names():
        module = importlib.import_module(module_name)
        entry = getattr(module, "ENTRY", None)
        if not isinstance(entry, SolverEntry):
            logger.warning("Module %s does not define a SolverEntry; skipped", module_name)
            continue
        SolverRegistry.register(entry)
        count += 1
    _registered = True
    logger.debug("Registered %d built-in days", count)
