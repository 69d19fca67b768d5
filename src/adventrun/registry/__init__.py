# topmark:header:start
#
#   project      : AdventRun
#   file         : __init__.py
#   file_relpath : src/adventrun/registry/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public solver registry for AdventRun.

Typical usage:
    ```python
    from adventrun.registry import SolverRegistry

    entry = SolverRegistry.lookup(1)  # raises UnimplementedDayError when absent
    answer = entry.solver_for(2)(text)
    ```
"""

from __future__ import annotations

from adventrun.registry.solvers import Solver, SolverEntry, SolverRegistry

__all__ = ["Solver", "SolverEntry", "SolverRegistry"]
