# topmark:header:start
#
#   project      : AdventRun
#   file         : __init__.py
#   file_relpath : src/adventrun/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AdventRun package.

AdventRun is a command-line puzzle runner. Given a day number, a part number and
an input file, it dispatches to the registered day-specific solver, runs it on the
raw input text and prints the answer.
"""

from __future__ import annotations
