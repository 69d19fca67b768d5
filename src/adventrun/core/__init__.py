# topmark:header:start
#
#   project      : AdventRun
#   file         : __init__.py
#   file_relpath : src/adventrun/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-agnostic core types: requests, outcomes, errors and exit codes."""
