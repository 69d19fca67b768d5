# topmark:header:start
#
#   project      : AdventRun
#   file         : __init__.py
#   file_relpath : src/adventrun/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line front-end for AdventRun."""
