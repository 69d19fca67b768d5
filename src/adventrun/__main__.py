# topmark:header:start
#
#   project      : AdventRun
#   file         : __main__.py
#   file_relpath : src/adventrun/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running AdventRun via ``python -m adventrun``.

It delegates directly to :func:`adventrun.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how AdventRun is launched.

Examples:
    Run day 1, part 2 on the default input file::

        python -m adventrun -d 1 -p 2
"""

from __future__ import annotations

from adventrun.cli.main import cli

if __name__ == "__main__":
    cli()
