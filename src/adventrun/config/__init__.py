# topmark:header:start
#
#   project      : AdventRun
#   file         : __init__.py
#   file_relpath : src/adventrun/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for AdventRun."""

from __future__ import annotations

from adventrun.config.model import Config, load_config

__all__ = ["Config", "load_config"]
