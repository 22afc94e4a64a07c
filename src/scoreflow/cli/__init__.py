# topmark:header:start
#
#   project      : ScoreFlow
#   file         : __init__.py
#   file_relpath : src/scoreflow/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""ScoreFlow CLI package.

This package groups all Click command definitions and supporting utilities
for the ScoreFlow command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        scoreflow = "scoreflow.cli.main:cli"

All subcommands live in [`scoreflow.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
