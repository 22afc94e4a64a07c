# topmark:header:start
#
#   project      : ScoreFlow
#   file         : __main__.py
#   file_relpath : src/scoreflow/__main__.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Support ``python -m scoreflow``."""

from __future__ import annotations

from scoreflow.cli.main import cli

if __name__ == "__main__":
    cli()
