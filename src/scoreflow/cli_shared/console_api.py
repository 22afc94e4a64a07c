# topmark:header:start
#
#   project      : ScoreFlow
#   file         : console_api.py
#   file_relpath : src/scoreflow/cli_shared/console_api.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Framework-agnostic console interface for program output.

This protocol defines the small surface used by pipeline steps and CLI
commands to emit user-facing output, separate from internal logging.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """Minimal interface for a console used by steps and CLI commands.

    Implementations may use Click or plain stdlib streams. The purpose
    is to decouple program output from the logging subsystem.
    """

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: object) -> str:
        """Return a styled string (no-op if styling is disabled)."""
        ...
