# topmark:header:start
#
#   project      : ScoreFlow
#   file         : errors.py
#   file_relpath : src/scoreflow/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Exceptions for the ScoreFlow CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Failures inside pipeline steps are *not* wrapped:
    they propagate and end the run.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from scoreflow.cli.exit_codes import ExitCode


class ScoreflowError(click.ClickException):
    """Base class for all ScoreFlow CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class ScoreflowUsageError(ScoreflowError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ScoreflowConfigError(ScoreflowError):
    """Error for configuration errors (unreadable/invalid config)."""

    exit_code = ExitCode.CONFIG_ERROR


class ScoreflowFileNotFoundError(ScoreflowError):
    """Error when a config file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND
