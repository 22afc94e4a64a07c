# topmark:header:start
#
#   project      : ScoreFlow
#   file         : logging.py
#   file_relpath : src/scoreflow/config/logging.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Diagnostic logging for ScoreFlow.

Logging carries internal diagnostics only (retry failures, skipped steps,
config merging); report tables and progress lines are program output and go
through the console abstraction instead. Diagnostics are written to stderr so
they never interleave with a report redirected from stdout.

The module adds a ``TRACE`` level below ``DEBUG`` for per-attempt detail,
installs `ScoreflowLogger` as the logger class, and colors records with
`yachalk`. The level is normally taken from ``SCOREFLOW_LOG_LEVEL``; when the
variable is unset only CRITICAL records are shown.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "SCOREFLOW_LOG_LEVEL"


class ScoreflowLogger(logging.Logger):
    """`logging.Logger` with a `trace` method for the TRACE level."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level.

        Args:
            msg (object): Message format string.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra attributes for the record.
        """
        if not self.isEnabledFor(TRACE_LEVEL):
            return
        self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(ScoreflowLogger)


LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

# Checked highest first; records below TRACE are dimmed.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[..., str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record according to its severity."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and color it by level.

        Args:
            record (logging.LogRecord): The record to format.

        Returns:
            str: The colored log line.
        """
        message: str = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


_NAME_TO_LEVEL: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


def resolve_env_log_level() -> int | None:
    """Return the level named by ``SCOREFLOW_LOG_LEVEL``, or None.

    Accepts level names (case-insensitive, ``TRACE`` included) and numeric
    values such as ``"10"``. Unset, empty and unknown values resolve to None.
    """
    raw: str = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    return _NAME_TO_LEVEL.get(raw)


def setup_logging(level: int | None = None) -> None:
    """(Re)configure the root logger with a single colored stderr handler.

    Args:
        level (int | None): Level to apply. When None, the level comes from
            `resolve_env_log_level`, falling back to CRITICAL.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    )
    root_logger.addHandler(handler)


def get_logger(name: str) -> ScoreflowLogger:
    """Return the `ScoreflowLogger` registered under ``name``."""
    return cast("ScoreflowLogger", logging.getLogger(name))
