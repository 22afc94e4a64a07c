# topmark:header:start
#
#   project      : ScoreFlow
#   file         : options.py
#   file_relpath : src/scoreflow/cli/options.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Shared CLI options for the ScoreFlow command group.

Two option families are defined here, each with its resolver:

- verbosity (``-v``/``-q``): resolved to a signed level, where a negative
  level hides the per-attempt generation progress and a positive one adds
  headings to informational commands;
- color (``--color``/``--no-color``): resolved to a single on/off switch,
  honoring ``FORCE_COLOR`` and ``NO_COLOR``.

Diagnostic logging is not driven by these flags; see `scoreflow.config.logging`.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from enum import Enum
from typing import Any, TypeVar

import click

from scoreflow.cli.errors import ScoreflowUsageError

F = TypeVar("F", bound=Callable[..., Any])


def _apply(options: tuple[Callable[[Any], Any], ...], f: F) -> F:
    for option in reversed(options):
        f = option(f)
    return f


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Combine the ``-v`` and ``-q`` counts into one signed verbosity level.

    Args:
        verbose_count (int): Occurrences of ``-v``.
        quiet_count (int): Occurrences of ``-q``.

    Returns:
        int: ``verbose_count`` or ``-quiet_count``; ``0`` when neither is given.

    Raises:
        ScoreflowUsageError: Both flags were given.
    """
    if verbose_count and quiet_count:
        raise ScoreflowUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    return verbose_count - quiet_count


_VERBOSE_OPTIONS: tuple[Callable[[Any], Any], ...] = (
    click.option(
        "-v",
        "--verbose",
        count=True,
        help="Add headings to informational output (may be repeated).",
    ),
    click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress per-attempt generation progress.",
    ),
)


def common_verbose_options(f: F) -> F:
    """Add ``-v/--verbose`` and ``-q/--quiet`` (counting flags) to a command."""
    return _apply(_VERBOSE_OPTIONS, f)


class ColorMode(str, Enum):
    """Requested color behavior."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(*, cli_mode: ColorMode | None, stdout_isatty: bool | None = None) -> bool:
    """Decide whether ANSI color is emitted.

    An explicit ``always``/``never`` wins. In ``auto`` mode, a non-zero
    ``FORCE_COLOR`` enables color, a set ``NO_COLOR`` disables it, and
    otherwise color follows whether stdout is a terminal.

    Args:
        cli_mode (ColorMode | None): Mode from the command line (``None`` means auto).
        stdout_isatty (bool | None): Terminal check override; checked when ``None``.

    Returns:
        bool: True when output should be colored.
    """
    if cli_mode is ColorMode.ALWAYS or cli_mode is ColorMode.NEVER:
        return cli_mode is ColorMode.ALWAYS
    if os.getenv("FORCE_COLOR") not in (None, "", "0"):
        return True
    if "NO_COLOR" in os.environ:
        return False
    return sys.stdout.isatty() if stdout_isatty is None else stdout_isatty


_COLOR_OPTIONS: tuple[Callable[[Any], Any], ...] = (
    click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    ),
    click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (same as --color=never).",
    ),
)


def common_color_options(f: F) -> F:
    """Add ``--color`` and ``--no-color`` to a command."""
    return _apply(_COLOR_OPTIONS, f)
