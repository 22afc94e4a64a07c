# topmark:header:start
#
#   project      : ScoreFlow
#   file         : main.py
#   file_relpath : src/scoreflow/cli/main.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""ScoreFlow command-line interface.

Key ideas:
- Group-level options (verbosity, color) are initialized once, placed into ``ctx.obj``.
- Invoking ``scoreflow`` without a subcommand runs the standard pipeline with
  default settings, so the tool runs to completion with no input at all.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scoreflow.cli.commands.run import run_command
from scoreflow.cli.commands.show_defaults import show_defaults_command
from scoreflow.cli.commands.version import version_command
from scoreflow.cli.console import ClickConsole
from scoreflow.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from scoreflow.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from scoreflow.config.logging import ScoreflowLogger

logger: ScoreflowLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured via env only
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="ScoreFlow CLI",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the ScoreFlow CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )

    if ctx.invoked_subcommand is None:
        logger.debug("No subcommand given; running the standard pipeline")
        ctx.invoke(run_command)


cli.add_command(run_command)

cli.add_command(show_defaults_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
