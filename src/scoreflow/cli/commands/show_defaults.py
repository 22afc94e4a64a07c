# topmark:header:start
#
#   project      : ScoreFlow
#   file         : show_defaults.py
#   file_relpath : src/scoreflow/cli/commands/show_defaults.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""ScoreFlow `show-defaults` command.

Displays the built-in default configuration as TOML. Intended as a starting
point for a config file passed to ``scoreflow run --config``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scoreflow.config.io import load_defaults_dict, to_toml

if TYPE_CHECKING:
    from scoreflow.cli_shared.console_api import ConsoleLike


@click.command(
    name="show-defaults",
    help="Display the built-in default ScoreFlow configuration.",
)
def show_defaults_command() -> None:
    """Display the built-in default configuration."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    vlevel: int = ctx.obj.get("verbosity_level", 0)

    if vlevel > 0:
        console.print(
            console.styled("Default ScoreFlow Configuration (TOML):", bold=True, underline=True)
        )
        console.print(console.styled("# === BEGIN ===", fg="cyan", dim=True))

    console.print(console.styled(to_toml(load_defaults_dict()), fg="cyan"), nl=False)

    if vlevel > 0:
        console.print(console.styled("# === END ===", fg="cyan", dim=True))
