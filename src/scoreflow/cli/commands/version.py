# topmark:header:start
#
#   project      : ScoreFlow
#   file         : version.py
#   file_relpath : src/scoreflow/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""ScoreFlow `version` command.

Prints the current ScoreFlow version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scoreflow.constants import SCOREFLOW_VERSION

if TYPE_CHECKING:
    from scoreflow.cli_shared.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of ScoreFlow.",
)
def version_command() -> None:
    """Show the current version of ScoreFlow."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.obj.get("verbosity_level", 0) > 0:
        console.print(console.styled("ScoreFlow version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(SCOREFLOW_VERSION, bold=True)}")
    else:
        console.print(console.styled(SCOREFLOW_VERSION, bold=True))
