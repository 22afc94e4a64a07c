# topmark:header:start
#
#   project      : ScoreFlow
#   file         : console.py
#   file_relpath : src/scoreflow/cli/console.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Click-backed console for report output.

Report tables, section headers and progress lines are program output, not
diagnostics: they go through `ClickConsole` to stdout, while `logging` is
reserved for the diagnostic stream on stderr. Color is applied only through
`ClickConsole.styled`, so disabling it leaves the tables byte-for-byte plain.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Any, TextIO

import click

from scoreflow.cli_shared.console_api import ConsoleLike


@dataclass
class ClickConsole(ConsoleLike):
    """Console writing through `click.echo`.

    Attributes:
        enable_color (bool): Emit ANSI styling when True.
        out (TextIO): Report stream; the current ``sys.stdout`` when omitted.
        err (TextIO): Error stream; the current ``sys.stderr`` when omitted.
    """

    enable_color: bool = True
    out: TextIO = field(default_factory=lambda: sys.stdout)
    err: TextIO = field(default_factory=lambda: sys.stderr)

    def _echo(self, text: str, stream: TextIO, nl: bool, **style: Any) -> None:
        if style and self.enable_color:
            text = click.style(text, **style)
        click.echo(text, nl=nl, file=stream, color=self.enable_color)

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write report output to ``out``."""
        self._echo(text, self.out, nl)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write a red error message to ``err``."""
        self._echo(text, self.err, nl, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with `click.style`, or unchanged when color is off.

        Args:
            text (str): Text to style.
            **style_kwargs (Any): Keyword arguments forwarded to `click.style`.

        Returns:
            str: The (possibly) styled text.
        """
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
