# topmark:header:start
#
#   project      : ScoreFlow
#   file         : progress.py
#   file_relpath : src/scoreflow/cli/progress.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Console rendering of generation progress.

`ConsoleProgressReporter` is a `GenerationObserver`: the dataset builder calls
it once per attempt and it writes one progress line per student id, with
failed attempts reported on indented continuation lines::

      Generating data for ID 7   ...
        [!!] Attempt 1 Failed: <reason>. Retrying... [OK] Score: 64.10 (Attempt 2)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scoreflow.cli_shared.console_api import ConsoleLike
    from scoreflow.generation.builder import GenerationAttempt


class ConsoleProgressReporter:
    """Write per-attempt generation progress to a console.

    Args:
        console (ConsoleLike): Output sink.
    """

    def __init__(self, console: ConsoleLike) -> None:
        self.console = console
        self.failures: int = 0

    def __call__(self, event: GenerationAttempt) -> None:
        if event.attempt == 1:
            self.console.print(f"  Generating data for ID {event.student_id:<4}...", nl=False)

        if event.student is not None:
            self.console.print(
                f" {self.console.styled('[OK]', fg='green')} "
                f"Score: {event.student.score:.2f} (Attempt {event.attempt})"
            )
            return

        self.failures += 1
        self.console.print()
        self.console.print(
            f"    {self.console.styled('[!!]', fg='yellow')} "
            f"Attempt {event.attempt} Failed: {event.error}. Retrying...",
            nl=False,
        )
