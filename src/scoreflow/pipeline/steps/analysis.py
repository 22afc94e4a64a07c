# topmark:header:start
#
#   project      : ScoreFlow
#   file         : analysis.py
#   file_relpath : src/scoreflow/pipeline/steps/analysis.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Read-only step running a custom analysis over the collection.

The analysis callable receives a `StudentView` (never the live list) and the
output console; it computes whatever it needs and renders its own output.
`report_above_average` is the built-in analysis used by the standard pipeline.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from scoreflow.config.logging import get_logger
from scoreflow.constants import VALUE_NOT_AVAILABLE
from scoreflow.pipeline.steps.base import BaseStep, StepKind
from scoreflow.rendering.table import render_student_table

if TYPE_CHECKING:
    from collections.abc import Sequence

    from scoreflow.cli_shared.console_api import ConsoleLike
    from scoreflow.config.logging import ScoreflowLogger
    from scoreflow.core.models import Student
    from scoreflow.pipeline.context import ProcessingContext

logger: ScoreflowLogger = get_logger(__name__)

Analysis = Callable[["Sequence[Student]", "ConsoleLike"], None]


@dataclass(frozen=True, kw_only=True)
class AnalysisStep(BaseStep):
    """Hand a read-only view of the collection to ``analysis``.

    Attributes:
        analysis (Analysis): ``analysis(students, console)``; must not rely on
            mutating ``students``.
    """

    kind: ClassVar[StepKind] = StepKind.ANALYSIS

    analysis: Analysis

    def run(self, ctx: ProcessingContext) -> None:
        """Run the analysis on a read-only view of the current collection."""
        self.analysis(ctx.view(), ctx.console)


def make_analysis_step(
    title: str,
    analysis: Analysis,
    *,
    exempt_from_empty_skip: bool = False,
) -> AnalysisStep:
    """Create a custom-analysis step."""
    return AnalysisStep(
        title=title,
        analysis=analysis,
        exempt_from_empty_skip=exempt_from_empty_skip,
    )


def mean_score(students: Sequence[Student]) -> float | None:
    """Return the mean score, or ``None`` for an empty sequence."""
    if not students:
        return None
    return sum(s.score for s in students) / len(students)


def report_above_average(students: Sequence[Student], console: ConsoleLike) -> None:
    """Print score statistics, then list the students scoring at least the average.

    An empty collection reports the average as N/A and renders an empty list.
    """
    average: float | None = mean_score(students)
    average_text: str = VALUE_NOT_AVAILABLE if average is None else f"{average:.2f}"
    logger.debug("Average over %d students: %s", len(students), average_text)

    console.print("--- Statistics ---")
    console.print(f"Number of students analyzed: {len(students)}")
    console.print(f"Calculated Average Score: {average_text}")
    console.print("--------------------")

    above: list[Student] = [] if average is None else [s for s in students if s.score >= average]
    console.print(
        render_student_table(f"List: Scoring >= Average ({average_text})", above, True),
        nl=False,
    )
