# topmark:header:start
#
#   project      : ScoreFlow
#   file         : filter_report.py
#   file_relpath : src/scoreflow/pipeline/steps/filter_report.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Read-only step listing the students that match a predicate.

The collection is filtered lazily through a `StudentView`; no intermediate
list is built and the collection is never modified.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from scoreflow.pipeline.steps.base import BaseStep, StepKind
from scoreflow.rendering.table import render_student_table

if TYPE_CHECKING:
    from scoreflow.core.models import Student
    from scoreflow.pipeline.context import ProcessingContext

StudentPredicate = Callable[["Student"], bool]


@dataclass(frozen=True, kw_only=True)
class FilterReportStep(BaseStep):
    """Render the students matching ``predicate`` as a table.

    Attributes:
        report_title (str): Title of the rendered list.
        predicate (StudentPredicate): Selects the students to list.
        show_count (bool): Whether the table ends with a count line.
    """

    kind: ClassVar[StepKind] = StepKind.FILTER_REPORT

    report_title: str
    predicate: StudentPredicate
    show_count: bool = True

    def run(self, ctx: ProcessingContext) -> None:
        """Print the filtered table for the current collection."""
        matching = filter(self.predicate, ctx.view())
        table: str = render_student_table(self.report_title, matching, self.show_count)
        ctx.console.print(table, nl=False)


def make_filter_report_step(
    title: str,
    report_title: str,
    predicate: StudentPredicate,
    show_count: bool = True,
    *,
    exempt_from_empty_skip: bool = False,
) -> FilterReportStep:
    """Create a filter-and-report step.

    Args:
        title (str): Section title.
        report_title (str): Title of the rendered list.
        predicate (StudentPredicate): Selects the students to list.
        show_count (bool): Whether to print the number of matching students.
        exempt_from_empty_skip (bool): Run even when the collection is empty.

    Returns:
        FilterReportStep: The constructed step.
    """
    return FilterReportStep(
        title=title,
        report_title=report_title,
        predicate=predicate,
        show_count=show_count,
        exempt_from_empty_skip=exempt_from_empty_skip,
    )
