# topmark:header:start
#
#   project      : ScoreFlow
#   file         : mutation.py
#   file_relpath : src/scoreflow/pipeline/steps/mutation.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Read-write step handing the live collection to an action.

Changes made by the action (reordering, in-place filtering, replacement of
elements) are visible to every later step and to the caller once the run ends.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from operator import attrgetter
from typing import TYPE_CHECKING, ClassVar

from scoreflow.pipeline.steps.base import BaseStep, StepKind
from scoreflow.rendering.table import render_student_table

if TYPE_CHECKING:
    from scoreflow.cli_shared.console_api import ConsoleLike
    from scoreflow.core.models import Student
    from scoreflow.pipeline.context import ProcessingContext

Action = Callable[["list[Student]", "ConsoleLike"], None]


@dataclass(frozen=True, kw_only=True)
class MutationStep(BaseStep):
    """Hand the live collection to ``action``.

    Attributes:
        action (Action): ``action(students, console)``; mutates ``students`` in place.
    """

    kind: ClassVar[StepKind] = StepKind.MUTATION

    action: Action

    def run(self, ctx: ProcessingContext) -> None:
        """Run the action on the shared collection."""
        self.action(ctx.students, ctx.console)


def make_mutation_step(
    title: str,
    action: Action,
    *,
    exempt_from_empty_skip: bool = False,
) -> MutationStep:
    """Create a mutation (action) step."""
    return MutationStep(
        title=title,
        action=action,
        exempt_from_empty_skip=exempt_from_empty_skip,
    )


def sort_by_score_descending(students: list[Student], console: ConsoleLike) -> None:
    """Sort ``students`` in place by descending score, then list them all.

    The sort is stable: students with equal scores keep their relative order.
    """
    console.print("--- Sorting Data by Score (Descending)... ---")
    students.sort(key=attrgetter("score"), reverse=True)
    console.print("--- Data Sorted Successfully ---")
    console.print()

    console.print(
        render_student_table("List: All Students (Sorted by Score Descending)", students, False),
        nl=False,
    )
