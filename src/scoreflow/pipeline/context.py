# topmark:header:start
#
#   project      : ScoreFlow
#   file         : context.py
#   file_relpath : src/scoreflow/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Processing context shared by every step of a pipeline run.

The context owns the run's single student collection. Steps receive the same
context instance in order; mutation steps change ``ctx.students`` in place and
every later step observes the result. The collection is never copied by the
context or the runner.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from scoreflow.pipeline.views import StudentView

if TYPE_CHECKING:
    from scoreflow.cli_shared.console_api import ConsoleLike
    from scoreflow.core.models import Student


@dataclass
class ProcessingContext:
    """Mutable state threaded through a pipeline run.

    Attributes:
        students (list[Student]): The shared, evolving collection.
        console (ConsoleLike): Sink for program output (tables, notices).
        steps_run (list[str]): Titles of steps whose body was invoked, in order.
        steps_skipped (list[str]): Titles of steps skipped by the empty-data guard.
    """

    students: list[Student]
    console: ConsoleLike
    steps_run: list[str] = field(default_factory=lambda: [])
    steps_skipped: list[str] = field(default_factory=lambda: [])

    def view(self) -> StudentView:
        """Return a read-only view over the current collection."""
        return StudentView(self.students)

    @property
    def is_empty(self) -> bool:
        """Whether the collection currently holds no students."""
        return not self.students
