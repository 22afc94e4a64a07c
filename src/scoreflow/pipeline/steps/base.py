# topmark:header:start
#
#   project      : ScoreFlow
#   file         : base.py
#   file_relpath : src/scoreflow/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Base class for pipeline steps.

The runner invokes steps as *callables*. `BaseStep` implements the common
lifecycle:

    ctx = step(ctx)  # internally: bookkeeping → run

Step shapes
-----------
Exactly three shapes exist, each a frozen dataclass tagged with a `StepKind`:

- ``FILTER_REPORT``: read-only; lists the students matching a predicate.
- ``ANALYSIS``: read-only; hands a `StudentView` to a custom analysis.
- ``MUTATION``: read-write; hands the live list to an action.

The runner only accepts `BaseStep` subclasses carrying one of these kinds, so
whether a step may mutate the collection is always known up front.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

from scoreflow.config.logging import get_logger

if TYPE_CHECKING:
    from scoreflow.config.logging import ScoreflowLogger
    from scoreflow.pipeline.context import ProcessingContext

logger: ScoreflowLogger = get_logger(__name__)


class StepKind(str, Enum):
    """The three operation shapes a step can have."""

    FILTER_REPORT = "filter_report"
    ANALYSIS = "analysis"
    MUTATION = "mutation"


@dataclass(frozen=True, kw_only=True)
class BaseStep:
    """Reusable foundation for pipeline steps.

    Subclasses set ``kind`` and implement ``run()``. Do not override
    ``__call__`` unless you need custom lifecycle behavior.

    Attributes:
        title (str): Section title printed by the runner before the step runs.
        exempt_from_empty_skip (bool): When True, the runner invokes the step even
            if the collection is empty. Defaults to False.
    """

    kind: ClassVar[StepKind]

    title: str
    exempt_from_empty_skip: bool = False

    @property
    def mutates(self) -> bool:
        """Whether this step may change the shared collection."""
        return self.kind is StepKind.MUTATION

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Return whether the runner should invoke this step on ``ctx``.

        Args:
            ctx (ProcessingContext): The current processing context.

        Returns:
            bool: False when the collection is empty and the step is not exempt.
        """
        return self.exempt_from_empty_skip or not ctx.is_empty

    def __call__(self, ctx: ProcessingContext) -> ProcessingContext:
        """Invoke the step body and record it on the context.

        Args:
            ctx (ProcessingContext): The mutable processing context.

        Returns:
            ProcessingContext: The same context instance, possibly mutated.
        """
        ctx.steps_run.append(self.title)
        logger.debug(
            "Step %r (%s) - running on %d students", self.title, self.kind.value, len(ctx.students)
        )
        self.run(ctx)
        return ctx

    def run(self, ctx: ProcessingContext) -> None:
        """Perform the step's work.

        Args:
            ctx (ProcessingContext): The processing context.
        """
        raise NotImplementedError
