# topmark:header:start
#
#   project      : ScoreFlow
#   file         : runner.py
#   file_relpath : src/scoreflow/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Execute an ordered sequence of steps against one shared collection.

Steps run strictly in order on the same `ProcessingContext`, so each step
observes the cumulative effect of all earlier steps. Before a step runs the
runner prints its section header; a non-exempt step is skipped with a notice
when the collection is empty. Exceptions raised by a step body are not
caught: they end the run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from scoreflow.config.logging import get_logger
from scoreflow.constants import NO_DATA_NOTICE
from scoreflow.pipeline.steps.base import BaseStep, StepKind
from scoreflow.rendering.table import format_section_header

if TYPE_CHECKING:
    from collections.abc import Sequence

    from scoreflow.config.logging import ScoreflowLogger
    from scoreflow.pipeline.context import ProcessingContext

logger: ScoreflowLogger = get_logger(__name__)


def check_steps(steps: Sequence[BaseStep]) -> None:
    """Reject anything that is not one of the known step shapes.

    Raises:
        TypeError: If an element is not a `BaseStep` or has no valid `StepKind`.
    """
    for index, step in enumerate(steps):
        if not isinstance(step, BaseStep) or not isinstance(
            getattr(step, "kind", None), StepKind
        ):
            raise TypeError(f"Pipeline element {index} is not a pipeline step: {step!r}")


def execute_step(step: BaseStep, ctx: ProcessingContext) -> ProcessingContext:
    """Print the step's header, then run it unless the empty-data guard applies."""
    ctx.console.print()
    ctx.console.print(format_section_header(step.title))

    if not step.may_proceed(ctx):
        logger.info("Step %r skipped: no student data", step.title)
        ctx.steps_skipped.append(step.title)
        ctx.console.print(NO_DATA_NOTICE)
        ctx.console.print()
        return ctx

    logger.info("Step %r - running", step.title)
    return step(ctx)


def run(ctx: ProcessingContext, steps: Sequence[BaseStep]) -> ProcessingContext:
    """Execute the pipeline sequentially.

    Args:
        ctx (ProcessingContext): Mutable processing context holding the collection.
        steps (Sequence[BaseStep]): Ordered sequence of pipeline steps.

    Returns:
        ProcessingContext: The context after all steps have run.

    Raises:
        TypeError: If ``steps`` contains an object that is not a pipeline step.
            Checked before any step runs.
    """
    check_steps(steps)
    logger.info("Running %d steps on %d students", len(steps), len(ctx.students))
    for step in steps:
        ctx = execute_step(step, ctx)
    return ctx
