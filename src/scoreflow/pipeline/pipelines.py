# topmark:header:start
#
#   project      : ScoreFlow
#   file         : pipelines.py
#   file_relpath : src/scoreflow/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Standard ScoreFlow pipeline.

The standard pipeline reports on the generated students in four steps:

1. list excellent students (filter),
2. list failing students (filter),
3. compute the average and list students at or above it (analysis),
4. sort everyone by descending score and list them (mutation).

Step 4 permanently reorders the collection; anything run after it, and the
caller, sees the sorted order.

Notes:
    * Pipelines are immutable tuples of step instances.
    * Thresholds come from the runtime `Config`, so the pipeline is built per run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from scoreflow.pipeline.steps import (
    make_analysis_step,
    make_filter_report_step,
    make_mutation_step,
    report_above_average,
    sort_by_score_descending,
)

if TYPE_CHECKING:
    from scoreflow.config import Config
    from scoreflow.core.models import Student
    from scoreflow.pipeline.steps import BaseStep


def build_default_pipeline(config: Config) -> tuple[BaseStep, ...]:
    """Return the standard four-step pipeline for ``config``.

    Args:
        config (Config): Supplies the pass and excellence thresholds.

    Returns:
        tuple[BaseStep, ...]: The ordered, immutable step sequence.
    """
    excellent: float = config.excellent_threshold
    passing: float = config.pass_threshold

    def is_excellent(student: Student) -> bool:
        return student.score > excellent

    def is_failing(student: Student) -> bool:
        return student.score < passing

    return (
        make_filter_report_step(
            "(1) Filter: Excellent Students",
            f"List: Score > {excellent:.1f}",
            is_excellent,
            True,
        ),
        make_filter_report_step(
            "(2) Filter: Failing Students",
            f"List: Score < {passing:.1f}",
            is_failing,
            True,
        ),
        make_analysis_step(
            "(3) Calculate & Filter: Above Average",
            report_above_average,
        ),
        make_mutation_step(
            "(4) Action & View: Sort All and Print",
            sort_by_score_descending,
        ),
    )
