# topmark:header:start
#
#   project      : ScoreFlow
#   file         : __init__.py
#   file_relpath : src/scoreflow/pipeline/steps/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Pipeline step shapes and their factory functions."""

from __future__ import annotations

from scoreflow.pipeline.steps.analysis import (
    AnalysisStep,
    make_analysis_step,
    mean_score,
    report_above_average,
)
from scoreflow.pipeline.steps.base import BaseStep, StepKind
from scoreflow.pipeline.steps.filter_report import FilterReportStep, make_filter_report_step
from scoreflow.pipeline.steps.mutation import (
    MutationStep,
    make_mutation_step,
    sort_by_score_descending,
)

__all__ = [
    "AnalysisStep",
    "BaseStep",
    "FilterReportStep",
    "MutationStep",
    "StepKind",
    "make_analysis_step",
    "make_filter_report_step",
    "make_mutation_step",
    "mean_score",
    "report_above_average",
    "sort_by_score_descending",
]
