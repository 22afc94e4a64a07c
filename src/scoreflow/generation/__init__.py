# topmark:header:start
#
#   project      : ScoreFlow
#   file         : __init__.py
#   file_relpath : src/scoreflow/generation/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Student generation: the fault-injecting generator and the retrying builder."""

from __future__ import annotations

from scoreflow.generation.builder import (
    DatasetBuilder,
    GenerationAttempt,
    GenerationObserver,
    build_dataset,
)
from scoreflow.generation.errors import (
    GenerationError,
    InjectedFaultError,
    ScoreOutOfRangeError,
)
from scoreflow.generation.generator import StudentGenerator

__all__ = [
    "DatasetBuilder",
    "GenerationAttempt",
    "GenerationError",
    "GenerationObserver",
    "InjectedFaultError",
    "ScoreOutOfRangeError",
    "StudentGenerator",
    "build_dataset",
]
