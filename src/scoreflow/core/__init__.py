# topmark:header:start
#
#   project      : ScoreFlow
#   file         : __init__.py
#   file_relpath : src/scoreflow/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Core data types shared by generation, rendering and the pipeline."""

from __future__ import annotations

from scoreflow.core.models import Student

__all__ = [
    "Student",
]
