# topmark:header:start
#
#   project      : ScoreFlow
#   file         : __init__.py
#   file_relpath : src/scoreflow/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Text rendering for student tables."""

from __future__ import annotations

from scoreflow.rendering.table import format_section_header, render_student_table

__all__ = [
    "format_section_header",
    "render_student_table",
]
