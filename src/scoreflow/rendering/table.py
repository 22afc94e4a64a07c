# topmark:header:start
#
#   project      : ScoreFlow
#   file         : table.py
#   file_relpath : src/scoreflow/rendering/table.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Plain-text student tables and section headers.

Rendering is pure: functions return text and never write to a stream. The
layout is fixed so output stays comparable between runs::

    --- List: Score > 85.0 ---
    | Student ID | Score        |
    |------------|--------------|
    | 3          | 91.27        |
    -----------------------------
    Total matching students: 1

The count line is only emitted when requested. An empty table always carries
the "no students" note so an empty listing is never mistaken for a truncated one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable

    from scoreflow.core.models import Student

ID_WIDTH: Final[int] = 10
SCORE_WIDTH: Final[int] = 12
TABLE_WIDTH: Final[int] = ID_WIDTH + SCORE_WIDTH + 7

EMPTY_NOTE: Final[str] = "(No students met the criteria for this list)"


def format_section_header(title: str) -> str:
    """Return the banner line that opens a pipeline section."""
    return f"========== {title} =========="


def render_student_table(title: str, students: Iterable[Student], show_count: bool) -> str:
    """Render ``students`` as a two-column table.

    ``students`` is consumed exactly once, so lazy iterables (e.g. ``filter``
    objects) are fine.

    Args:
        title (str): List title, printed as ``--- title ---``.
        students (Iterable[Student]): Students to list, in display order.
        show_count (bool): Whether to append ``Total matching students: <n>``.

    Returns:
        str: The table text, terminated by a blank line.
    """
    lines: list[str] = [
        f"--- {title} ---",
        f"| {'Student ID':<{ID_WIDTH}} | {'Score':<{SCORE_WIDTH}} |",
        f"|{'-' * (ID_WIDTH + 2)}|{'-' * (SCORE_WIDTH + 2)}|",
    ]

    count = 0
    for student in students:
        lines.append(f"| {student.id:<{ID_WIDTH}} | {student.score:<{SCORE_WIDTH}.2f} |")
        count += 1

    lines.append("-" * TABLE_WIDTH)
    if show_count:
        lines.append(f"Total matching students: {count}")
    if count == 0:
        lines.append(EMPTY_NOTE)
    lines.append("")

    return "\n".join(lines) + "\n"
