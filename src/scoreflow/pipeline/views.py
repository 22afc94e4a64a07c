# topmark:header:start
#
#   project      : ScoreFlow
#   file         : views.py
#   file_relpath : src/scoreflow/pipeline/views.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Read-only view over the shared student collection.

Read-only steps receive a `StudentView` instead of the live list: the view
reads through to the list (no copy is made, so it always reflects the current
state) but exposes no mutating methods. Students themselves are frozen, so
nothing reachable from a view can change the collection.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, overload

if TYPE_CHECKING:
    from collections.abc import Iterator

    from scoreflow.core.models import Student


class StudentView(Sequence["Student"]):
    """Sequence proxy over a ``list[Student]`` without mutating methods.

    Args:
        students (list[Student]): The backing collection; kept by reference.
    """

    __slots__ = ("_students",)

    def __init__(self, students: list[Student]) -> None:
        self._students = students

    @overload
    def __getitem__(self, index: int) -> Student: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Student, ...]: ...

    def __getitem__(self, index: int | slice) -> Student | tuple[Student, ...]:
        if isinstance(index, slice):
            return tuple(self._students[index])
        return self._students[index]

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self) -> Iterator[Student]:
        return iter(self._students)

    def __repr__(self) -> str:
        return f"StudentView({self._students!r})"
