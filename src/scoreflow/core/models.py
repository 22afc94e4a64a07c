# topmark:header:start
#
#   project      : ScoreFlow
#   file         : models.py
#   file_relpath : src/scoreflow/core/models.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""The record type flowing through ScoreFlow."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Student:
    """A generated, scored student.

    Students are plain values: two students with the same ``id`` and ``score``
    compare equal. The score range is checked once, at generation time.

    Attributes:
        id (int): Positive, 1-based sequence number assigned in generation order.
        score (float): The student's score.
    """

    id: int
    score: float
