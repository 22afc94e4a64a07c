# topmark:header:start
#
#   project      : ScoreFlow
#   file         : errors.py
#   file_relpath : src/scoreflow/generation/errors.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Exceptions raised by the student generator.

Usage:
    The generator raises these for a single failed attempt. They are caught by
    the dataset builder's retry loop, published as attempt events and never
    propagate past generation.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for a failed generation attempt."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message

    def __str__(self) -> str:
        return self.message


class InjectedFaultError(GenerationError):
    """Simulated transient fault, drawn independently of the score."""

    def __init__(self, reason: str = "Simulated random error") -> None:
        super().__init__(f"Generation failed: {reason}")
        self.reason: str = reason


class ScoreOutOfRangeError(GenerationError):
    """The drawn score falls outside the valid score range.

    Attributes:
        value (float): The offending score.
        lower (float): Inclusive lower bound.
        upper (float): Inclusive upper bound.
    """

    def __init__(self, value: float, lower: float, upper: float) -> None:
        super().__init__(
            f"Generation failed: Raw score {value:.2f} out of range [{lower:.1f}, {upper:.1f}]"
        )
        self.value: float = value
        self.lower: float = lower
        self.upper: float = upper
