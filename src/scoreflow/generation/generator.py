# topmark:header:start
#
#   project      : ScoreFlow
#   file         : generator.py
#   file_relpath : src/scoreflow/generation/generator.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Stochastic, fault-injecting student generator.

Each call to `StudentGenerator.generate` draws a score from a normal
distribution and, independently, a fault signal. Both draws are always made,
score first, so a seeded random source yields the same sequence of attempts
regardless of which of them fail. With fault injection disabled
(``fault_odds == 0``) only the score is drawn.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from scoreflow.config.logging import get_logger
from scoreflow.core.models import Student
from scoreflow.generation.errors import InjectedFaultError, ScoreOutOfRangeError

if TYPE_CHECKING:
    from scoreflow.config import Config
    from scoreflow.config.logging import ScoreflowLogger

logger: ScoreflowLogger = get_logger(__name__)


class StudentGenerator:
    """Produce one `Student` per call, or raise a `GenerationError`.

    Args:
        rng (random.Random | None): Random source owned by the caller. A fresh,
            OS-seeded `random.Random` is created when omitted.
        mean (float): Mean of the score distribution.
        stddev (float): Standard deviation of the score distribution.
        fault_odds (int): A fault is injected with probability ``1 / fault_odds``;
            ``0`` disables fault injection. ``1`` is rejected since no attempt
            could ever succeed.
        min_score (float): Inclusive lower bound of a valid score.
        max_score (float): Inclusive upper bound of a valid score.
    """

    def __init__(
        self,
        *,
        rng: random.Random | None = None,
        mean: float = 70.0,
        stddev: float = 30.0,
        fault_odds: int = 20,
        min_score: float = 0.0,
        max_score: float = 100.0,
    ) -> None:
        if fault_odds == 1 or fault_odds < 0:
            raise ValueError(f"fault_odds must be 0 or >= 2, got {fault_odds}")
        self.rng: random.Random = rng if rng is not None else random.Random()
        self.mean: float = mean
        self.stddev: float = stddev
        self.fault_odds: int = fault_odds
        self.min_score: float = min_score
        self.max_score: float = max_score

    @classmethod
    def from_config(cls, config: Config, rng: random.Random | None = None) -> StudentGenerator:
        """Create a generator from a frozen config.

        When ``rng`` is omitted, the random source is seeded with ``config.seed``.
        """
        return cls(
            rng=rng if rng is not None else random.Random(config.seed),
            mean=config.score_mean,
            stddev=config.score_stddev,
            fault_odds=config.fault_odds,
            min_score=config.min_score,
            max_score=config.max_score,
        )

    def generate(self, student_id: int) -> Student:
        """Generate the student with the given id.

        Args:
            student_id (int): Id to assign to the generated student.

        Returns:
            Student: The generated student, with a score inside the valid range.

        Raises:
            InjectedFaultError: The fault signal fired (checked before the range).
            ScoreOutOfRangeError: The drawn score lies outside ``[min_score, max_score]``.
        """
        score: float = self.rng.gauss(self.mean, self.stddev)
        injected: bool = self.fault_odds > 0 and self.rng.randint(1, self.fault_odds) == 1

        if injected:
            raise InjectedFaultError()
        # Written as a membership test so a NaN draw is rejected too.
        if not self.min_score <= score <= self.max_score:
            raise ScoreOutOfRangeError(score, self.min_score, self.max_score)

        logger.trace("Generated student %d with score %.4f", student_id, score)
        return Student(id=student_id, score=score)
