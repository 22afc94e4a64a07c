# topmark:header:start
#
#   project      : ScoreFlow
#   file         : builder.py
#   file_relpath : src/scoreflow/generation/builder.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Build the initial student collection by driving the generator with retries.

The retry policy and the observability channel are kept apart:

- `DatasetBuilder.build` loops until every id has a student, sleeping a fixed
  delay after each failed attempt. There is no attempt limit.
- Every attempt, successful or not, is published as a `GenerationAttempt`
  to an optional observer callable. The builder itself never prints; the CLI
  installs an observer that renders progress lines.

Both the random source (via the generator) and ``sleep`` are injectable so the
loop can be exercised deterministically in tests.
"""

from __future__ import annotations

import random
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from scoreflow.config.logging import get_logger
from scoreflow.generation.errors import GenerationError
from scoreflow.generation.generator import StudentGenerator

if TYPE_CHECKING:
    from scoreflow.config import Config
    from scoreflow.config.logging import ScoreflowLogger
    from scoreflow.core.models import Student

logger: ScoreflowLogger = get_logger(__name__)

DEFAULT_RETRY_DELAY: float = 0.005


@dataclass(frozen=True, slots=True)
class GenerationAttempt:
    """Outcome of a single generation attempt.

    Exactly one of ``student`` and ``error`` is set.

    Attributes:
        student_id (int): Id being generated.
        attempt (int): 1-based attempt number for this id.
        student (Student | None): The generated student on success.
        error (GenerationError | None): The failure on an unsuccessful attempt.
    """

    student_id: int
    attempt: int
    student: Student | None = None
    error: GenerationError | None = None

    @property
    def ok(self) -> bool:
        """Whether this attempt produced a student."""
        return self.student is not None


GenerationObserver = Callable[[GenerationAttempt], None]


class DatasetBuilder:
    """Drive a `StudentGenerator` until ``count`` students exist.

    Args:
        generator (StudentGenerator): Source of single students.
        retry_delay (float): Seconds to wait after a failed attempt.
        observer (GenerationObserver | None): Called once per attempt.
        sleep (Callable[[float], None]): Blocking delay function.
    """

    def __init__(
        self,
        generator: StudentGenerator,
        *,
        retry_delay: float = DEFAULT_RETRY_DELAY,
        observer: GenerationObserver | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.generator = generator
        self.retry_delay = retry_delay
        self.observer = observer
        self.sleep = sleep

    def _publish(self, event: GenerationAttempt) -> None:
        if self.observer is not None:
            self.observer(event)

    def generate_one(self, student_id: int) -> Student:
        """Generate the student with ``student_id``, retrying until it succeeds."""
        attempt = 0
        while True:
            attempt += 1
            try:
                student: Student = self.generator.generate(student_id)
            except GenerationError as exc:
                logger.debug("Attempt %d for id %d failed: %s", attempt, student_id, exc)
                self._publish(GenerationAttempt(student_id, attempt, error=exc))
                if self.retry_delay > 0:
                    self.sleep(self.retry_delay)
                continue
            logger.trace("Attempt %d for id %d succeeded", attempt, student_id)
            self._publish(GenerationAttempt(student_id, attempt, student=student))
            return student

    def build(self, count: int) -> list[Student]:
        """Return exactly ``count`` students with ids ``1..count`` in order.

        Blocks until every id has been generated.

        Raises:
            ValueError: If ``count`` is negative.
        """
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")

        students: list[Student] = []
        for student_id in range(1, count + 1):
            students.append(self.generate_one(student_id))

        logger.info("Generated %d students", len(students))
        return students


def build_dataset(
    config: Config,
    *,
    rng: random.Random | None = None,
    observer: GenerationObserver | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> list[Student]:
    """Generate ``config.student_count`` students using the configured generator.

    Args:
        config (Config): Frozen runtime configuration.
        rng (random.Random | None): Random source; defaults to one seeded with ``config.seed``.
        observer (GenerationObserver | None): Attempt observer.
        sleep (Callable[[float], None]): Blocking delay function.

    Returns:
        list[Student]: The generated collection, in id order.
    """
    builder = DatasetBuilder(
        StudentGenerator.from_config(config, rng=rng),
        retry_delay=config.retry_delay,
        observer=observer,
        sleep=sleep,
    )
    return builder.build(config.student_count)
