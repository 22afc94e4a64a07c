# topmark:header:start
#
#   project      : ScoreFlow
#   file         : test_builder.py
#   file_relpath : tests/generation/test_builder.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Tests for the retrying `DatasetBuilder` and `build_dataset`."""

from __future__ import annotations

import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from scoreflow.core.models import Student
from scoreflow.generation import (
    DatasetBuilder,
    GenerationAttempt,
    GenerationError,
    InjectedFaultError,
    ScoreOutOfRangeError,
    StudentGenerator,
    build_dataset,
)
from tests.conftest import make_config


class ScriptedGenerator(StudentGenerator):
    """Generator replaying a fixed script of outcomes (errors or scores)."""

    def __init__(self, script: list[GenerationError | float]) -> None:
        super().__init__(fault_odds=0)
        self.script = list(script)
        self.requested: list[int] = []

    def generate(self, student_id: int) -> Student:
        self.requested.append(student_id)
        outcome = self.script.pop(0)
        if isinstance(outcome, GenerationError):
            raise outcome
        return Student(id=student_id, score=outcome)


class SleepRecorder:
    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


def test_build_retries_until_success() -> None:
    """Failures are retried with a delay; each id gets exactly one student."""
    gen = ScriptedGenerator(
        [
            InjectedFaultError(),
            ScoreOutOfRangeError(130.0, 0.0, 100.0),
            61.0,
            88.5,
        ]
    )
    sleep = SleepRecorder()
    events: list[GenerationAttempt] = []

    students = DatasetBuilder(
        gen, retry_delay=0.005, observer=events.append, sleep=sleep
    ).build(2)

    assert students == [Student(1, 61.0), Student(2, 88.5)]
    assert gen.requested == [1, 1, 1, 2]
    assert sleep.calls == [0.005, 0.005]
    assert [(e.student_id, e.attempt, e.ok) for e in events] == [
        (1, 1, False),
        (1, 2, False),
        (1, 3, True),
        (2, 1, True),
    ]
    assert str(events[0].error) == "Generation failed: Simulated random error"
    assert events[2].student == Student(1, 61.0)


def test_zero_delay_never_sleeps() -> None:
    gen = ScriptedGenerator([InjectedFaultError(), 50.0])
    sleep = SleepRecorder()

    DatasetBuilder(gen, retry_delay=0.0, sleep=sleep).build(1)

    assert sleep.calls == []


def test_build_zero_returns_empty_list() -> None:
    gen = ScriptedGenerator([])

    assert DatasetBuilder(gen).build(0) == []
    assert gen.requested == []


def test_build_negative_count_raises() -> None:
    with pytest.raises(ValueError, match="count must be >= 0"):
        DatasetBuilder(ScriptedGenerator([])).build(-1)


def test_generate_one_without_observer() -> None:
    gen = ScriptedGenerator([ScoreOutOfRangeError(-3.0, 0.0, 100.0), 12.0])

    student = DatasetBuilder(gen, sleep=SleepRecorder()).generate_one(7)

    assert student == Student(7, 12.0)


def test_build_dataset_is_reproducible_with_seed() -> None:
    config = make_config(student_count=12, seed=42)

    first = build_dataset(config, sleep=SleepRecorder())
    second = build_dataset(config, sleep=SleepRecorder())

    assert first == second
    assert [s.id for s in first] == list(range(1, 13))


def test_build_dataset_uses_config_retry_delay() -> None:
    """Retry delay from config is converted from milliseconds to seconds."""
    config = make_config(student_count=20, seed=3, retry_delay_ms=5.0, fault_odds=2)
    sleep = SleepRecorder()

    build_dataset(config, sleep=sleep)

    # With 1-in-2 odds twenty students practically always need a retry.
    assert sleep.calls
    assert set(sleep.calls) == {0.005}


@settings(deadline=None, max_examples=25)
@given(
    count=st.integers(min_value=0, max_value=40),
    seed=st.integers(min_value=0, max_value=2**32 - 1),
)
def test_build_dataset_ids_and_ranges(count: int, seed: int) -> None:
    """Every build yields ids 1..count in order with scores inside the valid range."""
    config = make_config(student_count=count, seed=seed)

    students = build_dataset(config, rng=random.Random(seed), sleep=lambda _s: None)

    assert [s.id for s in students] == list(range(1, count + 1))
    assert all(config.min_score <= s.score <= config.max_score for s in students)
