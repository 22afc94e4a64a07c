# topmark:header:start
#
#   project      : ScoreFlow
#   file         : model.py
#   file_relpath : src/scoreflow/config/model.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot used by the generator, the
      dataset builder and the standard pipeline.
    - `MutableConfig`: a mutable builder used while layering defaults, config
      files and CLI arguments; it can be frozen into `Config` and thawed back.

Precedence (lowest to highest):
    1. Runtime defaults (`scoreflow.config.io.load_defaults_dict`)
    2. TOML config files, in the order given
    3. CLI arguments (keys whose value is ``None`` are ignored)

Values are not range-checked while merging. Call `MutableConfig.validate`
before freezing to obtain the list of problems (loader diagnostics included).
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from scoreflow.config.io import (
    get_float_value_or_none_checked,
    get_int_value_or_none_checked,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from scoreflow.config.keys import Toml
from scoreflow.config.logging import get_logger

if TYPE_CHECKING:
    from scoreflow.config.io import TomlTable
    from scoreflow.config.logging import ScoreflowLogger

# ArgsLike: generic mapping accepted by `MutableConfig.apply_args` (CLI kwargs or API dicts).
ArgsLike = Mapping[str, Any]

logger: ScoreflowLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for ScoreFlow.

    Attributes:
        student_count (int): Number of students the dataset builder produces.
        score_mean (float): Mean of the normal distribution scores are drawn from.
        score_stddev (float): Standard deviation of that distribution.
        fault_odds (int): Fault injection odds, as "1 in N" per generation attempt
            (``0`` disables fault injection).
        retry_delay_ms (float): Delay between failed generation attempts, in milliseconds.
        seed (int | None): Seed for the random source; ``None`` seeds from the OS.
        min_score (float): Lower bound (inclusive) of a valid score.
        max_score (float): Upper bound (inclusive) of a valid score.
        pass_threshold (float): Students scoring below this are failing.
        excellent_threshold (float): Students scoring above this are excellent.
        config_files (tuple[str, ...]): Config files merged into this snapshot.
    """

    student_count: int
    score_mean: float
    score_stddev: float
    fault_odds: int
    retry_delay_ms: float
    seed: int | None
    min_score: float
    max_score: float
    pass_threshold: float
    excellent_threshold: float
    config_files: tuple[str, ...] = ()

    @property
    def retry_delay(self) -> float:
        """Retry delay in seconds, as expected by `time.sleep`."""
        return self.retry_delay_ms / 1000.0

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            student_count=self.student_count,
            score_mean=self.score_mean,
            score_stddev=self.score_stddev,
            fault_odds=self.fault_odds,
            retry_delay_ms=self.retry_delay_ms,
            seed=self.seed,
            min_score=self.min_score,
            max_score=self.max_score,
            pass_threshold=self.pass_threshold,
            excellent_threshold=self.excellent_threshold,
            config_files=list(self.config_files),
        )

    def to_toml_dict(self) -> TomlTable:
        """Return this configuration as a TOML-shaped dict (``seed`` may be ``None``)."""
        return {
            Toml.SECTION_GENERATION: {
                Toml.KEY_COUNT: self.student_count,
                Toml.KEY_MEAN: self.score_mean,
                Toml.KEY_STDDEV: self.score_stddev,
                Toml.KEY_FAULT_ODDS: self.fault_odds,
                Toml.KEY_RETRY_DELAY_MS: self.retry_delay_ms,
                Toml.KEY_SEED: self.seed,
            },
            Toml.SECTION_SCORES: {
                Toml.KEY_MIN: self.min_score,
                Toml.KEY_MAX: self.max_score,
            },
            Toml.SECTION_THRESHOLDS: {
                Toml.KEY_PASS: self.pass_threshold,
                Toml.KEY_EXCELLENT: self.excellent_threshold,
            },
        }


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Build from defaults, layer TOML tables and CLI arguments on top, then call
    `freeze` to obtain an immutable `Config`.

    Attributes:
        diagnostics (list[str]): Warnings recorded while loading/merging config
            sources (unreadable files, mistyped values).
    """

    student_count: int = 30
    score_mean: float = 70.0
    score_stddev: float = 30.0
    fault_odds: int = 20
    retry_delay_ms: float = 5.0
    seed: int | None = None
    min_score: float = 0.0
    max_score: float = 100.0
    pass_threshold: float = 60.0
    excellent_threshold: float = 85.0
    config_files: list[str] = field(default_factory=lambda: [])
    diagnostics: list[str] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated from `load_defaults_dict`."""
        draft = cls()
        draft.apply_toml(load_defaults_dict())
        return draft

    def apply_toml(self, data: TomlTable, *, source: str = "<defaults>") -> MutableConfig:
        """Merge a parsed TOML table into this builder.

        Keys missing from ``data`` keep their current value; mistyped values are
        recorded in `diagnostics` and ignored.

        Args:
            data (TomlTable): Parsed TOML document.
            source (str): Name of the source, used in diagnostics.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        gen: TomlTable = get_table_value(data, Toml.SECTION_GENERATION)
        scores: TomlTable = get_table_value(data, Toml.SECTION_SCORES)
        thresholds: TomlTable = get_table_value(data, Toml.SECTION_THRESHOLDS)

        def _int(table: TomlTable, section: str, key: str) -> int | None:
            return get_int_value_or_none_checked(
                table, key, where=f"{source}:[{section}]", diagnostics=self.diagnostics
            )

        def _float(table: TomlTable, section: str, key: str) -> float | None:
            return get_float_value_or_none_checked(
                table, key, where=f"{source}:[{section}]", diagnostics=self.diagnostics
            )

        self._set_if_given(
            student_count=_int(gen, Toml.SECTION_GENERATION, Toml.KEY_COUNT),
            score_mean=_float(gen, Toml.SECTION_GENERATION, Toml.KEY_MEAN),
            score_stddev=_float(gen, Toml.SECTION_GENERATION, Toml.KEY_STDDEV),
            fault_odds=_int(gen, Toml.SECTION_GENERATION, Toml.KEY_FAULT_ODDS),
            retry_delay_ms=_float(gen, Toml.SECTION_GENERATION, Toml.KEY_RETRY_DELAY_MS),
            seed=_int(gen, Toml.SECTION_GENERATION, Toml.KEY_SEED),
            min_score=_float(scores, Toml.SECTION_SCORES, Toml.KEY_MIN),
            max_score=_float(scores, Toml.SECTION_SCORES, Toml.KEY_MAX),
            pass_threshold=_float(thresholds, Toml.SECTION_THRESHOLDS, Toml.KEY_PASS),
            excellent_threshold=_float(thresholds, Toml.SECTION_THRESHOLDS, Toml.KEY_EXCELLENT),
        )
        return self

    def apply_args(self, args: ArgsLike) -> MutableConfig:
        """Apply CLI/API overrides; keys with a ``None`` value are ignored.

        Args:
            args (ArgsLike): Mapping of `Config` field names to override values.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        known: dict[str, Any] = {}
        for key, value in args.items():
            if key in _OVERRIDABLE_FIELDS:
                known[key] = value
            elif value is not None:
                logger.debug("Ignoring unknown config override %s=%r", key, value)
        self._set_if_given(**known)
        return self

    def _set_if_given(self, **values: Any) -> None:
        for name, value in values.items():
            if value is None:
                continue
            logger.trace("config: %s = %r", name, value)
            setattr(self, name, value)

    def load_file(self, path: Path) -> MutableConfig:
        """Load a TOML config file and merge it into this builder.

        Read and parse failures are recorded in `diagnostics`.
        """
        data, err = load_toml_dict(path)
        self.config_files.append(str(path))
        if err is not None:
            self.diagnostics.append(f"Cannot load config file {path}: {err}")
            return self
        return self.apply_toml(data, source=str(path))

    @classmethod
    def load_merged(
        cls,
        config_files: Iterable[Path | str] = (),
        args: ArgsLike | None = None,
    ) -> MutableConfig:
        """Build a config from defaults, config files and overrides, in that order."""
        draft = cls.from_defaults()
        for path in config_files:
            draft.load_file(Path(path))
        if args:
            draft.apply_args(args)
        return draft

    def validate(self) -> list[str]:
        """Return the list of problems that prevent a usable run (empty when valid)."""
        problems: list[str] = list(self.diagnostics)
        non_finite: set[str] = set()
        for name in _FINITE_FIELDS:
            value = getattr(self, name)
            if not math.isfinite(value):
                non_finite.add(name)
                problems.append(f"Setting {name} must be a finite number, got {value}")

        if self.student_count < 0:
            problems.append(f"Student count must be >= 0, got {self.student_count}")
        bounds_finite = non_finite.isdisjoint({"min_score", "max_score"})
        if bounds_finite and self.min_score > self.max_score:
            problems.append(
                f"Score bounds are inverted: min {self.min_score} > max {self.max_score}"
            )
        if "score_stddev" not in non_finite and self.score_stddev < 0:
            problems.append(f"Score stddev must be >= 0, got {self.score_stddev}")
        elif (
            self.score_stddev == 0
            and bounds_finite
            and "score_mean" not in non_finite
            and not self.min_score <= self.score_mean <= self.max_score
        ):
            # Every draw equals the mean, so no attempt could ever succeed.
            problems.append(
                f"Score mean {self.score_mean} lies outside "
                f"[{self.min_score}, {self.max_score}] with a zero stddev"
            )
        if self.fault_odds == 1 or self.fault_odds < 0:
            problems.append(f"Fault odds must be 0 (disabled) or >= 2, got {self.fault_odds}")
        if "retry_delay_ms" not in non_finite and self.retry_delay_ms < 0:
            problems.append(f"Retry delay must be >= 0 ms, got {self.retry_delay_ms}")
        return problems

    def freeze(self) -> Config:
        """Return an immutable `Config` snapshot of this builder."""
        return Config(
            student_count=self.student_count,
            score_mean=float(self.score_mean),
            score_stddev=float(self.score_stddev),
            fault_odds=self.fault_odds,
            retry_delay_ms=float(self.retry_delay_ms),
            seed=self.seed,
            min_score=float(self.min_score),
            max_score=float(self.max_score),
            pass_threshold=float(self.pass_threshold),
            excellent_threshold=float(self.excellent_threshold),
            config_files=tuple(self.config_files),
        )


_OVERRIDABLE_FIELDS: frozenset[str] = frozenset(
    {
        "student_count",
        "score_mean",
        "score_stddev",
        "fault_odds",
        "retry_delay_ms",
        "seed",
        "min_score",
        "max_score",
        "pass_threshold",
        "excellent_threshold",
    }
)

_FINITE_FIELDS: tuple[str, ...] = (
    "score_mean",
    "score_stddev",
    "retry_delay_ms",
    "min_score",
    "max_score",
    "pass_threshold",
    "excellent_threshold",
)
