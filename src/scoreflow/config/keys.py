# topmark:header:start
#
#   project      : ScoreFlow
#   file         : keys.py
#   file_relpath : src/scoreflow/config/keys.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Canonical TOML section and key names for ScoreFlow configuration.

Keys defined here represent the *external configuration API*; renaming or
removing one is a breaking change. CLI option names are kept separate.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by ScoreFlow configuration.

    The ordering of constants mirrors the defaults returned by
    `scoreflow.config.io.load_defaults_dict`.
    """

    # [generation]
    SECTION_GENERATION: Final[str] = "generation"

    KEY_COUNT: Final[str] = "count"
    KEY_MEAN: Final[str] = "mean"
    KEY_STDDEV: Final[str] = "stddev"
    KEY_FAULT_ODDS: Final[str] = "fault_odds"
    KEY_RETRY_DELAY_MS: Final[str] = "retry_delay_ms"
    KEY_SEED: Final[str] = "seed"

    # [scores]
    SECTION_SCORES: Final[str] = "scores"

    KEY_MIN: Final[str] = "min"
    KEY_MAX: Final[str] = "max"

    # [thresholds]
    SECTION_THRESHOLDS: Final[str] = "thresholds"

    KEY_PASS: Final[str] = "pass"
    KEY_EXCELLENT: Final[str] = "excellent"
