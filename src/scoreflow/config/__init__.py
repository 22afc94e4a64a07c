# topmark:header:start
#
#   project      : ScoreFlow
#   file         : __init__.py
#   file_relpath : src/scoreflow/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Public configuration API for ScoreFlow.

Re-exports the configuration model so callers can write
``from scoreflow.config import Config, MutableConfig``.
"""

from __future__ import annotations

from scoreflow.config.model import Config, MutableConfig

__all__ = [
    "Config",
    "MutableConfig",
]
