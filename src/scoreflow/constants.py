# topmark:header:start
#
#   project      : ScoreFlow
#   file         : constants.py
#   file_relpath : src/scoreflow/constants.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""ScoreFlow Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

SCOREFLOW_VERSION: str = get_version("scoreflow")

VALUE_NOT_AVAILABLE: str = "N/A"

NO_DATA_NOTICE: str = "--- No student data available to process for this step ---"
