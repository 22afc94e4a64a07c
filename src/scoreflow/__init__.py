# topmark:header:start
#
#   project      : ScoreFlow
#   file         : __init__.py
#   file_relpath : src/scoreflow/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""ScoreFlow package.

ScoreFlow synthesizes a dataset of scored students through a retrying,
fault-injecting generator, then runs it through an ordered pipeline of
filter, analysis and mutation steps that share one evolving collection.
"""

from __future__ import annotations
