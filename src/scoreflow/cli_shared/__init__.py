# topmark:header:start
#
#   project      : ScoreFlow
#   file         : __init__.py
#   file_relpath : src/scoreflow/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Framework-agnostic helpers shared by the CLI and the pipeline."""
