# topmark:header:start
#
#   project      : ScoreFlow
#   file         : __init__.py
#   file_relpath : src/scoreflow/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Click subcommands for the ScoreFlow CLI."""
