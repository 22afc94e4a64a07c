# topmark:header:start
#
#   project      : ScoreFlow
#   file         : __init__.py
#   file_relpath : tests/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""CLI tests driven through click's CliRunner."""
