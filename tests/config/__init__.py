# topmark:header:start
#
#   project      : ScoreFlow
#   file         : __init__.py
#   file_relpath : tests/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Configuration model, TOML loading and logging tests."""
