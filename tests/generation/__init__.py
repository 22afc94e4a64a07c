# topmark:header:start
#
#   project      : ScoreFlow
#   file         : __init__.py
#   file_relpath : tests/generation/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Generator and dataset builder tests."""
