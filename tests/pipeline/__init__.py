# topmark:header:start
#
#   project      : ScoreFlow
#   file         : __init__.py
#   file_relpath : tests/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Pipeline runner and standard pipeline tests."""
