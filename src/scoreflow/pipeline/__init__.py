# topmark:header:start
#
#   project      : ScoreFlow
#   file         : __init__.py
#   file_relpath : src/scoreflow/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""ScoreFlow processing pipeline package.

This package contains the components that implement the step-based pipeline:

- The shared processing context and the read-only student view
- The three step shapes (filter-report, analysis, mutation)
- Pipeline assembly and execution helpers

The public API is composed of the pipeline assembly helper in
[`scoreflow.pipeline.pipelines`][scoreflow.pipeline.pipelines], the execution helper in
[`scoreflow.pipeline.runner`][scoreflow.pipeline.runner], and the shared context model in
[`scoreflow.pipeline.context`][scoreflow.pipeline.context].
"""
