# topmark:header:start
#
#   project      : ScoreFlow
#   file         : run.py
#   file_relpath : src/scoreflow/cli/commands/run.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""ScoreFlow `run` command.

Generates the student dataset (retrying failed attempts) and runs it through
the standard pipeline, printing every section to standard output. This is
also what ``scoreflow`` does when invoked without a subcommand.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from scoreflow.cli.errors import ScoreflowConfigError, ScoreflowFileNotFoundError
from scoreflow.cli.progress import ConsoleProgressReporter
from scoreflow.config import MutableConfig
from scoreflow.config.logging import get_logger
from scoreflow.generation import build_dataset
from scoreflow.pipeline import runner
from scoreflow.pipeline.context import ProcessingContext
from scoreflow.pipeline.pipelines import build_default_pipeline
from scoreflow.rendering.table import format_section_header

if TYPE_CHECKING:
    from collections.abc import Sequence

    from scoreflow.cli_shared.console_api import ConsoleLike
    from scoreflow.config import Config
    from scoreflow.config.logging import ScoreflowLogger
    from scoreflow.core.models import Student

logger: ScoreflowLogger = get_logger(__name__)


def resolve_config(config_files: Sequence[str], overrides: dict[str, object]) -> Config:
    """Merge defaults, config files and CLI overrides into a validated `Config`.

    Raises:
        ScoreflowFileNotFoundError: A config file does not exist.
        ScoreflowConfigError: A config file is unreadable or a value is invalid.
    """
    for name in config_files:
        if not Path(name).is_file():
            raise ScoreflowFileNotFoundError(f"Config file not found: {name}")

    draft: MutableConfig = MutableConfig.load_merged(config_files, overrides)
    problems: list[str] = draft.validate()
    if problems:
        raise ScoreflowConfigError("Invalid configuration:\n  " + "\n  ".join(problems))
    return draft.freeze()


def run_scoreflow(
    config: Config,
    console: ConsoleLike,
    *,
    show_progress: bool = True,
) -> list[Student]:
    """Generate the dataset and run the standard pipeline on it.

    Args:
        config (Config): Frozen runtime configuration.
        console (ConsoleLike): Program-output sink.
        show_progress (bool): Print one progress line per generated student.

    Returns:
        list[Student]: The collection as left by the last step.
    """
    console.print(
        format_section_header(
            f"Generating Data for {config.student_count} Students "
            "(Normal Dist., Retry on Error)"
        )
    )
    reporter = ConsoleProgressReporter(console) if show_progress else None
    students: list[Student] = build_dataset(config, observer=reporter)
    console.print(f"======= Generation Complete: {len(students)} Students Generated =======")
    if reporter is not None and reporter.failures:
        logger.info("Generation needed %d retries", reporter.failures)

    console.print()
    console.print(format_section_header("Processing Student Data"))

    ctx = ProcessingContext(students=students, console=console)
    ctx = runner.run(ctx, build_default_pipeline(config))

    console.print()
    console.print(format_section_header("Processing Complete"))
    return ctx.students


@click.command(
    name="run",
    help="Generate the student dataset and run the standard pipeline.",
)
@click.option(
    "--config",
    "config_files",
    multiple=True,
    type=click.Path(dir_okay=False),
    help="Merge settings from a TOML config file (may be repeated; later files win).",
)
@click.option("--count", "student_count", type=int, default=None, help="Number of students.")
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Seed the random source for a reproducible run.",
)
@click.option("--mean", "score_mean", type=float, default=None, help="Mean generated score.")
@click.option(
    "--stddev",
    "score_stddev",
    type=float,
    default=None,
    help="Score standard deviation.",
)
@click.option(
    "--fault-odds",
    type=int,
    default=None,
    help="Inject a generation fault 1 time in N (0 disables).",
)
@click.option(
    "--retry-delay-ms",
    type=float,
    default=None,
    help="Delay after a failed generation attempt, in milliseconds.",
)
@click.option("--pass-threshold", type=float, default=None, help="Scores below this fail.")
@click.option(
    "--excellent-threshold",
    type=float,
    default=None,
    help="Scores above this are excellent.",
)
def run_command(
    *,
    config_files: tuple[str, ...] = (),
    student_count: int | None = None,
    seed: int | None = None,
    score_mean: float | None = None,
    score_stddev: float | None = None,
    fault_odds: int | None = None,
    retry_delay_ms: float | None = None,
    pass_threshold: float | None = None,
    excellent_threshold: float | None = None,
) -> None:
    """Generate students and run them through the standard pipeline."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    config: Config = resolve_config(
        config_files,
        {
            "student_count": student_count,
            "seed": seed,
            "score_mean": score_mean,
            "score_stddev": score_stddev,
            "fault_odds": fault_odds,
            "retry_delay_ms": retry_delay_ms,
            "pass_threshold": pass_threshold,
            "excellent_threshold": excellent_threshold,
        },
    )
    logger.debug("Effective config: %r", config)

    run_scoreflow(config, console, show_progress=ctx.obj.get("verbosity_level", 0) >= 0)
