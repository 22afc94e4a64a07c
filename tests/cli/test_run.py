# topmark:header:start
#
#   project      : ScoreFlow
#   file         : test_run.py
#   file_relpath : tests/cli/test_run.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""CLI tests for the `run` command and the no-subcommand default."""

from __future__ import annotations

from typing import TYPE_CHECKING

from scoreflow.constants import NO_DATA_NOTICE
from tests.cli.conftest import (
    assert_CONFIG_ERROR,
    assert_FILE_NOT_FOUND,
    assert_SUCCESS,
    run_cli,
)
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from pathlib import Path

FAST: list[str] = ["--retry-delay-ms", "0"]

SECTION_HEADERS: list[str] = [
    "========== Processing Student Data ==========",
    "========== (1) Filter: Excellent Students ==========",
    "========== (2) Filter: Failing Students ==========",
    "========== (3) Calculate & Filter: Above Average ==========",
    "========== (4) Action & View: Sort All and Print ==========",
    "========== Processing Complete ==========",
]


@mark_cli
def test_run_prints_every_section_in_order() -> None:
    result = run_cli(["--no-color", "run", "--count", "3", "--seed", "1", *FAST])

    assert_SUCCESS(result)
    out = result.output
    assert (
        "========== Generating Data for 3 Students (Normal Dist., Retry on Error) =========="
        in out
    )
    assert "======= Generation Complete: 3 Students Generated =======" in out
    positions = [out.index(h) for h in SECTION_HEADERS]
    assert positions == sorted(positions)
    for student_id in (1, 2, 3):
        assert f"Generating data for ID {student_id:<4}..." in out


@mark_cli
def test_seeded_runs_are_identical() -> None:
    argv = ["--no-color", "run", "--count", "10", "--seed", "77", *FAST]

    first = run_cli(argv)
    second = run_cli(argv)

    assert_SUCCESS(first)
    assert first.output == second.output


@mark_cli
def test_quiet_suppresses_progress_lines() -> None:
    result = run_cli(["--no-color", "-q", "run", "--count", "4", "--seed", "5", *FAST])

    assert_SUCCESS(result)
    assert "Generating data for ID" not in result.output
    assert "Generation Complete: 4 Students Generated" in result.output


@mark_cli
def test_zero_students_skips_every_step() -> None:
    result = run_cli(["--no-color", "run", "--count", "0"])

    assert_SUCCESS(result)
    assert result.output.count(NO_DATA_NOTICE) == 4
    assert "Processing Complete" in result.output


@mark_cli
def test_no_subcommand_runs_default_pipeline() -> None:
    result = run_cli(["--no-color", "-q"])

    assert_SUCCESS(result)
    assert "Generation Complete: 30 Students Generated" in result.output
    assert "Processing Complete" in result.output


@mark_cli
def test_config_file_is_applied(tmp_path: Path) -> None:
    cfg = tmp_path / "scoreflow.toml"
    cfg.write_text(
        "[generation]\ncount = 2\nseed = 3\nretry_delay_ms = 0\n\n[thresholds]\nexcellent = 75\n",
        encoding="utf-8",
    )

    result = run_cli(["--no-color", "run", "--config", str(cfg)])

    assert_SUCCESS(result)
    assert "Generation Complete: 2 Students Generated" in result.output
    assert "--- List: Score > 75.0 ---" in result.output


@mark_cli
def test_cli_options_override_config_file(tmp_path: Path) -> None:
    cfg = tmp_path / "scoreflow.toml"
    cfg.write_text("[generation]\ncount = 2\n", encoding="utf-8")

    result = run_cli(["--no-color", "run", "--config", str(cfg), "--count", "1", *FAST])

    assert_SUCCESS(result)
    assert "Generation Complete: 1 Students Generated" in result.output


@mark_cli
def test_missing_config_file(tmp_path: Path) -> None:
    result = run_cli(["--no-color", "run", "--config", str(tmp_path / "nope.toml")])

    assert_FILE_NOT_FOUND(result)


@mark_cli
@parametrize(
    "toml_text",
    [
        "[generation]\ncount = -1\n",
        '[generation]\ncount = "ten"\n',
        "[scores]\nmin = 90.0\nmax = 10.0\n",
        "[generation\n",
    ],
)
def test_invalid_config_file(tmp_path: Path, toml_text: str) -> None:
    cfg = tmp_path / "bad.toml"
    cfg.write_text(toml_text, encoding="utf-8")

    result = run_cli(["--no-color", "run", "--config", str(cfg)])

    assert_CONFIG_ERROR(result)


@mark_cli
def test_invalid_fault_odds_option() -> None:
    result = run_cli(["--no-color", "run", "--fault-odds", "1"])

    assert_CONFIG_ERROR(result)


@mark_cli
@parametrize(
    "args",
    [
        ["--stddev", "nan"],
        ["--mean", "inf"],
        ["--stddev", "0", "--mean", "150"],
    ],
)
def test_unusable_distribution_options(args: list[str]) -> None:
    result = run_cli(["--no-color", "-q", "run", "--count", "2", *FAST, *args])

    assert_CONFIG_ERROR(result)
    assert "Calculated Average Score" not in result.output
