# topmark:header:start
#
#   project      : ScoreFlow
#   file         : test_smoke.py
#   file_relpath : tests/cli/test_smoke.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""CLI smoke tests: help, version and show-defaults."""

from __future__ import annotations

import tomlkit

from scoreflow.constants import SCOREFLOW_VERSION
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import mark_cli, parametrize


@mark_cli
@parametrize("argv", [["--help"], ["-h"], ["run", "--help"], ["show-defaults", "--help"]])
def test_help(argv: list[str]) -> None:
    result = run_cli(argv)

    assert_SUCCESS(result)
    assert "Usage:" in result.output


@mark_cli
def test_group_help_lists_commands() -> None:
    result = run_cli(["--help"])

    for name in ("run", "show-defaults", "version"):
        assert name in result.output


@mark_cli
def test_version_outputs_installed_version() -> None:
    result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.output.strip() == SCOREFLOW_VERSION


@mark_cli
def test_verbose_version_has_heading() -> None:
    result = run_cli(["--no-color", "-v", "version"])

    assert_SUCCESS(result)
    assert "ScoreFlow version:" in result.output
    assert SCOREFLOW_VERSION in result.output


@mark_cli
def test_show_defaults_is_valid_toml() -> None:
    result = run_cli(["--no-color", "show-defaults"])

    assert_SUCCESS(result)
    parsed = tomlkit.parse(result.output).unwrap()
    assert parsed["generation"]["count"] == 30
    assert parsed["scores"] == {"min": 0.0, "max": 100.0}
    assert "seed" not in parsed["generation"]


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    result = run_cli(["-v", "-q", "version"])

    assert_USAGE_ERROR(result)
