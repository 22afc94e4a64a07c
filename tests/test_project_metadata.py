# topmark:header:start
#
#   project      : ScoreFlow
#   file         : test_project_metadata.py
#   file_relpath : tests/test_project_metadata.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Consistency checks between package metadata and source file headers."""

from __future__ import annotations

from pathlib import Path

import tomlkit

from tests.conftest import parametrize

ROOT: Path = Path(__file__).resolve().parents[1]
COPYRIGHT_LINE: str = "#   copyright    : (c) 2026 The ScoreFlow Authors"

SOURCE_FILES: list[Path] = sorted((ROOT / "src" / "scoreflow").rglob("*.py"))


def test_pyproject_authors() -> None:
    data = tomlkit.parse((ROOT / "pyproject.toml").read_text(encoding="utf-8")).unwrap()

    assert data["project"]["authors"] == [{"name": "The ScoreFlow Authors"}]


def test_source_tree_is_not_empty() -> None:
    assert SOURCE_FILES


@parametrize("path", SOURCE_FILES, ids=lambda p: p.relative_to(ROOT).as_posix())
def test_source_header_names_project_copyright(path: Path) -> None:
    header = path.read_text(encoding="utf-8").splitlines()[:10]

    assert header[0] == "# topmark:header:start"
    assert "#   project      : ScoreFlow" in header
    assert COPYRIGHT_LINE in header
