from __future__ import annotations

from pathlib import Path

import pytest

from plan_tree.models import ChangeCategory
from plan_tree.rendering import Theme, ThemeError, ThemeLoader


def _write(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


def test_default_theme_matches_classifier_colors() -> None:
    theme = ThemeLoader().load()

    assert theme.colors[ChangeCategory.ADD] == "green"
    assert theme.colors[ChangeCategory.DELETE] == "red"
    assert theme.colors[ChangeCategory.UPDATE] == "yellow"
    assert theme.colors[ChangeCategory.RECREATE] == "magenta"
    assert theme.colors[ChangeCategory.IMPORT] == "cyan"
    assert theme.style_for(ChangeCategory.NOOP) == ""


def test_theme_files_are_merged_in_order(tmp_path: Path) -> None:
    base = _write(tmp_path / "base.yaml", "colors:\n  add: bright_green\n  delete: red\n")
    override = _write(tmp_path / "override.json", '{"colors": {"delete": "bold red"}}')

    theme = ThemeLoader(default_paths=[base]).load([override])

    assert theme.colors[ChangeCategory.ADD] == "bright_green"
    assert theme.colors[ChangeCategory.DELETE] == "bold red"
    assert theme.colors[ChangeCategory.UPDATE] == "yellow"


def test_unknown_categories_are_ignored(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    theme_file = _write(tmp_path / "theme.yaml", "colors:\n  destroy: red\n  Update: blue\n")

    theme = ThemeLoader().load([theme_file])

    assert theme.colors[ChangeCategory.UPDATE] == "blue"
    assert "destroy" in caplog.text
    assert theme == Theme(colors={**Theme().colors, ChangeCategory.UPDATE: "blue"})


@pytest.mark.parametrize(
    "content",
    ["- add\n- delete\n", "colors: [green]\n", "colors: {add: [unterminated\n"],
)
def test_invalid_theme_files_raise(tmp_path: Path, content: str) -> None:
    theme_file = _write(tmp_path / "theme.yaml", content)

    with pytest.raises(ThemeError):
        ThemeLoader().load([theme_file])


def test_missing_theme_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ThemeError):
        ThemeLoader().load([tmp_path / "missing.yaml"])


@pytest.mark.parametrize("style", ["not_a_color", "bold notacolor", "'on'", "red on"])
def test_invalid_styles_raise(tmp_path: Path, style: str) -> None:
    theme_file = _write(tmp_path / "theme.yaml", f"colors:\n  add: {style}\n")

    with pytest.raises(ThemeError, match="add"):
        ThemeLoader().load([theme_file])


def test_valid_styles_are_accepted(tmp_path: Path) -> None:
    theme_file = _write(
        tmp_path / "theme.yaml",
        "colors:\n  add: bold bright_green\n  delete: '#ff0000'\n  update: white on blue\n",
    )

    theme = ThemeLoader().load([theme_file])

    assert theme.colors[ChangeCategory.ADD] == "bold bright_green"
    assert theme.colors[ChangeCategory.DELETE] == "#ff0000"
    assert theme.colors[ChangeCategory.UPDATE] == "white on blue"
