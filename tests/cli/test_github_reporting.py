"""Tests for GitHub Actions reporting helpers."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from plan_tree.cli.github_reporting import format_summary, iter_annotations, main


def _build_report() -> dict[str, object]:
    return {
        "metadata": {"terraform_version": "1.6.4", "resource_count": 4},
        "summary": {
            "total_changes": 4,
            "counts": {
                "resources": {"import": 0, "add": 2, "update": 0, "recreate": 1, "delete": 1},
                "outputs": {"import": 0, "add": 1, "update": 0, "recreate": 0, "delete": 0},
            },
        },
        "resources": {
            "add": ["aws_instance.web", "module.vpc.aws_subnet.private[0]"],
            "recreate": ["module.db.aws_db_instance.main"],
            "delete": ["aws_iam_role.old"],
        },
        "outputs": {"add": ["instance_id"]},
        "tree": [],
    }


def test_format_summary_includes_key_sections() -> None:
    """Rendered summaries should include counts and changed addresses."""

    summary = format_summary(_build_report())

    assert "# Terraform Plan" in summary
    assert "**Total resource changes:** 4" in summary
    assert "| Add | 2 | 1 |" in summary
    assert "| Import | 0 | 0 |" in summary
    assert "_Terraform 1.6.4_" in summary
    assert "## Recreate" in summary
    assert "- `(+)` `module.vpc.aws_subnet.private[0]`" in summary
    assert "## Update" not in summary


def test_format_summary_truncates_long_lists() -> None:
    report = _build_report()
    report["resources"] = {"add": [f"null_resource.r{index}" for index in range(25)]}

    summary = format_summary(report)

    assert "`null_resource.r19`" in summary
    assert "`null_resource.r20`" not in summary
    assert "- ...and 5 more." in summary


def test_iter_annotations_flags_destructive_changes() -> None:
    """Deletes become warnings and replacements become notices."""

    annotations = list(iter_annotations(_build_report()))

    assert annotations == [
        "::warning title=Terraform delete::aws_iam_role.old will be destroyed",
        "::notice title=Terraform recreate::module.db.aws_db_instance.main will be replaced",
    ]


def test_main_writes_summary_and_prints_annotations(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    report_path = tmp_path / "report.json"
    report_path.write_text(json.dumps(_build_report()), encoding="utf-8")
    summary_path = tmp_path / "summary" / "step.md"
    monkeypatch.setenv("GITHUB_STEP_SUMMARY", str(summary_path))

    assert main([str(report_path)]) == 0

    assert "# Terraform Plan" in summary_path.read_text(encoding="utf-8")
    assert "::warning" in capsys.readouterr().out


def test_format_summary_uses_each_change_suffix() -> None:
    report = _build_report()
    report["resources"] = {"recreate": ["a.b", "c.d"]}
    report["suffixes"] = {"a.b": "(+/-)", "c.d": "(-/+)"}

    summary = format_summary(report)

    assert "- `(+/-)` `a.b`" in summary
    assert "- `(-/+)` `c.d`" in summary


def test_format_summary_without_suffixes_uses_neutral_recreate_marker() -> None:
    summary = format_summary(_build_report())

    assert "- `(r)` `module.db.aws_db_instance.main`" in summary
