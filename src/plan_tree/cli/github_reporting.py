"""Helpers for publishing plan views to GitHub Actions surfaces."""

from __future__ import annotations

import argparse
import json
import os
from pathlib import Path
from typing import Iterable, Mapping, MutableMapping, Sequence

CATEGORY_ORDER = ["import", "add", "update", "recreate", "delete"]
CATEGORY_SYMBOLS = {
    "import": "(i)",
    "add": "(+)",
    "update": "(~)",
    "recreate": "(r)",
    "delete": "(-)",
}
ANNOTATION_LEVELS = {
    "delete": "warning",
    "recreate": "notice",
}
DISPLAY_LIMIT = 20


def _normalize_counts(raw_counts: Mapping[str, int] | None) -> MutableMapping[str, int]:
    counts: MutableMapping[str, int] = {category: 0 for category in CATEGORY_ORDER}
    for category, value in (raw_counts or {}).items():
        key = str(category).lower()
        if key in counts:
            counts[key] = int(value)
    return counts


def format_summary(report: Mapping[str, object]) -> str:
    """Render a Markdown job summary for the provided plan report."""

    summary: Mapping[str, object] = report.get("summary") or {}
    metadata: Mapping[str, object] = report.get("metadata") or {}
    resources: Mapping[str, Sequence[str]] = report.get("resources") or {}
    suffixes: Mapping[str, str] = report.get("suffixes") or {}
    counts: Mapping[str, Mapping[str, int]] = summary.get("counts") or {}

    resource_counts = _normalize_counts(counts.get("resources"))
    output_counts = _normalize_counts(counts.get("outputs"))
    total_changes = int(summary.get("total_changes", 0))

    lines: list[str] = [
        "# Terraform Plan",
        "",
        f"**Total resource changes:** {total_changes}",
        "",
        "| Category | Resources | Outputs |",
        "| --- | ---: | ---: |",
    ]
    for category in CATEGORY_ORDER:
        lines.append(
            f"| {category.title()} | {resource_counts[category]} | {output_counts[category]} |"
        )

    version = metadata.get("terraform_version")
    if version:
        lines.extend(["", f"_Terraform {version}_"])

    for category in CATEGORY_ORDER:
        addresses = list(resources.get(category) or [])
        if not addresses:
            continue

        lines.extend(["", f"## {category.title()}", ""])
        for address in addresses[:DISPLAY_LIMIT]:
            symbol = suffixes.get(address) or CATEGORY_SYMBOLS[category]
            lines.append(f"- `{symbol}` `{address}`")

        remaining = len(addresses) - DISPLAY_LIMIT
        if remaining > 0:
            lines.append(f"- ...and {remaining} more.")

    lines.append("")
    return "\n".join(lines)


def iter_annotations(report: Mapping[str, object]) -> Iterable[str]:
    """Yield workflow commands for destructive changes in the report."""

    resources: Mapping[str, Sequence[str]] = report.get("resources") or {}
    for category, level in ANNOTATION_LEVELS.items():
        for address in resources.get(category) or []:
            title = f"Terraform {category}"
            body = f"{address} will be {'destroyed' if category == 'delete' else 'replaced'}"
            body = body.replace("%", "%25").replace("\r", "").replace("\n", "%0A")
            yield f"::{level} title={title}::{body}"


def _load_report(path: Path) -> Mapping[str, object]:
    raw = path.read_text(encoding="utf-8-sig")
    if not raw.strip():
        return {}

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Failed to parse report JSON from '{path}': {exc.msg}.") from exc

    if not isinstance(data, Mapping):
        raise ValueError("Report JSON must be an object.")
    return data


def _write_summary(report: Mapping[str, object], destination: Path | None) -> None:
    if destination is None:
        return

    content = format_summary(report)
    destination.parent.mkdir(parents=True, exist_ok=True)
    with destination.open("a", encoding="utf-8") as handle:
        handle.write(content)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Publish a plan report as GitHub job summary and annotations."
    )
    parser.add_argument(
        "report", type=Path, help="Path to the JSON report from `tfplan-tree show --format json`."
    )
    parser.add_argument(
        "--summary-path",
        type=Path,
        default=None,
        help="Optional explicit path for the GitHub job summary output.",
    )

    args = parser.parse_args(argv)

    summary_path = args.summary_path
    if summary_path is None:
        summary_env = os.getenv("GITHUB_STEP_SUMMARY")
        if summary_env:
            summary_path = Path(summary_env)

    report = _load_report(args.report)

    _write_summary(report, summary_path)

    for command in iter_annotations(report):
        print(command)

    return 0


def run() -> None:  # pragma: no cover - wrapper for console entry point
    raise SystemExit(main())


if __name__ == "__main__":  # pragma: no cover - module execution guard
    run()
