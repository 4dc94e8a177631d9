"""Command-line interface implementation for the plan viewer."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Sequence

from rich.console import Console

from ..adapters import STDIN_PATH, PlanLoaderError
from ..classification import UnsupportedChangeError
from ..parsing import PlanParseError
from ..rendering import (
    Theme,
    ThemeError,
    ThemeLoader,
    render_address_tree,
    render_category_lists,
    render_summary,
)
from ..service import PlanView, PlanViewService
from ..tree import AddressTreeError

OUTPUT_FORMATS = ("tree", "summary", "json")

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser."""

    parser = argparse.ArgumentParser(
        prog="tfplan-tree", description="Visualize Terraform plans as an address tree"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )
    subparsers = parser.add_subparsers(dest="command")

    show_parser = subparsers.add_parser(
        "show", help="Show the changes of a Terraform plan grouped by category and address."
    )
    show_parser.add_argument(
        "plan",
        nargs="?",
        default=STDIN_PATH,
        help="Plan JSON exported with `terraform show -json`; '-' reads stdin.",
    )
    show_parser.add_argument(
        "--plan-file",
        type=Path,
        default=None,
        help="Binary plan file generated via `terraform plan -out`; converted with terraform.",
    )
    show_parser.add_argument(
        "--working-dir",
        type=Path,
        default=Path.cwd(),
        help="Directory terraform runs in when --plan-file is used.",
    )
    show_parser.add_argument(
        "--terraform-bin",
        default="terraform",
        help="Name or path of the Terraform executable used to read plan files.",
    )
    show_parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default="tree",
        help="Output format.",
    )
    show_parser.add_argument(
        "--theme",
        dest="themes",
        action="append",
        type=Path,
        default=None,
        help="YAML theme file overriding category colors; may be repeated.",
    )
    show_parser.add_argument(
        "--include-noop",
        action="store_true",
        help="Keep no-op resource changes in the tree.",
    )
    show_parser.add_argument(
        "--no-outputs",
        dest="include_outputs",
        action="store_false",
        default=True,
        help="Skip output changes.",
    )

    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def print_view(view: PlanView, console: Console, *, output_format: str, theme: Theme) -> None:
    """Write ``view`` to ``console`` in the requested format."""

    if output_format == "json":
        console.print_json(json.dumps(view.to_dict()))
        return

    if output_format == "summary":
        output_buckets = view.output_buckets if view.plan.output_changes else None
        console.print(render_summary(view.resource_buckets, output_buckets, theme))
        for line in render_category_lists(view.resource_buckets, theme):
            console.print(line)
        return

    if not view.tree:
        console.print("No changes.")
        return
    console.print(render_address_tree(view.tree, theme))


def _handle_show(args: argparse.Namespace, console: Console) -> int:
    service = PlanViewService()

    try:
        theme = ThemeLoader().load(args.themes)
        view = service.view(
            args.working_dir,
            plan_json_path=None if args.plan_file else args.plan,
            plan_file_path=args.plan_file,
            terraform_bin=args.terraform_bin,
            include_noop=args.include_noop,
            include_outputs=args.include_outputs,
        )
    except (
        PlanLoaderError,
        PlanParseError,
        UnsupportedChangeError,
        AddressTreeError,
        ThemeError,
    ) as exc:
        logger.debug("Plan view failed", exc_info=True)
        print(f"Error: {exc}")
        return 2

    print_view(view, console, output_format=args.format, theme=theme)
    return 0


def main(argv: Sequence[str] | None = None, *, console: Console | None = None) -> int:
    """Entry point used by tests and the ``python -m`` invocation."""

    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command == "show":
        return _handle_show(args, console or Console())

    parser.print_help()
    return 0


def run() -> None:  # pragma: no cover - thin wrapper for module execution
    """Execute the CLI and exit with the produced status code."""

    raise SystemExit(main())


if __name__ == "__main__":  # pragma: no cover - module execution guard
    run()
