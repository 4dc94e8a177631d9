"""Orchestration layer used by the CLI to build plan views."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping

from .adapters import PlanLoader, PlanLoaderError
from .classification import (
    OutputBuckets,
    ResourceBuckets,
    UnsupportedChangeError,
    classify_resource_change,
    filter_noop_resources,
    group_output_changes,
    group_resource_changes,
)
from .models import DISPLAY_ORDER, Plan
from .parsing import PlanParseError, PlanParser
from .tree import AddressNode, AddressTreeError, build_address_tree

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PlanView:
    """Category buckets and address tree computed for one plan."""

    plan: Plan
    resource_buckets: ResourceBuckets
    output_buckets: OutputBuckets
    tree: List[AddressNode]
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def counts(self) -> Dict[str, Dict[str, int]]:
        return {
            "resources": {
                category.value: len(self.resource_buckets.get(category, []))
                for category in DISPLAY_ORDER
            },
            "outputs": {
                category.value: len(self.output_buckets.get(category, []))
                for category in DISPLAY_ORDER
            },
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metadata": dict(self.metadata),
            "summary": {
                "total_changes": sum(len(changes) for changes in self.resource_buckets.values()),
                "counts": self.counts(),
            },
            "resources": {
                category.value: [change.address for change in self.resource_buckets[category]]
                for category in DISPLAY_ORDER
                if category in self.resource_buckets
            },
            "suffixes": {
                change.address: classify_resource_change(change).suffix
                for changes in self.resource_buckets.values()
                for change in changes
            },
            "outputs": {
                category.value: list(self.output_buckets[category])
                for category in DISPLAY_ORDER
                if category in self.output_buckets
            },
            "tree": [node.to_dict() for node in self.tree],
        }


PlanLoaderFactory = Callable[..., PlanLoader]


class PlanViewService:
    """High level service responsible for plan ingestion, grouping and tree building."""

    def __init__(
        self,
        *,
        plan_loader_factory: PlanLoaderFactory | None = None,
        parser: PlanParser | None = None,
    ) -> None:
        self._plan_loader_factory = plan_loader_factory or PlanLoader
        self._parser = parser or PlanParser()

    # ------------------------------------------------------------------
    def view(
        self,
        working_dir: Path,
        *,
        plan_json_path: Path | str | None = None,
        plan_file_path: Path | None = None,
        terraform_bin: str = "terraform",
        include_noop: bool = False,
        include_outputs: bool = True,
    ) -> PlanView:
        """Load a plan and return its grouped changes and address tree."""

        loader = self._plan_loader_factory(
            working_dir=working_dir,
            plan_json_path=plan_json_path,
            plan_file_path=plan_file_path,
            terraform_bin=terraform_bin,
        )
        plan = self._parser.parse(loader.load_plan())
        return self.view_plan(plan, include_noop=include_noop, include_outputs=include_outputs)

    def view_plan(
        self,
        plan: Plan,
        *,
        include_noop: bool = False,
        include_outputs: bool = True,
    ) -> PlanView:
        """Build the view for an already parsed plan.

        Unless ``include_noop`` is set the plan's resource changes are pruned
        of no-op entries first, so both projections see the same list.
        """

        removed = 0
        if not include_noop:
            removed = filter_noop_resources(plan)

        resource_buckets = group_resource_changes(plan.resource_changes)
        output_buckets = group_output_changes(plan.output_changes) if include_outputs else {}
        tree = build_address_tree(plan.resource_changes)

        logger.debug(
            "Built view for %d resource change(s) across %d top-level node(s)",
            len(plan.resource_changes),
            len(tree),
        )

        metadata: Dict[str, Any] = {
            "format_version": plan.format_version,
            "terraform_version": plan.terraform_version,
            "resource_count": len(plan.resource_changes),
            "output_count": len(plan.output_changes),
            "filtered_noop_count": removed,
        }

        return PlanView(
            plan=plan,
            resource_buckets=resource_buckets,
            output_buckets=output_buckets,
            tree=tree,
            metadata=metadata,
        )


__all__ = [
    "AddressTreeError",
    "PlanLoaderError",
    "PlanParseError",
    "PlanView",
    "PlanViewService",
    "UnsupportedChangeError",
]
