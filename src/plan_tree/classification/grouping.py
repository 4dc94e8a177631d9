"""Bucket plan changes by category and prune no-op resources."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, MutableSequence

from ..models import ChangeCategory, OutputChange, Plan, ResourceChange
from .classifier import classify_output_change, classify_resource_change

logger = logging.getLogger(__name__)

ResourceBuckets = Dict[ChangeCategory, List[ResourceChange]]
OutputBuckets = Dict[ChangeCategory, List[str]]


def group_resource_changes(changes: Iterable[ResourceChange]) -> ResourceBuckets:
    """Return resource changes keyed by category, in input order.

    Categories without members are absent from the result and no-op changes
    are never placed in a bucket. :class:`UnsupportedChangeError` propagates
    to the caller.
    """

    buckets: ResourceBuckets = {}
    for change in changes:
        category = classify_resource_change(change).category
        if category is ChangeCategory.NOOP:
            continue
        buckets.setdefault(category, []).append(change)
    return buckets


def group_output_changes(outputs: Mapping[str, OutputChange]) -> OutputBuckets:
    """Return output names keyed by category, in mapping order."""

    buckets: OutputBuckets = {}
    for name, change in outputs.items():
        category = classify_output_change(change).category
        if category is ChangeCategory.NOOP:
            continue
        buckets.setdefault(category, []).append(name)
    return buckets


def filter_noop_resources(target: Plan | MutableSequence[ResourceChange]) -> int:
    """Drop no-op resource changes in place and return how many were removed.

    Changes that import an existing object survive even when their only
    action is ``no-op``.
    """

    changes = target.resource_changes if isinstance(target, Plan) else target

    survivors = [change for change in changes if not change.is_noop or change.is_import]
    removed = len(changes) - len(survivors)
    changes[:] = survivors

    if removed:
        logger.debug("Filtered %d no-op resource change(s)", removed)
    return removed


__all__ = [
    "OutputBuckets",
    "ResourceBuckets",
    "filter_noop_resources",
    "group_output_changes",
    "group_resource_changes",
]
