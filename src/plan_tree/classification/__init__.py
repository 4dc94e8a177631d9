"""Change classification and grouping."""

from .classifier import (
    UnsupportedChangeError,
    classify_actions,
    classify_output_change,
    classify_resource_change,
)
from .grouping import (
    OutputBuckets,
    ResourceBuckets,
    filter_noop_resources,
    group_output_changes,
    group_resource_changes,
)

__all__ = [
    "OutputBuckets",
    "ResourceBuckets",
    "UnsupportedChangeError",
    "classify_actions",
    "classify_output_change",
    "classify_resource_change",
    "filter_noop_resources",
    "group_output_changes",
    "group_resource_changes",
]
