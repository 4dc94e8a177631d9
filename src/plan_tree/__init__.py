"""Terraform plan viewer: change classification and address trees."""

from .classification import (
    UnsupportedChangeError,
    classify_output_change,
    classify_resource_change,
    filter_noop_resources,
    group_output_changes,
    group_resource_changes,
)
from .models import ChangeCategory, Classification, Color, OutputChange, Plan, ResourceChange
from .tree import AddressNode, AddressTreeError, build_address_tree

__all__ = [
    "AddressNode",
    "AddressTreeError",
    "ChangeCategory",
    "Classification",
    "Color",
    "OutputChange",
    "Plan",
    "ResourceChange",
    "UnsupportedChangeError",
    "build_address_tree",
    "classify_output_change",
    "classify_resource_change",
    "filter_noop_resources",
    "group_output_changes",
    "group_resource_changes",
]
