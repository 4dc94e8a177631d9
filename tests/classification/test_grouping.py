from __future__ import annotations

import pytest

from plan_tree.classification import (
    UnsupportedChangeError,
    filter_noop_resources,
    group_output_changes,
    group_resource_changes,
)
from plan_tree.models import ChangeCategory, Importing, OutputChange, Plan, ResourceChange


def test_groups_each_category() -> None:
    changes = [
        ResourceChange(address="aws_instance.example1", actions=("create",)),
        ResourceChange(address="aws_instance.example2", actions=("delete",)),
        ResourceChange(address="aws_instance.example3", actions=("update",)),
        ResourceChange(address="aws_instance.example4", actions=("create", "delete")),
        ResourceChange(address="aws_instance.example5", importing=Importing(id="example5")),
    ]

    buckets = group_resource_changes(changes)

    assert {category: [c.address for c in members] for category, members in buckets.items()} == {
        ChangeCategory.ADD: ["aws_instance.example1"],
        ChangeCategory.DELETE: ["aws_instance.example2"],
        ChangeCategory.UPDATE: ["aws_instance.example3"],
        ChangeCategory.RECREATE: ["aws_instance.example4"],
        ChangeCategory.IMPORT: ["aws_instance.example5"],
    }


def test_groups_preserve_input_order_and_skip_noop() -> None:
    changes = [
        ResourceChange(address="b", actions=("create",)),
        ResourceChange(address="noop", actions=("no-op",)),
        ResourceChange(address="a", actions=("create",)),
        ResourceChange(address="c", actions=("delete", "create")),
        ResourceChange(address="d", actions=("create", "delete")),
    ]

    buckets = group_resource_changes(changes)

    assert [c.address for c in buckets[ChangeCategory.ADD]] == ["b", "a"]
    assert [c.address for c in buckets[ChangeCategory.RECREATE]] == ["c", "d"]
    assert ChangeCategory.NOOP not in buckets
    assert buckets.get(ChangeCategory.DELETE, []) == []


def test_grouping_propagates_unsupported_changes() -> None:
    changes = [
        ResourceChange(address="aws_instance.ok", actions=("create",)),
        ResourceChange(address="data.aws_ami.ubuntu", actions=("read",)),
    ]

    with pytest.raises(UnsupportedChangeError):
        group_resource_changes(changes)


def test_groups_outputs_by_name() -> None:
    outputs = {
        "output1": OutputChange("output1", ("create",)),
        "output2": OutputChange("output2", ("delete",)),
        "output3": OutputChange("output3", ("update",)),
        "output4": OutputChange("output4", ("no-op",)),
    }

    assert group_output_changes(outputs) == {
        ChangeCategory.ADD: ["output1"],
        ChangeCategory.DELETE: ["output2"],
        ChangeCategory.UPDATE: ["output3"],
    }


def test_filter_noop_resources_keeps_only_real_changes() -> None:
    create = ResourceChange(address="create", actions=("create",))
    plan = Plan(
        resource_changes=[
            ResourceChange(address="no-op1", actions=("no-op",)),
            ResourceChange(address="no-op3", actions=("no-op",), importing=None),
            ResourceChange(address="no-op2", actions=("no-op",), importing=Importing(id="")),
            create,
        ]
    )
    original_list = plan.resource_changes

    removed = filter_noop_resources(plan)

    assert removed == 3
    assert plan.resource_changes == [create]
    assert plan.resource_changes is original_list


def test_filter_noop_resources_keeps_real_imports() -> None:
    changes = [
        ResourceChange(address="a", actions=("update",)),
        ResourceChange(address="b", actions=("no-op",), importing=Importing(id="bucket")),
        ResourceChange(address="c", actions=("no-op",)),
        ResourceChange(address="d", actions=("delete",)),
    ]

    removed = filter_noop_resources(changes)

    assert removed == 1
    assert [change.address for change in changes] == ["a", "b", "d"]
