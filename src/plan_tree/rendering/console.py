"""Rich renderables for address trees and change summaries."""

from __future__ import annotations

from typing import List, Mapping, Optional, Sequence

from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from ..classification import classify_resource_change
from ..models import DISPLAY_ORDER, ChangeCategory, ResourceChange
from ..tree import ROOT_LABEL, AddressNode
from .theme import Theme


def node_label(node: AddressNode, theme: Theme) -> Text:
    """Return the label for ``node``, decorated when a change is attached."""

    if node.change is None:
        return Text(node.name)

    classification = classify_resource_change(node.change)
    label = Text(node.name, style=theme.style_for(classification))
    if classification.suffix:
        label.append(f" {classification.suffix}")
    return label


def render_address_tree(
    nodes: Sequence[AddressNode],
    theme: Optional[Theme] = None,
    *,
    guide_style: str = "dim",
) -> Tree:
    """Return a rich tree rooted at ``.`` holding ``nodes`` and their descendants."""

    theme = theme or Theme()
    display = Tree(ROOT_LABEL, guide_style=guide_style)
    for node in nodes:
        _add_node(display, node, theme)
    return display


def _add_node(parent: Tree, node: AddressNode, theme: Theme) -> None:
    branch = parent.add(node_label(node, theme))
    for child in node.children:
        _add_node(branch, child, theme)


def render_summary(
    resource_buckets: Mapping[ChangeCategory, Sequence[ResourceChange]],
    output_buckets: Optional[Mapping[ChangeCategory, Sequence[str]]] = None,
    theme: Optional[Theme] = None,
) -> Table:
    """Render per-category counts as a table."""

    theme = theme or Theme()
    table = Table(title="Plan summary")
    table.add_column("Category")
    table.add_column("Resources", justify="right")
    if output_buckets is not None:
        table.add_column("Outputs", justify="right")

    for category in DISPLAY_ORDER:
        row = [
            Text(category.value, style=theme.style_for(category)),
            str(len(resource_buckets.get(category, []))),
        ]
        if output_buckets is not None:
            row.append(str(len(output_buckets.get(category, []))))
        table.add_row(*row)

    return table


def render_category_lists(
    resource_buckets: Mapping[ChangeCategory, Sequence[ResourceChange]],
    theme: Optional[Theme] = None,
) -> List[Text]:
    """Return one ``<suffix> <address>`` line per change, grouped by category."""

    theme = theme or Theme()
    lines: List[Text] = []
    for category in DISPLAY_ORDER:
        for change in resource_buckets.get(category, []):
            classification = classify_resource_change(change)
            lines.append(
                Text(
                    f"{classification.suffix} {change.address}",
                    style=theme.style_for(classification),
                )
            )
    return lines


__all__ = [
    "node_label",
    "render_address_tree",
    "render_category_lists",
    "render_summary",
]
