"""Terminal rendering of plan views."""

from .console import node_label, render_address_tree, render_category_lists, render_summary
from .theme import Theme, ThemeError, ThemeLoader

__all__ = [
    "Theme",
    "ThemeError",
    "ThemeLoader",
    "node_label",
    "render_address_tree",
    "render_category_lists",
    "render_summary",
]
