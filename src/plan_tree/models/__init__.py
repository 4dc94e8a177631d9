"""Data models for plan changes and their classification."""

from .category import DISPLAY_ORDER, ChangeCategory, Classification, Color
from .change import Action, Importing, OutputChange, Plan, ResourceChange

__all__ = [
    "Action",
    "ChangeCategory",
    "Classification",
    "Color",
    "DISPLAY_ORDER",
    "Importing",
    "OutputChange",
    "Plan",
    "ResourceChange",
]
