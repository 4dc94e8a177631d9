"""Classification outcomes and their presentation hints."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator


class ChangeCategory(str, Enum):
    """Semantic buckets a change can be classified into."""

    IMPORT = "import"
    ADD = "add"
    DELETE = "delete"
    UPDATE = "update"
    RECREATE = "recreate"
    NOOP = "no-op"


class Color(str, Enum):
    """Display colors, named after the rich standard color names."""

    NONE = ""
    GREEN = "green"
    RED = "red"
    YELLOW = "yellow"
    MAGENTA = "magenta"
    CYAN = "cyan"


# Order in which categories are listed in summaries.
DISPLAY_ORDER = (
    ChangeCategory.IMPORT,
    ChangeCategory.ADD,
    ChangeCategory.UPDATE,
    ChangeCategory.RECREATE,
    ChangeCategory.DELETE,
)


@dataclass(frozen=True, slots=True)
class Classification:
    """Category, color and label suffix computed for a single change."""

    category: ChangeCategory
    color: Color
    suffix: str

    def __iter__(self) -> Iterator[object]:
        yield self.category
        yield self.color
        yield self.suffix
