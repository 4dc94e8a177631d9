"""Fold dot-separated resource addresses into a tree of address segments."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from ..models import ResourceChange

logger = logging.getLogger(__name__)

ROOT_LABEL = "."
SEPARATOR = "."


class AddressTreeError(ValueError):
    """Raised when an address cannot be placed in the tree."""


class AddressNode:
    """One address segment together with its children.

    ``children`` is ordered by first insertion and never holds two nodes with
    the same name. ``change`` is set only on nodes that terminate an address.
    """

    __slots__ = ("name", "children", "change", "_index")

    def __init__(
        self,
        name: str,
        *,
        change: Optional[ResourceChange] = None,
        indexed: bool = False,
    ) -> None:
        self.name = name
        self.children: List[AddressNode] = []
        self.change = change
        self._index: Optional[Dict[str, AddressNode]] = {} if indexed else None

    def __repr__(self) -> str:
        return f"AddressNode(name={self.name!r}, children={self.children!r})"

    # ------------------------------------------------------------------
    def find_child(self, name: str) -> Optional["AddressNode"]:
        """Return the child called ``name`` or ``None``."""

        if self._index is not None:
            return self._index.get(name)
        for child in self.children:
            if child.name == name:
                return child
        return None

    def add_child(self, name: str) -> "AddressNode":
        """Append a new child called ``name`` and return it."""

        child = AddressNode(name, indexed=self._index is not None)
        self.children.append(child)
        if self._index is not None:
            self._index[name] = child
        return child

    def child(self, name: str) -> "AddressNode":
        """Return the child called ``name``, creating it when missing."""

        existing = self.find_child(name)
        if existing is not None:
            return existing
        return self.add_child(name)

    # ------------------------------------------------------------------
    def walk(self, depth: int = 0) -> Iterator[Tuple[int, "AddressNode"]]:
        """Yield ``(depth, node)`` pairs depth-first in insertion order."""

        yield depth, self
        for child in self.children:
            yield from child.walk(depth + 1)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "address": self.change.address if self.change else None,
            "children": [child.to_dict() for child in self.children],
        }


def split_address(address: str) -> List[str]:
    """Split ``address`` on the dots that sit outside ``[...]`` index keys.

    Dots inside an index key, quoted or not, stay part of their segment, so
    ``local_file.cfg["../app.conf"]`` yields two segments. Empty segments are
    kept as nodes with an empty name.
    """

    if not isinstance(address, str) or not address:
        raise AddressTreeError(f"Resource address must be a non-empty string: {address!r}")

    segments: List[str] = []
    current: List[str] = []
    depth = 0
    in_quotes = False
    escaped = False
    for char in address:
        if in_quotes:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_quotes = False
        elif char == '"' and depth:
            in_quotes = True
        elif char == "[":
            depth += 1
        elif char == "]" and depth:
            depth -= 1
        elif char == SEPARATOR and not depth:
            segments.append("".join(current))
            current = []
            continue
        current.append(char)

    segments.append("".join(current))
    return segments


def build_address_tree(
    changes: Iterable[ResourceChange],
    *,
    indexed: bool = False,
) -> List[AddressNode]:
    """Return the top-level nodes of the tree formed by the change addresses.

    Addresses sharing a prefix share the nodes for that prefix. Siblings keep
    the order in which their segment was first seen. With ``indexed`` each
    node keeps a name lookup next to its children list, which avoids the
    linear sibling scan without changing the result.

    The root is private to the call; when an empty address is rejected with
    :class:`AddressTreeError` nothing built so far is returned.
    """

    root = AddressNode(ROOT_LABEL, indexed=indexed)
    for change in changes:
        _insert(root, change)
    return root.children


def _insert(root: AddressNode, change: ResourceChange) -> None:
    node = root
    for segment in split_address(change.address):
        node = node.child(segment)

    if node.change is not None:
        # Plan addresses are unique; keep the most recent change regardless.
        logger.debug("Replacing change already attached to %s", change.address)
    node.change = change


__all__ = [
    "AddressNode",
    "AddressTreeError",
    "ROOT_LABEL",
    "build_address_tree",
    "split_address",
]
