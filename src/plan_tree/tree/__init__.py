"""Address tree construction."""

from .builder import AddressNode, AddressTreeError, ROOT_LABEL, build_address_tree, split_address

__all__ = [
    "AddressNode",
    "AddressTreeError",
    "ROOT_LABEL",
    "build_address_tree",
    "split_address",
]
