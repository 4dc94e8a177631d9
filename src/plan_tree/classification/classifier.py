"""Map change action sequences onto display categories."""

from __future__ import annotations

from typing import Sequence

from ..models import (
    Action,
    ChangeCategory,
    Classification,
    Color,
    OutputChange,
    ResourceChange,
)

IMPORT = Classification(ChangeCategory.IMPORT, Color.CYAN, "(i)")
ADD = Classification(ChangeCategory.ADD, Color.GREEN, "(+)")
DELETE = Classification(ChangeCategory.DELETE, Color.RED, "(-)")
UPDATE = Classification(ChangeCategory.UPDATE, Color.YELLOW, "(~)")
CREATE_BEFORE_DESTROY = Classification(ChangeCategory.RECREATE, Color.MAGENTA, "(+/-)")
DESTROY_BEFORE_CREATE = Classification(ChangeCategory.RECREATE, Color.MAGENTA, "(-/+)")
NOOP = Classification(ChangeCategory.NOOP, Color.NONE, "")


class UnsupportedChangeError(ValueError):
    """Raised when a change carries an action sequence with no known category."""

    def __init__(self, actions: Sequence[str], *, address: str | None = None) -> None:
        self.actions = tuple(actions)
        self.address = address
        subject = f" for {address}" if address else ""
        super().__init__(f"Unsupported change actions{subject}: {list(self.actions)}")


def classify_actions(actions: Sequence[str], *, address: str | None = None) -> Classification:
    """Return the classification for an ordered action sequence."""

    match tuple(actions):
        case (Action.CREATE,):
            return ADD
        case (Action.DELETE,):
            return DELETE
        case (Action.UPDATE,):
            return UPDATE
        case (Action.CREATE, Action.DELETE):
            return CREATE_BEFORE_DESTROY
        case (Action.DELETE, Action.CREATE):
            return DESTROY_BEFORE_CREATE
        case (Action.NOOP,):
            return NOOP
        case _:
            raise UnsupportedChangeError(actions, address=address)


def classify_resource_change(change: ResourceChange) -> Classification:
    """Classify a resource change; a real import wins over its actions."""

    if change.is_import:
        return IMPORT
    return classify_actions(change.actions, address=change.address)


def classify_output_change(change: OutputChange) -> Classification:
    return classify_actions(change.actions, address=f"output.{change.name}")


__all__ = [
    "UnsupportedChangeError",
    "classify_actions",
    "classify_output_change",
    "classify_resource_change",
]
