"""Change records parsed from a Terraform plan."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class Action(str, Enum):
    """Primitive action verbs Terraform uses in ``change.actions``."""

    NOOP = "no-op"
    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True, slots=True)
class Importing:
    """Marker attached to changes that adopt an existing object."""

    id: str = ""

    @property
    def is_real(self) -> bool:
        return bool(self.id)


@dataclass(frozen=True, slots=True)
class ResourceChange:
    """A planned change to a single resource instance."""

    address: str
    actions: Tuple[str, ...] = ()
    importing: Optional[Importing] = None
    module_address: Optional[str] = None
    mode: str = "managed"
    type: str = ""
    name: str = ""
    provider_name: Optional[str] = None
    index: Optional[str | int] = None

    @property
    def is_import(self) -> bool:
        """Return ``True`` when the change imports an existing object."""

        return self.importing is not None and self.importing.is_real

    @property
    def is_noop(self) -> bool:
        return self.actions == (Action.NOOP.value,)


@dataclass(frozen=True, slots=True)
class OutputChange:
    """A planned change to a root module output value."""

    name: str
    actions: Tuple[str, ...] = ()


@dataclass(slots=True)
class Plan:
    """The subset of a Terraform plan document the viewer works with."""

    resource_changes: List[ResourceChange] = field(default_factory=list)
    output_changes: Dict[str, OutputChange] = field(default_factory=dict)
    format_version: Optional[str] = None
    terraform_version: Optional[str] = None
