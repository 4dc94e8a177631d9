"""Conversion helpers that turn raw Terraform plan JSON into change records."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

from ..models import Importing, OutputChange, Plan, ResourceChange


class PlanParseError(ValueError):
    """Raised when a plan document does not have the expected shape."""


class PlanParser:
    """Parse ``terraform show -json`` documents into :class:`Plan` instances."""

    def parse(self, document: Any) -> Plan:
        """Return the plan described by ``document``."""

        if not isinstance(document, Mapping):
            raise PlanParseError("Plan document must be a JSON object")

        raw_resources = document.get("resource_changes") or []
        if not isinstance(raw_resources, list):
            raise PlanParseError("'resource_changes' must be a list")

        raw_outputs = document.get("output_changes") or {}
        if not isinstance(raw_outputs, Mapping):
            raise PlanParseError("'output_changes' must be an object")

        return Plan(
            resource_changes=[
                self._parse_resource_change(position, entry)
                for position, entry in enumerate(raw_resources)
            ],
            output_changes={
                str(name): OutputChange(
                    name=str(name), actions=self._actions(entry, f"output {name!r}")
                )
                for name, entry in raw_outputs.items()
            },
            format_version=document.get("format_version"),
            terraform_version=document.get("terraform_version"),
        )

    # ------------------------------------------------------------------
    def _parse_resource_change(self, position: int, entry: Any) -> ResourceChange:
        if not isinstance(entry, Mapping):
            raise PlanParseError(f"resource_changes[{position}] must be an object")

        address = entry.get("address")
        if not isinstance(address, str) or not address:
            raise PlanParseError(f"resource_changes[{position}] has no address")

        change: Mapping[str, Any] = entry.get("change") or {}
        if not isinstance(change, Mapping):
            raise PlanParseError(f"Change for {address} must be an object")

        return ResourceChange(
            address=address,
            actions=self._actions(change, address),
            importing=self._importing(change.get("importing")),
            module_address=entry.get("module_address"),
            mode=entry.get("mode", "managed"),
            type=entry.get("type", ""),
            name=entry.get("name", ""),
            provider_name=entry.get("provider_name"),
            index=entry.get("index"),
        )

    def _actions(self, change: Any, subject: str) -> Tuple[str, ...]:
        if not isinstance(change, Mapping):
            raise PlanParseError(f"Change for {subject} must be an object")

        actions = change.get("actions") or []
        if not isinstance(actions, list):
            raise PlanParseError(f"Actions for {subject} must be a list")
        return tuple(str(action) for action in actions)

    def _importing(self, raw: Any) -> Optional[Importing]:
        if raw is None:
            return None
        if not isinstance(raw, Mapping):
            raise PlanParseError("'importing' must be an object")
        return Importing(id=str(raw.get("id") or ""))


__all__ = ["PlanParseError", "PlanParser"]
