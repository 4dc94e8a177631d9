"""Adapter layer package for plan ingestion."""

from .plan_loader import STDIN_PATH, PlanLoader, PlanLoaderError

__all__ = [
    "PlanLoader",
    "PlanLoaderError",
    "STDIN_PATH",
]
