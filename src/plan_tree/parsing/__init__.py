"""Parsing of Terraform plan JSON documents."""

from .plan_parser import PlanParseError, PlanParser

__all__ = ["PlanParseError", "PlanParser"]
