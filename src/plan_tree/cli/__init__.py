"""Command-line interface package for the plan viewer."""

from .app import OUTPUT_FORMATS, build_parser, configure_logging, main, print_view, run

__all__ = [
    "OUTPUT_FORMATS",
    "build_parser",
    "configure_logging",
    "main",
    "print_view",
    "run",
]
