"""Loading and merging of color theme files."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Sequence

import yaml
from rich.errors import StyleSyntaxError
from rich.style import Style

from ..classification.classifier import (
    ADD,
    DELETE,
    DESTROY_BEFORE_CREATE,
    IMPORT,
    NOOP,
    UPDATE,
)
from ..models import ChangeCategory, Classification

logger = logging.getLogger(__name__)


class ThemeError(RuntimeError):
    """Raised when a theme file cannot be loaded or parsed."""


def _default_colors() -> Dict[ChangeCategory, str]:
    return {
        classification.category: classification.color.value
        for classification in (IMPORT, ADD, DELETE, UPDATE, DESTROY_BEFORE_CREATE, NOOP)
    }


@dataclass(slots=True)
class Theme:
    """Rich style used for each change category."""

    colors: Dict[ChangeCategory, str] = field(default_factory=_default_colors)

    def style_for(self, category: ChangeCategory | Classification) -> str:
        if isinstance(category, Classification):
            category = category.category
        return self.colors.get(category, "")


class ThemeLoader:
    """Merge theme files on top of the built-in colors.

    A theme file is YAML (or JSON) of the form::

        colors:
          add: bright_green
          delete: bold red
    """

    def __init__(self, default_paths: Sequence[Path | str] | None = None) -> None:
        self._default_paths = [Path(path) for path in default_paths or []]

    # ------------------------------------------------------------------
    def load(self, paths: Sequence[Path | str] | None = None) -> Theme:
        """Return the theme produced by the default files followed by ``paths``."""

        theme_paths = list(self._default_paths)
        if paths:
            theme_paths.extend(Path(path) for path in paths)

        theme = Theme()
        for theme_path in theme_paths:
            data = self._load_file(theme_path)
            colors = data.get("colors") or {}
            if not isinstance(colors, Mapping):
                raise ThemeError(f"'colors' must be a mapping in theme file {theme_path}")

            for key, style in colors.items():
                try:
                    category = ChangeCategory(str(key).strip().lower())
                except ValueError:
                    logger.warning("Ignoring unknown category %r in %s", key, theme_path)
                    continue
                theme.colors[category] = self._parse_style(style, category, theme_path)

        return theme

    # ------------------------------------------------------------------
    def _parse_style(self, style: Any, category: ChangeCategory, path: Path) -> str:
        value = "" if style is None else str(style).strip()
        try:
            Style.parse(value)
        except StyleSyntaxError as exc:
            raise ThemeError(
                f"Invalid style {value!r} for {category.value!r} in theme file {path}"
            ) from exc
        return value

    # ------------------------------------------------------------------
    def _load_file(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            raise ThemeError(f"Theme file not found: {path}")

        try:
            content = path.read_text(encoding="utf-8")
        except OSError as exc:  # pragma: no cover - filesystem errors surfaced to caller
            raise ThemeError(f"Failed to read theme file {path}") from exc

        try:
            data = yaml.safe_load(content) or {}
        except yaml.YAMLError as exc:
            raise ThemeError(f"Invalid YAML in theme file {path}") from exc

        if not isinstance(data, Mapping):
            raise ThemeError(f"Theme file must be a mapping: {path}")

        logger.debug("Loaded theme file %s", path)
        return dict(data)


__all__ = ["Theme", "ThemeError", "ThemeLoader"]
