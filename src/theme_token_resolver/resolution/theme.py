# theme.py
"""
theme.py
========

Does: High-level entry points: build the built-in registry from the bundled
      seed table, ship the default dark/light override maps, and resolve a
      `{type, colors}` theme into the flat color map a rendering layer consumes.
Returns:
  - build_default_registry() -> TokenRegistry (fresh, from seed_colors.json)
  - default_registry() -> TokenRegistry (built once, read-only, shared)
  - get_theme_colors(theme) -> {token id: "#RRGGBBAA" | None}
  - color_guard(color, default) -> str
Used by: The CLI and any embedding application.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any, TypedDict

from .color import TRANSPARENT
from .general.utils import bundled_data_dir, load_config
from .tokens import (
    DEFAULT_SEED_FILE,
    Resolver,
    ThemeVariant,
    TokenRegistry,
    load_seed,
)

__all__ = [
    "ThemeSpec",
    "DEFAULT_THEME_TYPE",
    "DEFAULT_THEMES_FILE",
    "build_default_registry",
    "default_registry",
    "default_theme_colors",
    "get_theme_colors",
    "color_guard",
]

logger = logging.getLogger(__name__)

DEFAULT_THEME_TYPE = ThemeVariant.DARK
DEFAULT_THEMES_FILE = "default_themes"
_TRANSPARENT_HEX = TRANSPARENT.to_hex()


class ThemeSpec(TypedDict, total=False):
    type: str
    colors: dict[str, str]


# ── Registry ─────────────────────────────────────────────────────────────────
def build_default_registry(
    file: str | Path = DEFAULT_SEED_FILE,
    *,
    base_dir: Path | None = None,
) -> TokenRegistry:
    """Build a new registry from a seed table in the data directory."""
    return TokenRegistry.from_seed(load_seed(file, base_dir=base_dir))


@lru_cache(maxsize=1)
def default_registry() -> TokenRegistry:
    """The bundled registry, built on first use; immutable, so sharing is safe."""
    registry = build_default_registry()
    logger.debug("Default registry ready (%d tokens)", len(registry))
    return registry


# ── Default override maps ────────────────────────────────────────────────────
def _validate_default_themes(data: dict[str, Any]) -> dict[str, Any]:
    for key, colors in data.items():
        ThemeVariant.parse(key)
        if not isinstance(colors, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in colors.items()
        ):
            raise TypeError(f"'{key}' must map token ids to color strings")
    return data


def default_theme_colors(
    variant: ThemeVariant | str = DEFAULT_THEME_TYPE,
    *,
    base_dir: Path | None = None,
) -> dict[str, str]:
    """Default overrides shipped for `variant` (empty for high-contrast variants).

    Read from the package `data/` dir unless `base_dir` is given.
    """
    variant = ThemeVariant.parse(variant)
    data = load_config(
        DEFAULT_THEMES_FILE,
        mode="validated_dict",
        base_dir=base_dir or bundled_data_dir(),
        validator=_validate_default_themes,
    )
    for key, colors in data.items():
        if ThemeVariant.parse(key) is variant:
            return dict(colors)
    return {}


# ── Resolution ───────────────────────────────────────────────────────────────
def get_theme_colors(
    theme: ThemeSpec | Mapping[str, Any] | None = None,
    registry: TokenRegistry | None = None,
) -> dict[str, str | None]:
    """Resolve a theme into `{token id: "#RRGGBBAA" | None}`.

    A missing `type` means dark; missing `colors` means the default overrides
    for the requested variant.
    """
    theme = theme or {}
    variant = ThemeVariant.parse(theme.get("type") or DEFAULT_THEME_TYPE)
    colors = theme.get("colors")
    if colors is None:
        colors = default_theme_colors(variant)
    return Resolver(registry or default_registry(), colors).resolve_theme(variant)


def color_guard(color: str | None, default: str = _TRANSPARENT_HEX) -> str:
    """Return `color`, or `default` (transparent) for a token without color."""
    return color if color is not None else default
