# theme_token_resolver/resolution/__init__.py
"""
resolution.
==========

Does: Gather the public API of the engine: the Color value type, the token
      model and registry, the resolver, lint checks and the theme helpers.
Used by: The root package and the CLI.
"""

from __future__ import annotations

from .color import TRANSPARENT, Color, InvalidColorError
from .general.utils import ConfigFileNotFound, ConfigParseError, load_config
from .theme import (
    DEFAULT_THEME_TYPE,
    ThemeSpec,
    build_default_registry,
    color_guard,
    default_registry,
    default_theme_colors,
    get_theme_colors,
)
from .tokens import (
    UNSET,
    ColorReference,
    LintReport,
    LiteralColor,
    MergedView,
    PerVariantRecord,
    RegistryBuilder,
    Resolver,
    SeedDataError,
    ThemeVariant,
    TokenRegistry,
    UnknownVariantError,
    darken,
    if_defined_then_else,
    less_prominent,
    lighten,
    lint_registry,
    one_of,
    opaque,
    transparent,
)

__all__ = [
    # color
    "Color",
    "InvalidColorError",
    "TRANSPARENT",
    # tokens
    "ThemeVariant",
    "UnknownVariantError",
    "UNSET",
    "LiteralColor",
    "ColorReference",
    "PerVariantRecord",
    "SeedDataError",
    "RegistryBuilder",
    "TokenRegistry",
    "MergedView",
    "Resolver",
    "LintReport",
    "lint_registry",
    "darken",
    "lighten",
    "transparent",
    "opaque",
    "one_of",
    "if_defined_then_else",
    "less_prominent",
    # theme helpers
    "ThemeSpec",
    "DEFAULT_THEME_TYPE",
    "build_default_registry",
    "default_registry",
    "default_theme_colors",
    "get_theme_colors",
    "color_guard",
    # config
    "load_config",
    "ConfigFileNotFound",
    "ConfigParseError",
]
__docformat__ = "google"
