"""
tokens.
======

Does: Token data model, seed parsing, the frozen registry with merged override
      views, the resolver, Python-side transform builders, and lint checks.
Used By: Theme helpers, CLI, and any caller resolving a theme variant.
"""

# ── Data model ───────────────────────────────────────────────────────────────
from .types import (
    UNSET,
    ColorIdentifier,
    ColorReference,
    ColorTransform,
    ColorValue,
    Darken,
    IfDefinedThenElse,
    LessProminent,
    Lighten,
    LiteralColor,
    OneOf,
    Opaque,
    PerVariantRecord,
    ThemeVariant,
    TokenDefault,
    TransformKind,
    Transparent,
    UnknownVariantError,
    Unset,
    iter_references,
)

# ── Seed parsing & builders ──────────────────────────────────────────────────
from .seed import (
    DEFAULT_SEED_FILE,
    SeedDataError,
    SeedEntry,
    load_seed,
    parse_color_value,
    parse_override_value,
    parse_seed,
    parse_token_default,
)
from .transforms import (
    darken,
    if_defined_then_else,
    less_prominent,
    lighten,
    one_of,
    opaque,
    transparent,
)

# ── Registry & resolution ────────────────────────────────────────────────────
from .registry import MergedView, RegistryBuilder, RegistryFrozenError, TokenRegistry
from .resolver import Resolver

# ── Diagnostics ──────────────────────────────────────────────────────────────
from .diagnostics import (
    LintReport,
    find_dangling_references,
    find_reference_cycles,
    find_transparency_violations,
    lint_registry,
    suggest_identifier,
)

__all__ = [
    # data model
    "ColorIdentifier",
    "ThemeVariant",
    "UnknownVariantError",
    "Unset",
    "UNSET",
    "LiteralColor",
    "ColorReference",
    "TransformKind",
    "ColorTransform",
    "Darken",
    "Lighten",
    "Transparent",
    "Opaque",
    "OneOf",
    "IfDefinedThenElse",
    "LessProminent",
    "ColorValue",
    "PerVariantRecord",
    "TokenDefault",
    "iter_references",
    # seed
    "DEFAULT_SEED_FILE",
    "SeedDataError",
    "SeedEntry",
    "load_seed",
    "parse_color_value",
    "parse_override_value",
    "parse_seed",
    "parse_token_default",
    # builders
    "darken",
    "lighten",
    "transparent",
    "opaque",
    "one_of",
    "if_defined_then_else",
    "less_prominent",
    # registry & resolution
    "RegistryBuilder",
    "RegistryFrozenError",
    "TokenRegistry",
    "MergedView",
    "Resolver",
    # diagnostics
    "LintReport",
    "suggest_identifier",
    "find_dangling_references",
    "find_reference_cycles",
    "find_transparency_violations",
    "lint_registry",
]
