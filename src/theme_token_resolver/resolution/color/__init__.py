"""
color.
=====

Does: Aggregate the color primitive (immutable RGBA value + arithmetic) and the
      named constants shared by seed tables and the resolver.
Used By: Token literals, transform evaluation, theme helpers.
Returns: Pure value types; no side effects.
"""

# ── Value type ───────────────────────────────────────────────────────────────
from .model import Color, InvalidColorError, round_half_up

# ── Named constants ──────────────────────────────────────────────────────────
from .constants import (
    BLACK,
    BLUE,
    CYAN,
    GREEN,
    LIGHTGREY,
    RED,
    TRANSPARENT,
    WHITE,
)

__all__ = [
    "Color",
    "InvalidColorError",
    "round_half_up",
    "WHITE",
    "BLACK",
    "RED",
    "BLUE",
    "GREEN",
    "CYAN",
    "LIGHTGREY",
    "TRANSPARENT",
]
