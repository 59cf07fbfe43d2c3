# theme_token_resolver/resolution/tokens/transforms.py
"""
transforms.

Does: Builder helpers for writing seed tables in Python. Every operand may be a
      ColorValue, a Color, a hex literal, a token identifier or None; operands
      are classified with the same rules as JSON seed data.
Returns: Frozen ColorTransform instances.
"""

from __future__ import annotations

from typing import Any

from .seed import parse_color_value
from .types import (
    ColorIdentifier,
    Darken,
    IfDefinedThenElse,
    LessProminent,
    Lighten,
    OneOf,
    Opaque,
    Transparent,
)

__all__ = [
    "darken",
    "lighten",
    "transparent",
    "opaque",
    "one_of",
    "if_defined_then_else",
    "less_prominent",
]


def darken(value: Any, factor: float) -> Darken:
    return Darken(parse_color_value(value), float(factor))


def lighten(value: Any, factor: float) -> Lighten:
    return Lighten(parse_color_value(value), float(factor))


def transparent(value: Any, factor: float) -> Transparent:
    return Transparent(parse_color_value(value), float(factor))


def opaque(value: Any, background: Any) -> Opaque:
    return Opaque(parse_color_value(value), parse_color_value(background))


def one_of(*values: Any) -> OneOf:
    return OneOf(tuple(parse_color_value(v) for v in values))


def if_defined_then_else(if_id: ColorIdentifier, then: Any, else_: Any) -> IfDefinedThenElse:
    return IfDefinedThenElse(if_id, parse_color_value(then), parse_color_value(else_))


def less_prominent(value: Any, background: Any, factor: float, transparency: float) -> LessProminent:
    """Push `value` toward `background` by `factor`, then scale its alpha by `transparency`."""
    return LessProminent(
        parse_color_value(value),
        parse_color_value(background),
        float(factor),
        float(transparency),
    )
