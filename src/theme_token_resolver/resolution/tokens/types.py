# theme_token_resolver/resolution/tokens/types.py
"""
types.py.

Does: Define the token data model: theme variants, the ColorValue tagged union
      (literal, reference, transforms, UNSET) and per-variant default records.
Used by: Seed parsing, registry storage, resolver dispatch, diagnostics.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import ClassVar, Iterator, Union

from ..color import Color

__all__ = [
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
]

__docformat__ = "google"

ColorIdentifier = str


# ── Variants ─────────────────────────────────────────────────────────────────
class UnknownVariantError(ValueError):
    """Raise when a string does not name one of the four theme variants."""


class ThemeVariant(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    HIGH_CONTRAST_DARK = "hcDark"
    HIGH_CONTRAST_LIGHT = "hcLight"

    @classmethod
    def parse(cls, value: ThemeVariant | str) -> ThemeVariant:
        """Accept a variant, its value ("hcDark") or its member name ("high_contrast_dark")."""
        if isinstance(value, ThemeVariant):
            return value
        key = str(value).strip().lower().replace("-", "_")
        for member in cls:
            if key in (member.value.lower(), member.name.lower()):
                return member
        raise UnknownVariantError(
            f"Unknown theme variant {value!r}; expected one of "
            + ", ".join(m.value for m in cls)
        )


# ── Unset ────────────────────────────────────────────────────────────────────
class Unset:
    """Explicitly no color. Distinct from "not registered"; falsy."""

    _instance: ClassVar[Unset | None] = None

    def __new__(cls) -> Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET = Unset()


# ── Plain values ─────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class LiteralColor:
    color: Color


@dataclass(frozen=True)
class ColorReference:
    """Use whatever `id` resolves to, for the same variant."""

    id: ColorIdentifier


# ── Transforms ───────────────────────────────────────────────────────────────
class TransformKind(str, Enum):
    DARKEN = "darken"
    LIGHTEN = "lighten"
    TRANSPARENT = "transparent"
    OPAQUE = "opaque"
    ONE_OF = "oneOf"
    IF_DEFINED_THEN_ELSE = "ifDefinedThenElse"
    LESS_PROMINENT = "lessProminent"


class ColorTransform:
    """Base of every derived color expression; `kind` tags the subclass."""

    kind: ClassVar[TransformKind]

    def operands(self) -> tuple[ColorValue, ...]:
        """Nested ColorValues in declaration order (background operands included)."""
        out: list[ColorValue] = []
        for f in fields(self):  # type: ignore[arg-type]
            v = getattr(self, f.name)
            if isinstance(v, tuple):
                out.extend(v)
            elif isinstance(v, _VALUE_TYPES):
                out.append(v)
        return tuple(out)


@dataclass(frozen=True)
class Darken(ColorTransform):
    kind: ClassVar[TransformKind] = TransformKind.DARKEN
    value: ColorValue
    factor: float


@dataclass(frozen=True)
class Lighten(ColorTransform):
    kind: ClassVar[TransformKind] = TransformKind.LIGHTEN
    value: ColorValue
    factor: float


@dataclass(frozen=True)
class Transparent(ColorTransform):
    kind: ClassVar[TransformKind] = TransformKind.TRANSPARENT
    value: ColorValue
    factor: float


@dataclass(frozen=True)
class Opaque(ColorTransform):
    kind: ClassVar[TransformKind] = TransformKind.OPAQUE
    value: ColorValue
    background: ColorValue


@dataclass(frozen=True)
class OneOf(ColorTransform):
    kind: ClassVar[TransformKind] = TransformKind.ONE_OF
    values: tuple[ColorValue, ...]


@dataclass(frozen=True)
class IfDefinedThenElse(ColorTransform):
    """`then` when `if_id` has a stored, non-null default; `else_` otherwise.

    The check is on registration, not on whether `if_id` resolves to a color.
    """

    kind: ClassVar[TransformKind] = TransformKind.IF_DEFINED_THEN_ELSE
    if_id: ColorIdentifier
    then: ColorValue
    else_: ColorValue


@dataclass(frozen=True)
class LessProminent(ColorTransform):
    kind: ClassVar[TransformKind] = TransformKind.LESS_PROMINENT
    value: ColorValue
    background: ColorValue
    factor: float
    transparency: float


ColorValue = Union[LiteralColor, ColorReference, ColorTransform, Unset]

_VALUE_TYPES = (LiteralColor, ColorReference, ColorTransform, Unset)


# ── Per-variant defaults ─────────────────────────────────────────────────────
@dataclass(frozen=True)
class PerVariantRecord:
    light: ColorValue = UNSET
    dark: ColorValue = UNSET
    hc_dark: ColorValue = UNSET
    hc_light: ColorValue = UNSET

    def select(self, variant: ThemeVariant) -> ColorValue:
        return {
            ThemeVariant.LIGHT: self.light,
            ThemeVariant.DARK: self.dark,
            ThemeVariant.HIGH_CONTRAST_DARK: self.hc_dark,
            ThemeVariant.HIGH_CONTRAST_LIGHT: self.hc_light,
        }[variant]

    def values(self) -> tuple[ColorValue, ...]:
        return (self.light, self.dark, self.hc_dark, self.hc_light)


TokenDefault = Union[ColorValue, PerVariantRecord]


def iter_references(value: TokenDefault) -> Iterator[ColorIdentifier]:
    """Yield every identifier a default mentions (references and if-defined checks)."""
    stack: list[TokenDefault] = [value]
    while stack:
        v = stack.pop()
        if isinstance(v, PerVariantRecord):
            stack.extend(reversed(v.values()))
        elif isinstance(v, ColorReference):
            yield v.id
        elif isinstance(v, ColorTransform):
            if isinstance(v, IfDefinedThenElse):
                yield v.if_id
            stack.extend(reversed(v.operands()))
