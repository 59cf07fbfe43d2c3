"""
model.py
========

Does: Define the immutable RGBA `Color` value type: hex parsing/serialization,
      HSL-space darken/lighten, alpha scaling, alpha compositing, luminance
      comparison and linear interpolation toward another color.
Used By: Token literals, transform evaluation in the resolver, diagnostics.
Returns: New `Color` instances; nothing here mutates.
"""

from __future__ import annotations

import colorsys
import math
import re
from dataclasses import dataclass

import webcolors

from .utils.luminance import contrast_ratio, relative_luminance

__all__ = [
    "Color",
    "InvalidColorError",
    "round_half_up",
]
__docformat__ = "google"

# ── Parsing ──────────────────────────────────────────────────────────────────
_HEX_RE = re.compile(r"#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})")

# Absorbs float noise such as 0.7 * 255 landing a hair under 178.5.
_ROUNDING_EPSILON = 1e-9


class InvalidColorError(ValueError):
    """Raise when a color literal or component cannot be turned into a Color."""


def round_half_up(value: float) -> int:
    """Does: Round to the nearest integer, ties going up (0.5 -> 1, 178.5 -> 179)."""
    return int(math.floor(value + 0.5 + _ROUNDING_EPSILON))


def _clamp01(value: float) -> float:
    return min(1.0, max(0.0, value))


def _to_byte(value: float) -> int:
    return min(255, max(0, round_half_up(value)))


@dataclass(frozen=True)
class Color:
    """An immutable sRGB color with a separate linear alpha channel.

    Red, green and blue are integers in [0, 255]; alpha is a float in [0, 1].
    Two colors are equal iff all four components are equal.
    """

    r: int
    g: int
    b: int
    a: float = 1.0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= 255:
                raise InvalidColorError(f"Channel {name}={v!r} must be an int in [0, 255]")
        if isinstance(self.a, bool) or not isinstance(self.a, (int, float)) or not 0 <= self.a <= 1:
            raise InvalidColorError(f"Alpha {self.a!r} must be a number in [0, 1]")
        object.__setattr__(self, "a", float(self.a))

    # ── Constructors ─────────────────────────────────────────────────────────
    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Parse `#RGB`, `#RGBA`, `#RRGGBB` or `#RRGGBBAA` (any case).

        Raises:
            InvalidColorError: if `value` is not one of those forms.
        """
        if not isinstance(value, str) or not _HEX_RE.fullmatch(value.strip()):
            raise InvalidColorError(f"Not a hex color literal: {value!r}")
        digits = value.strip()[1:]
        if len(digits) in (3, 4):
            digits = "".join(ch * 2 for ch in digits)
        r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
        a = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
        return cls(r, g, b, a)

    @classmethod
    def from_name(cls, name: str, alpha: float = 1.0) -> Color:
        """Build a color from a CSS3 color name ("white", "cornflowerblue", ...)."""
        try:
            rgb = webcolors.name_to_rgb(name.strip().lower())
        except ValueError as e:
            raise InvalidColorError(f"Unknown CSS color name: {name!r}") from e
        return cls(rgb.red, rgb.green, rgb.blue, alpha)

    @classmethod
    def from_hsla(cls, h: float, s: float, l: float, a: float = 1.0) -> Color:
        """Build a color from HSL components in [0, 1] (colorsys convention)."""
        r, g, b = colorsys.hls_to_rgb(h % 1.0, _clamp01(l), _clamp01(s))
        return cls(_to_byte(r * 255), _to_byte(g * 255), _to_byte(b * 255), _clamp01(a))

    # ── Views ────────────────────────────────────────────────────────────────
    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hsla(self) -> tuple[float, float, float, float]:
        """(hue, saturation, lightness, alpha), every component in [0, 1]."""
        h, l, s = colorsys.rgb_to_hls(self.r / 255, self.g / 255, self.b / 255)
        return (h, s, l, self.a)

    def is_opaque(self) -> bool:
        return self.a == 1.0

    def is_transparent(self) -> bool:
        return self.a == 0.0

    def to_hex(self) -> str:
        """Canonical `#RRGGBBAA` upper-case form; the alpha byte is rounded half up."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}{_to_byte(self.a * 255):02X}"

    def __str__(self) -> str:
        return self.to_hex()

    # ── Luminance ────────────────────────────────────────────────────────────
    def get_relative_luminance(self) -> float:
        return relative_luminance(self.rgb)

    def is_darker_than(self, other: Color) -> bool:
        return self.get_relative_luminance() < other.get_relative_luminance()

    def is_lighter_than(self, other: Color) -> bool:
        return self.get_relative_luminance() > other.get_relative_luminance()

    def get_contrast_ratio(self, other: Color) -> float:
        return contrast_ratio(self.rgb, other.rgb)

    # ── Arithmetic ───────────────────────────────────────────────────────────
    def _with_lightness(self, lightness: float) -> Color:
        h, s, _, a = self.hsla
        return Color.from_hsla(h, s, lightness, a)

    def darken(self, factor: float) -> Color:
        """Reduce HSL lightness proportionally: l -> l - l * factor."""
        factor = _clamp01(factor)
        _, _, l, _ = self.hsla
        return self._with_lightness(l - l * factor)

    def lighten(self, factor: float) -> Color:
        """Move HSL lightness toward white by `factor`: l -> l + (1 - l) * factor."""
        factor = _clamp01(factor)
        _, _, l, _ = self.hsla
        return self._with_lightness(l + (1.0 - l) * factor)

    def transparent(self, factor: float) -> Color:
        """Multiply alpha by `factor` (clamped to [0, 1]); RGB is untouched."""
        return Color(self.r, self.g, self.b, _clamp01(self.a * factor))

    def make_opaque(self, background: Color) -> Color:
        """Composite this color over an opaque `background`; the result is opaque.

        A background that is not fully opaque cannot guarantee an opaque
        result, so the color is returned unchanged, as for a missing one.
        """
        if self.is_opaque() or not background.is_opaque():
            return self
        a = self.a
        r, g, b = (
            _to_byte(c * a + bc * (1.0 - a)) for c, bc in zip(self.rgb, background.rgb)
        )
        return Color(r, g, b)

    def _mix_toward(self, target: Color, factor: float) -> Color:
        factor = _clamp01(factor)
        r, g, b = (
            _to_byte(c + (tc - c) * factor) for c, tc in zip(self.rgb, target.rgb)
        )
        return Color(r, g, b, self.a)

    @staticmethod
    def get_lighter_color(of: Color, relative: Color, factor: float = 0.5) -> Color:
        """Move `of` toward `relative` by `factor`, linearly in RGB.

        `of` is returned unchanged when it is already lighter than `relative`.
        """
        if of.is_lighter_than(relative):
            return of
        return of._mix_toward(relative, factor)

    @staticmethod
    def get_darker_color(of: Color, relative: Color, factor: float = 0.5) -> Color:
        """Move `of` toward `relative` by `factor`, linearly in RGB.

        `of` is returned unchanged when it is already darker than `relative`.
        """
        if of.is_darker_than(relative):
            return of
        return of._mix_toward(relative, factor)
