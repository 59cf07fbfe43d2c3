"""
luminance.py
============

Does: Compute perceptual luminance and contrast for sRGB triples (WCAG 2 formulas).
Used By: Color.is_darker_than / is_lighter_than, LessProminent direction choice,
         Color.get_contrast_ratio.
Returns: Relative luminance in [0, 1] and contrast ratios in [1, 21].
"""

from __future__ import annotations
from functools import lru_cache
from typing import Tuple

# Public surface
__all__ = [
    "RGB",
    "relative_luminance",
    "contrast_ratio",
    "srgb_to_linear",
]
__docformat__ = "google"

# ── Types ─────────────────────────────────────────────────────────────────────
RGB = Tuple[int, int, int]

# ── Tunables ─────────────────────────────────────────────────────────────────
# Rec. 709 primaries, as used by WCAG 2 relative luminance.
_WEIGHTS = (0.2126, 0.7152, 0.0722)


def _validate_rgb(rgb: RGB) -> None:
    r, g, b = rgb
    if not (0 <= r <= 255 and 0 <= g <= 255 and 0 <= b <= 255):
        raise ValueError(f"RGB out of bounds: {rgb}")


def srgb_to_linear(v: float) -> float:
    """Does: Convert one 0-255 sRGB channel to linear light in [0, 1]."""
    v = v / 255.0
    return v / 12.92 if v <= 0.03928 else ((v + 0.055) / 1.055) ** 2.4


@lru_cache(maxsize=4096)
def relative_luminance(rgb: RGB) -> float:
    """Does: Weighted sum of linearized channels (WCAG 2 relative luminance)."""
    _validate_rgb(rgb)
    r, g, b = (srgb_to_linear(float(c)) for c in rgb)
    wr, wg, wb = _WEIGHTS
    return wr * r + wg * g + wb * b


def contrast_ratio(rgb1: RGB, rgb2: RGB) -> float:
    """Does: WCAG contrast ratio between two colors, lighter over darker."""
    l1 = relative_luminance(rgb1)
    l2 = relative_luminance(rgb2)
    hi, lo = (l1, l2) if l1 >= l2 else (l2, l1)
    return (hi + 0.05) / (lo + 0.05)
