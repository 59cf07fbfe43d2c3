"""
utils package.
=============

Does: Provide perceptual helpers (relative luminance, contrast ratio) shared by
      the color primitive and the registry diagnostics.
"""

from .luminance import (
    RGB,
    contrast_ratio,
    relative_luminance,
    srgb_to_linear,
)

__all__ = [
    "RGB",
    "relative_luminance",
    "contrast_ratio",
    "srgb_to_linear",
]

__docformat__ = "google"
