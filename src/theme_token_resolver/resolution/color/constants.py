"""
constants
=========

Does: Named colors reused across seed tables (white, black, transparent, ...),
      built from the CSS3 vocabulary shipped by `webcolors`.
Used By: Python-side seed code, `color_guard`, compositing fallbacks.
Returns: Immutable `Color` instances.
"""

from __future__ import annotations

from .model import Color

__all__ = [
    "WHITE",
    "BLACK",
    "RED",
    "BLUE",
    "GREEN",
    "CYAN",
    "LIGHTGREY",
    "TRANSPARENT",
]

WHITE = Color.from_name("white")
BLACK = Color.from_name("black")
RED = Color.from_name("red")
BLUE = Color.from_name("blue")
GREEN = Color.from_name("lime")  # CSS "green" is #008000; pure green is "lime"
CYAN = Color.from_name("cyan")
LIGHTGREY = Color.from_name("lightgrey")
TRANSPARENT = Color(0, 0, 0, 0.0)
