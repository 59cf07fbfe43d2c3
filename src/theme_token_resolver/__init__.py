"""
theme_token_resolver
====================

Does: Root package for the theme token resolver: a registry of named UI color
      tokens whose defaults are literals, references or color transforms,
      resolved per theme variant into a flat `id -> #RRGGBBAA` map.
Returns: The stable public API re-exported from `resolution`.
Used by: Embedding applications and the `theme-resolve` CLI.
"""

from .resolution import *  # noqa: F401,F403
from .resolution import __all__ as _resolution_all

__all__: list[str] = list(_resolution_all)
__docformat__ = "google"
__version__ = "0.1.0"
