"""
general.
=======

Shared general-purpose modules used across the resolution engine
(data-file loading and debug tracing live in `general.utils`).
"""

__all__: list[str] = []
