# theme_token_resolver/resolution/general/utils/__init__.py
"""

Does: Provide data-file loading and lightweight debug logging utilities for the resolution stack.
Returns: Public API via load_config/clear_config_cache and debug/reload_topics.
Used by: Seed loader, default theme tables, resolver tracing, CLI and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
    bundled_data_dir,
    resolve_data_dir,
    temp_data_dir,
)
from .log import (
    debug,
    reload_topics,
    set_topics,
    topic_enabled,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "resolve_data_dir",
    "bundled_data_dir",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "reload_topics",
    "set_topics",
    "topic_enabled",
]
