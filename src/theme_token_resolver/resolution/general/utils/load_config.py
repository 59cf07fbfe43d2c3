# src/theme_token_resolver/resolution/general/utils/load_config.py

"""
load_config.py
==============

Does: Read the JSON data files shipped with the package (seed tables, default
      theme colors) or supplied by a caller, from one `data/` directory.

      Directory lookup order: explicit `base_dir` > $THEME_TOKENS_DATA_DIR >
      $DATA_DIR > first `data/` found walking up from this file.
      `bundled_data_dir()` skips the environment; the bundled seed table and
      default themes are read from there unless a caller passes `base_dir`.

Modes:
  - "raw"             parsed JSON, whatever its shape
  - "validated_dict"  a JSON object, passed through an optional validator

Returns: Parsed data. Results without a validator are cached per
         (path, mtime, mode, encoding), so an edited file is re-read.
Used by: Seed loader, default theme colors, CLI override files, tests.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Literal, overload

# ── Public surface ────────────────────────────────────────────────────────────
Mode = Literal["raw", "validated_dict"]
Validator = Callable[[dict[str, Any]], dict[str, Any]]

__all__ = [
    "Mode",
    "Validator",
    "load_config",
    "resolve_data_dir",
    "bundled_data_dir",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """No usable data directory (nothing given, nothing in env, none discovered)."""


class ConfigFileNotFound(FileNotFoundError):
    """The data file is missing, unreadable, or outside the data directory."""


class ConfigParseError(ValueError):
    """The file is not valid JSON, or its validator rejected it."""


class ConfigTypeError(TypeError):
    """The JSON parsed fine but has the wrong top-level shape for the mode."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

_ENV_VARS = ("THEME_TOKENS_DATA_DIR", "DATA_DIR")
_SUFFIX = ".json"

_CacheKey = tuple[Path, float, str, str]
_cache: dict[_CacheKey, Any] = {}
_cache_lock = threading.RLock()


def clear_config_cache() -> None:
    """Forget every cached file (tests, hot reload)."""
    with _cache_lock:
        dropped = len(_cache)
        _cache.clear()
    log.debug("Config cache cleared (%d entries)", dropped)


# =============================================================================
# 1) DATA DIRECTORY
# =============================================================================
def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    here = (start or Path(__file__)).resolve()
    return [parent / "data" for parent in (here, *here.parents)]


def _default_data_dir(start: Path | None = None) -> Path:
    candidates = _candidate_data_dirs(start)
    found = next((c for c in candidates if c.is_dir()), None)
    if found is None:
        tried = "\n  ".join(str(c) for c in candidates)
        raise DataDirNotFound(f"No 'data' directory found. Tried:\n  {tried}")
    return found.resolve()


def _env_data_dir() -> Path | None:
    for var in _ENV_VARS:
        value = os.environ.get(var)
        if value:
            return Path(value).expanduser().resolve()
    return None


def bundled_data_dir() -> Path:
    """Does: Return the `data/` directory shipped with the package, ignoring the environment."""
    return _default_data_dir()


def resolve_data_dir(base_dir: str | os.PathLike[str] | None = None) -> Path:
    """Does: Return the directory data files are read from (see lookup order above)."""
    if base_dir is not None:
        return Path(base_dir).resolve()
    return _env_data_dir() or _default_data_dir()


def _file_in(data_dir: Path, file: str | os.PathLike[str]) -> Path:
    name = os.fspath(file)
    if not name.endswith(_SUFFIX):
        name += _SUFFIX
    path = (data_dir / name).resolve()
    if data_dir not in (path, *path.parents):
        raise ConfigFileNotFound(f"{name!r} resolves outside the data dir {data_dir}")
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")
    return path


# =============================================================================
# 2) READ & SHAPE
# =============================================================================
def _read_json(path: Path, encoding: str) -> Any:
    try:
        text = path.read_text(encoding=encoding)
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path.name} (line {e.lineno}): {e.msg}") from e


def _shape(data: Any, mode: str, path: Path, validator: Validator | None) -> Any:
    if mode == "raw":
        return data
    if mode != "validated_dict":
        raise ValueError(f"Unknown mode {mode!r}; expected 'raw' or 'validated_dict'")
    if not isinstance(data, dict):
        raise ConfigTypeError(
            f"{path.name}: mode 'validated_dict' needs a JSON object, got {type(data).__name__}"
        )
    if validator is None:
        return data
    try:
        return validator(data)
    except Exception as e:
        raise ConfigParseError(f"{path.name}: rejected by validator: {e}") from e


@overload
def load_config(
    file: str | os.PathLike[str],
    mode: Literal["raw"] = "raw",
    *,
    base_dir: str | os.PathLike[str] | None = None,
    encoding: str = "utf-8",
    validator: None = ...,
) -> Any: ...
@overload
def load_config(
    file: str | os.PathLike[str],
    mode: Literal["validated_dict"],
    *,
    base_dir: str | os.PathLike[str] | None = None,
    encoding: str = "utf-8",
    validator: Validator | None = ...,
) -> dict[str, Any]: ...


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: str | os.PathLike[str] | None = None,
    encoding: str = "utf-8",
    validator: Validator | None = None,
) -> Any:
    """Load `<data>/<file>.json` and shape it according to `mode`.

    Raises:
        DataDirNotFound: no data directory could be determined.
        ConfigFileNotFound: missing file, unreadable file, or path escaping the dir.
        ConfigParseError: invalid JSON, or `validator` raised.
        ConfigTypeError: `validated_dict` mode on something that is not an object.
    """
    path = _file_in(resolve_data_dir(base_dir), file)
    try:
        key: _CacheKey = (path, path.stat().st_mtime, mode, encoding)
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    # validated results are not cached
    if validator is None:
        with _cache_lock:
            if key in _cache:
                log.debug("Config cache hit: %s (%s)", path.name, mode)
                return _cache[key]

    result = _shape(_read_json(path, encoding), mode, path, validator)

    if validator is None:
        with _cache_lock:
            _cache[key] = result
    log.debug("Loaded %s (%s, cached=%s)", path.name, mode, validator is None)
    return result


# =============================================================================
# 3) TEST HELPER
# =============================================================================
@contextmanager
def temp_data_dir(path: str | os.PathLike[str]) -> Iterator[Path]:
    """Point $THEME_TOKENS_DATA_DIR at `path` for the duration of the block."""
    var = _ENV_VARS[0]
    previous = os.environ.get(var)
    os.environ[var] = os.fspath(path)
    clear_config_cache()
    try:
        yield Path(path)
    finally:
        if previous is None:
            os.environ.pop(var, None)
        else:
            os.environ[var] = previous
        clear_config_cache()
