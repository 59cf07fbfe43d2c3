"""
log.py.

Does: Opt-in trace lines for the resolution engine, one switch per topic
      ("resolver", "registry", "cli", ...). Topics come from THEME_DEBUG_TOPICS
      (comma-separated, or 'all') or from `set_topics` at runtime.
Returns: Writes `[timestamp] [topic][LEVEL] message` to stderr; silent when the
         topic is off. Regular `logging` records are unaffected.
"""

from __future__ import annotations

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "reload_topics", "set_topics", "topic_enabled"]

ENV_VAR = "THEME_DEBUG_TOPICS"
_ALL = "all"


def _normalize(topics: list[str] | tuple[str, ...]) -> frozenset[str]:
    return frozenset(t.strip().lower() for t in topics if t and t.strip())


_topics: frozenset[str] = _normalize(os.getenv(ENV_VAR, "").split(","))


def reload_topics() -> None:
    """Does: Re-read THEME_DEBUG_TOPICS (tests change it with monkeypatch)."""
    global _topics
    _topics = _normalize(os.getenv(ENV_VAR, "").split(","))


def set_topics(*topics: str) -> None:
    """Does: Replace the enabled topics without touching the environment."""
    global _topics
    _topics = _normalize(topics)


def topic_enabled(topic: str) -> bool:
    return _ALL in _topics or topic.strip().lower() in _topics


def debug(
    msg: str,
    topic: str = "resolution",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print `msg` under `topic` if that topic is enabled."""
    if not topic_enabled(topic):
        return
    stamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(
        f"[{stamp}] [{topic.strip().lower()}][{level.upper()}] {msg}",
        file=stream or sys.stderr,
    )
