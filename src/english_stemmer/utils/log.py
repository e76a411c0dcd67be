"""
log.py.

Does: Topic-filtered stderr tracing. STEMMER_DEBUG_TOPICS holds a comma-separated
      list of topics ("stemming", "vocabulary", "accuracy") or "all".
Returns: debug(), topic_enabled(), reload_topics().
Used by: stemming.stemmer ("stemming"), evaluation.vocabulary ("vocabulary"),
         evaluation.accuracy ("accuracy").
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["TOPICS", "debug", "reload_topics", "topic_enabled"]

TOPICS = ("stemming", "vocabulary", "accuracy")

_ENV_VAR = "STEMMER_DEBUG_TOPICS"


def _parse_topics(raw: str) -> frozenset[str]:
    return frozenset(t for t in (part.strip().lower() for part in raw.split(",")) if t)


_active: frozenset[str] = _parse_topics(os.getenv(_ENV_VAR, ""))


def reload_topics() -> frozenset[str]:
    """Does: Re-read STEMMER_DEBUG_TOPICS. Returns: the active topic set."""
    global _active
    _active = _parse_topics(os.getenv(_ENV_VAR, ""))
    return _active


def topic_enabled(topic: str) -> bool:
    """Does: Tell whether `topic` is switched on. Nothing is on while the variable is unset."""
    if not _active:
        return False
    return "all" in _active or topic.strip().lower() in _active


def debug(
    msg: str,
    topic: str = "stemming",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """
    Does: Write `[time] [topic][LEVEL] msg` when the topic is on. Time carries
          milliseconds so consecutive stems in one run stay distinguishable.
    """
    if not topic_enabled(topic):
        return
    ts = datetime.now().strftime("%H:%M:%S.%f")[:-3]
    print(f"[{ts}] [{topic.strip().lower()}][{level.upper()}] {msg}", file=stream or sys.stderr)
