# english_stemmer/utils/__init__.py
"""

Does: Provide the topic-filtered trace printer shared by the stemmer and the evaluation harness.
Returns: Public API via debug/reload_topics/topic_enabled and the TOPICS names.
Used by: stemming.stemmer, evaluation.vocabulary, evaluation.accuracy, tests.
"""

from __future__ import annotations

from .log import (
    TOPICS,
    debug,
    reload_topics,
    topic_enabled,
)

__all__ = [
    # Logging helpers
    "TOPICS",
    "debug",
    "reload_topics",
    "topic_enabled",
]
