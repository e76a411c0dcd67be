# src/english_stemmer/stemming/suffix.py
"""
suffix.py.

Does: Longest-suffix matching over a fixed candidate set.
Returns: order_suffixes(), find_longest_suffix(), strip_suffix().
Used by: every step of stemming.steps (tables are ordered once at import).
"""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["order_suffixes", "find_longest_suffix", "strip_suffix"]

__docformat__ = "google"


def order_suffixes(candidates: Iterable[str]) -> tuple[str, ...]:
    """
    Does: Deduplicate candidates and order them longest first, equal lengths
          lexicographically.
    Returns: tuple, safe to pass back as find_longest_suffix(..., ordered=True).
    """
    return tuple(sorted(set(candidates), key=lambda s: (-len(s), s)))


def find_longest_suffix(word: str, candidates: Iterable[str], *, ordered: bool = False) -> str:
    """
    Does: Test candidates from longest to shortest and stop at the first true
          suffix of word. Table order never matters unless `ordered=True`, in which
          case candidates must already come from order_suffixes().
    Returns: The matching suffix, or "" when none match.

    >>> find_longest_suffix("there's", ["'", "'s", "'s'"])
    "'s"
    """
    for suffix in candidates if ordered else order_suffixes(candidates):
        if suffix and word.endswith(suffix):
            return suffix
    return ""


def strip_suffix(word: str, suffix: str) -> str:
    """Does: Remove suffix from the end of word (no-op for ""). Returns: str."""
    return word[: len(word) - len(suffix)] if suffix else word
