# src/english_stemmer/stemming/regions.py
"""
regions.py.

Does: Compute the R1/R2 regions that restrict where suffix rules may fire, plus the
      containment and short-word tests built on them.
Returns: region_tail(), get_r1(), get_r1_r2(), in_region(), is_short_word().
Used by: stemming.steps (recomputed on the current word in every step) and callers
         that want to inspect regions directly.

Regions are plain string tails of the word. They are never cached: each step asks
again for the word it is currently holding.
"""

from __future__ import annotations

from .classify import ends_in_short_syllable, is_vowel

__all__ = [
    "SPECIAL_R1_PREFIXES",
    "region_tail",
    "get_r1",
    "get_r1_r2",
    "in_region",
    "is_short_word",
]

__docformat__ = "google"

# Words starting with these get R1 = everything after the prefix
# (generous/general, communal/community, arsenic/arsenal).
SPECIAL_R1_PREFIXES: tuple[str, ...] = ("gener", "commun", "arsen")


def region_tail(word: str) -> str:
    """
    Does: Scan for the first vowel, then for the first non-vowel after it.
    Returns: The text following that non-vowel, or "" (null region at the end
             of the word) when either scan runs off the end.

    >>> region_tail("beautiful")
    'iful'
    >>> region_tail("beau")
    ''
    """
    seen_vowel = False
    for i, ch in enumerate(word):
        if not seen_vowel:
            seen_vowel = is_vowel(ch)
        elif not is_vowel(ch):
            return word[i + 1:]
    return ""


def get_r1(word: str) -> str:
    """Does: R1 with the special-prefix override applied first. Returns: str."""
    for prefix in SPECIAL_R1_PREFIXES:
        if word.startswith(prefix):
            return word[len(prefix):]
    return region_tail(word)


def get_r1_r2(word: str) -> tuple[str, str]:
    """
    Does: Compute R1 (prefix-aware) and R2 = region_tail(R1). R2 never gets the
          prefix override.
    Returns: (r1, r2).
    """
    r1 = get_r1(word)
    return r1, region_tail(r1)


def in_region(suffix: str, region: str) -> bool:
    """
    Does: Tell whether a suffix matched on a word lies entirely inside a region of
          that same word. Both are tails of the word, so length decides.
    Returns: bool.
    """
    return len(suffix) <= len(region)


def is_short_word(word: str) -> bool:
    """Does: Short word = ends in a short syllable and has an empty R1. Returns: bool."""
    return ends_in_short_syllable(word) and get_r1(word) == ""
