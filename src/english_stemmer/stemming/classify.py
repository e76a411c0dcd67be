# src/english_stemmer/stemming/classify.py
"""
classify.py.

Does: Vowel/consonant classification for the stemming pipeline: the vowel predicate,
      consonant-Y marking (and its reversal), vowel presence and short-syllable tests.
Returns: is_vowel(), mark_consonant_y(), unmark_consonant_y(), contains_vowel(),
         ends_in_short_syllable().
Used by: stemming.regions, stemming.steps, stemming.stemmer.
"""

from __future__ import annotations

__all__ = [
    "VOWELS",
    "CONSONANT_Y",
    "is_vowel",
    "mark_consonant_y",
    "unmark_consonant_y",
    "contains_vowel",
    "ends_in_short_syllable",
]

__docformat__ = "google"

# ── Alphabet ─────────────────────────────────────────────────────────────────
VOWELS: frozenset[str] = frozenset("aeiouy")

# Internal mark for a 'y' acting as a consonant; never leaves the pipeline.
CONSONANT_Y = "Y"

# Final letters that never close a short syllable
_NOT_SHORT_ENDINGS = ("w", "x", CONSONANT_Y)


def is_vowel(ch: str) -> bool:
    """Does: True iff ch is one of a, e, i, o, u, y. The consonant mark 'Y' is not a vowel."""
    return ch in VOWELS


def mark_consonant_y(word: str) -> str:
    """
    Does: Rewrite every 'y' that starts the word or directly follows a vowel as 'Y'.
          Single left-to-right pass; the only state is whether the previous
          character was a vowel. A freshly marked 'Y' counts as a consonant.
    Returns: Marked word.

    >>> mark_consonant_y("stay")
    'staY'
    >>> mark_consonant_y("ayyyyy")
    'aYyYyY'
    """
    out: list[str] = []
    prev_is_vowel = False
    for i, ch in enumerate(word):
        if ch == "y" and (i == 0 or prev_is_vowel):
            out.append(CONSONANT_Y)
            prev_is_vowel = False
            continue
        out.append(ch)
        prev_is_vowel = is_vowel(ch)
    return "".join(out)


def unmark_consonant_y(word: str) -> str:
    """Does: Turn every consonant mark back into a plain 'y'. Returns: str."""
    return word.replace(CONSONANT_Y, "y")


def contains_vowel(text: str) -> bool:
    """Does: True if any character of text is a vowel. Returns: bool."""
    return any(is_vowel(ch) for ch in text)


def ends_in_short_syllable(word: str) -> bool:
    """
    Does: Detect a short syllable at the end of word:
          (a) non-vowel, vowel, non-vowel where the last letter is not w, x or Y, or
          (b) the whole word is a vowel followed by a non-vowel.
    Returns: bool.
    """
    if len(word) >= 3:
        c1, v, c2 = word[-3], word[-2], word[-1]
        return (
            not is_vowel(c1)
            and is_vowel(v)
            and not is_vowel(c2)
            and c2 not in _NOT_SHORT_ENDINGS
        )
    if len(word) == 2:
        return is_vowel(word[0]) and not is_vowel(word[1])
    return False
