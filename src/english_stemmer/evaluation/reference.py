"""
reference.py

Does: Cross-check our stems against NLTK's Snowball English stemmer.
Returns: reference_stem() → str, compare_with_reference() → list of disagreements.
Used by: demo CLI (--compare-reference) and exploratory checks on new vocabularies.
"""

from functools import lru_cache
from typing import Callable, Iterable, List, Tuple

from nltk.stem.snowball import SnowballStemmer

from english_stemmer.stemming import stem

__all__ = ["reference_stem", "compare_with_reference"]


@lru_cache(maxsize=1)
def _reference_stemmer() -> SnowballStemmer:
    """Does: Build the NLTK stemmer once (no corpus download needed). Returns: SnowballStemmer."""
    return SnowballStemmer("english")


def reference_stem(word: str) -> str:
    """Does: Stem word with NLTK's Snowball English implementation. Returns: str."""
    return _reference_stemmer().stem(word)


def compare_with_reference(
    words: Iterable[str],
    *,
    stemmer: Callable[[str], str] = stem,
    reference: Callable[[str], str] = reference_stem,
) -> List[Tuple[str, str, str]]:
    """
    Does: Stem each distinct word with both stemmers, in first-seen order.
    Returns: [(word, ours, reference)] for every word where they disagree.
    """
    seen: set[str] = set()
    diffs: List[Tuple[str, str, str]] = []
    for word in words:
        if word in seen:
            continue
        seen.add(word)
        ours, theirs = stemmer(word), reference(word)
        if ours != theirs:
            diffs.append((word, ours, theirs))
    return diffs
