# src/english_stemmer/stemming/steps.py
"""
steps.py.

Does: The eight ordered rewrite steps (0, 1a, 1b, 1c, 2, 3, 4, 5). Each is a pure
      str → str function; "no match" always returns the input unchanged.
Returns: step_0 … step_5, plus the ordered registries PRELUDE_STEPS and PIPELINE_STEPS.
Used by: stemming.stemmer.

Words reaching these functions are already consonant-Y marked ('Y'). Regions are
recomputed on the word each step receives.
"""

from __future__ import annotations

from typing import Callable, Mapping, Tuple

from .classify import CONSONANT_Y, contains_vowel, ends_in_short_syllable, is_vowel
from .regions import get_r1, get_r1_r2, in_region, is_short_word
from .suffix import find_longest_suffix, order_suffixes, strip_suffix

__all__ = [
    "StepFn",
    "step_0",
    "step_1a",
    "step_1b",
    "step_1c",
    "step_2",
    "step_3",
    "step_4",
    "step_5",
    "PRELUDE_STEPS",
    "PIPELINE_STEPS",
]

__docformat__ = "google"

StepFn = Callable[[str], str]

# ── Suffix tables ────────────────────────────────────────────────────────────
STEP_0_SUFFIXES: Tuple[str, ...] = ("'", "'s", "'s'")

STEP_1A_SUFFIXES: Tuple[str, ...] = ("sses", "ied", "ies", "s", "us", "ss")

STEP_1B_SUFFIXES: Tuple[str, ...] = ("eed", "eedly", "ed", "edly", "ing", "ingly")

DOUBLE_CONSONANTS: Tuple[str, ...] = ("bb", "dd", "ff", "gg", "mm", "nn", "pp", "rr", "tt")

# letters allowed before a deletable "li"
VALID_LI_ENDINGS: frozenset[str] = frozenset("cdeghkmnrt")

STEP_2_REPLACEMENTS: Mapping[str, str] = {
    "tional": "tion",
    "enci": "ence",
    "anci": "ance",
    "abli": "able",
    "entli": "ent",
    "izer": "ize",
    "ization": "ize",
    "ational": "ate",
    "ation": "ate",
    "ator": "ate",
    "alism": "al",
    "aliti": "al",
    "alli": "al",
    "fulness": "ful",
    "ousli": "ous",
    "ousness": "ous",
    "iveness": "ive",
    "iviti": "ive",
    "biliti": "ble",
    "bli": "ble",
    "ogi": "og",
    "fulli": "ful",
    "lessli": "less",
    "li": "",
}

STEP_3_REPLACEMENTS: Mapping[str, str] = {
    "tional": "tion",
    "ational": "ate",
    "alize": "al",
    "icate": "ic",
    "iciti": "ic",
    "ical": "ic",
    "ful": "",
    "ness": "",
    "ative": "",
}

STEP_4_SUFFIXES: Tuple[str, ...] = (
    "al", "ance", "ence", "er", "ic", "able", "ible", "ant", "ement",
    "ment", "ent", "ism", "ate", "iti", "ous", "ive", "ize",
)

# longest first, built once
_STEP_0_ORDER = order_suffixes(STEP_0_SUFFIXES)
_STEP_1A_ORDER = order_suffixes(STEP_1A_SUFFIXES)
_STEP_1B_ORDER = order_suffixes(STEP_1B_SUFFIXES)
_STEP_2_ORDER = order_suffixes(STEP_2_REPLACEMENTS)
_STEP_3_ORDER = order_suffixes(STEP_3_REPLACEMENTS)
_STEP_4_ORDER = order_suffixes(STEP_4_SUFFIXES)


# =============================================================================
# Step 0 / 1a: apostrophes and plurals
# =============================================================================

def step_0(word: str) -> str:
    """Does: Strip the longest of ', 's, 's'. Returns: str."""
    return strip_suffix(word, find_longest_suffix(word, _STEP_0_ORDER, ordered=True))


def step_1a(word: str) -> str:
    """
    Does: Plural endings.
          sses → ss; ied/ies → i (ie when one letter or less remains);
          s → deleted only if a vowel occurs before the letter preceding it;
          us/ss → untouched (they only shadow the bare s).
    Returns: str.
    """
    suffix = find_longest_suffix(word, _STEP_1A_ORDER, ordered=True)
    if suffix == "sses":
        return word[:-2]
    if suffix in ("ied", "ies"):
        base = word[:-3]
        return base + ("i" if len(base) > 1 else "ie")
    if suffix == "s":
        # gas, this: no vowel before the letter preceding the s
        return word[:-1] if contains_vowel(word[:-2]) else word
    return word


# =============================================================================
# Step 1b / 1c: verb endings and terminal y
# =============================================================================

def step_1b(word: str) -> str:
    """
    Does: eed/eedly → ee inside R1; ed/edly/ing/ingly deleted when the rest holds a
          vowel, then restore an e (at/bl/iz, short word) or undouble a final pair.
    Returns: str.
    """
    suffix = find_longest_suffix(word, _STEP_1B_ORDER, ordered=True)
    if not suffix:
        return word

    if suffix in ("eed", "eedly"):
        if in_region(suffix, get_r1(word)):
            return strip_suffix(word, suffix) + "ee"
        return word

    base = strip_suffix(word, suffix)
    if not contains_vowel(base):
        return word
    if base.endswith(("at", "bl", "iz")):
        return base + "e"
    if base.endswith(DOUBLE_CONSONANTS):
        return base[:-1]
    if is_short_word(base):
        return base + "e"
    return base


def step_1c(word: str) -> str:
    """Does: Final y/Y → i when preceded by a non-vowel that is not the first letter. Returns: str."""
    if len(word) > 2 and word[-1] in ("y", CONSONANT_Y) and not is_vowel(word[-2]):
        return word[:-1] + "i"
    return word


# =============================================================================
# Step 2 / 3: derivational suffixes inside R1
# =============================================================================

def step_2(word: str) -> str:
    """
    Does: Replace the longest table suffix when it lies in R1.
          ogi → og only after 'l'; li deleted only after a valid li-ending.
    Returns: str.
    """
    suffix = find_longest_suffix(word, _STEP_2_ORDER, ordered=True)
    if not suffix or not in_region(suffix, get_r1(word)):
        return word

    base = strip_suffix(word, suffix)
    if suffix == "ogi":
        return base + "og" if base.endswith("l") else word
    if suffix == "li":
        return base if base[-1:] in VALID_LI_ENDINGS else word
    return base + STEP_2_REPLACEMENTS[suffix]


def step_3(word: str) -> str:
    """Does: Replace the longest table suffix in R1; 'ative' must also lie in R2. Returns: str."""
    suffix = find_longest_suffix(word, _STEP_3_ORDER, ordered=True)
    if not suffix:
        return word

    r1, r2 = get_r1_r2(word)
    if not in_region(suffix, r1):
        return word
    if suffix == "ative" and not in_region(suffix, r2):
        return word
    return strip_suffix(word, suffix) + STEP_3_REPLACEMENTS[suffix]


# =============================================================================
# Step 4 / 5: residual suffixes and final cleanup inside R2
# =============================================================================

def step_4(word: str) -> str:
    """
    Does: Delete the longest residual suffix when it lies in R2. Otherwise delete an
          'ion' ending R2 when the letter before it is s or t.
    Returns: str.
    """
    _, r2 = get_r1_r2(word)
    suffix = find_longest_suffix(word, _STEP_4_ORDER, ordered=True)
    if suffix:
        return strip_suffix(word, suffix) if in_region(suffix, r2) else word

    if r2.endswith("ion") and word[-4:-3] in ("s", "t"):
        return word[:-3]
    return word


def step_5(word: str) -> str:
    """
    Does: Final e deleted in R2, or in R1 unless the remainder ends in a short
          syllable; final l deleted in R2 when doubled.
    Returns: str.
    """
    r1, r2 = get_r1_r2(word)
    if word.endswith("e"):
        if r2.endswith("e"):
            return word[:-1]
        if r1.endswith("e") and not ends_in_short_syllable(word[:-1]):
            return word[:-1]
        return word
    if word.endswith("l") and r2.endswith("l") and word[-2:-1] == "l":
        return word[:-1]
    return word


# ── Ordered registries ───────────────────────────────────────────────────────
# Before the mid-pipeline exception checkpoint
PRELUDE_STEPS: Tuple[Tuple[str, StepFn], ...] = (
    ("0", step_0),
    ("1a", step_1a),
)

# After the checkpoint, in fixed order
PIPELINE_STEPS: Tuple[Tuple[str, StepFn], ...] = (
    ("1b", step_1b),
    ("1c", step_1c),
    ("2", step_2),
    ("3", step_3),
    ("4", step_4),
    ("5", step_5),
)
