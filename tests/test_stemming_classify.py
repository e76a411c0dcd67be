# tests/test_stemming_classify.py
"""
Tests for stemming/classify.py

Does:
  - Vowel predicate (y is a vowel, the 'Y' mark is not).
  - Consonant-Y marking and its exact reversal.
  - Short-syllable detection (both definitions).
"""

from __future__ import annotations

import pytest

from english_stemmer.stemming.classify import (
    contains_vowel,
    ends_in_short_syllable,
    is_vowel,
    mark_consonant_y,
    unmark_consonant_y,
)


@pytest.mark.parametrize(
    "ch,expected",
    [("a", True), ("b", False), ("c", False), ("y", True), ("Y", False), ("u", True)],
)
def test_is_vowel(ch, expected):
    assert is_vowel(ch) is expected


@pytest.mark.parametrize(
    "word,marked",
    [
        ("yes", "Yes"),
        ("stay", "staY"),
        ("dyed", "dyed"),
        ("ydyed", "Ydyed"),
        ("ayyyyy", "aYyYyY"),
        ("enjoying", "enjoYing"),
        ("crying", "crying"),
        ("", ""),
    ],
)
def test_mark_consonant_y(word, marked):
    assert mark_consonant_y(word) == marked


@pytest.mark.parametrize("word", ["yes", "stay", "ayyyyy", "boyish", "rhythm"])
def test_unmark_reverts_marking(word):
    assert unmark_consonant_y(mark_consonant_y(word)) == word


def test_contains_vowel():
    assert contains_vowel("rhythm")  # y counts
    assert not contains_vowel("sch")
    assert not contains_vowel("Y")
    assert not contains_vowel("")


@pytest.mark.parametrize(
    "word,expected",
    [
        ("rap", True),
        ("hop", True),
        ("bed", True),
        ("entrap", True),
        ("ow", True),    # vowel + non-vowel at word start
        ("on", True),
        ("uproot", False),
        ("bestow", False),  # final w
        ("disturb", False),
        ("box", False),     # final x
        ("saY", False),     # final consonant-Y
        ("bead", False),
        ("a", False),
        ("", False),
    ],
)
def test_ends_in_short_syllable(word, expected):
    assert ends_in_short_syllable(word) is expected
