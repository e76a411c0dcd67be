# tests/test_stemming_regions.py
"""
Tests for stemming/regions.py

Does:
  - R1/R2 on the reference examples (including null regions).
  - Special-prefix override for R1 only.
  - Region containment invariant: R2 ⊂ R1 ⊂ word (as tails).
  - Short-word test.
"""

from __future__ import annotations

import pytest

from english_stemmer import get_r1, get_r1_r2
from english_stemmer.stemming.regions import in_region, is_short_word, region_tail


@pytest.mark.parametrize(
    "word,r1,r2",
    [
        ("beautiful", "iful", "ul"),
        ("beauty", "y", ""),
        ("beau", "", ""),
        ("animadversion", "imadversion", "adversion"),
        ("sprinkled", "kled", ""),
        ("eucharist", "harist", "ist"),
        ("", "", ""),
    ],
)
def test_get_r1_r2(word, r1, r2):
    assert get_r1_r2(word) == (r1, r2)


@pytest.mark.parametrize(
    "word,r1",
    [
        ("generate", "ate"),
        ("generously", "ously"),
        ("communism", "ism"),
        ("arsenal", "al"),
        ("general", "al"),
    ],
)
def test_special_prefixes_override_r1(word, r1):
    assert get_r1(word) == r1


def test_generate_is_not_scanned_generically():
    # the generic scan would stop after the first "n"
    assert region_tail("generate") == "erate"
    assert get_r1("generate") == "ate"


def test_r2_never_gets_prefix_override():
    # R1 of "generation" is "ation"; R2 is the plain scan of that
    r1, r2 = get_r1_r2("generation")
    assert r1 == "ation"
    assert r2 == region_tail("ation") == "ion"


@pytest.mark.parametrize(
    "word",
    [
        "beautiful", "beauty", "beau", "animadversion", "sprinkled", "eucharist",
        "generically", "communication", "arsenic", "a", "rhythm", "queueing", "strengths",
    ],
)
def test_regions_are_nested_tails(word):
    r1, r2 = get_r1_r2(word)
    assert word.endswith(r1)
    assert r1.endswith(r2)
    assert len(r2) <= len(r1) <= len(word)


def test_in_region_compares_tail_lengths():
    assert in_region("ful", "eful")
    assert in_region("eful", "eful")
    assert not in_region("hopeful", "eful")
    assert in_region("", "")


@pytest.mark.parametrize(
    "word,expected",
    [
        ("bed", True),
        ("shed", True),
        ("shred", True),
        ("hop", True),
        ("bead", False),
        ("embed", False),
        ("beds", False),
    ],
)
def test_is_short_word(word, expected):
    assert is_short_word(word) is expected
