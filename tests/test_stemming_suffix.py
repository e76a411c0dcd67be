# tests/test_stemming_suffix.py
"""Tests for stemming/suffix.py: longest-first matching, determinism, empty match."""

from __future__ import annotations

import pytest

from english_stemmer.stemming.suffix import find_longest_suffix, order_suffixes, strip_suffix


@pytest.mark.parametrize(
    "word,suffix,stripped",
    [
        ("there'", "'", "there"),
        ("there's", "'s", "there"),
        ("there's'", "'s'", "there"),
    ],
)
def test_find_longest_apostrophe_suffix(word, suffix, stripped):
    found = find_longest_suffix(word, ["'", "'s", "'s'"])
    assert found == suffix
    assert strip_suffix(word, found) == stripped


def test_table_order_does_not_matter():
    forward = ["s", "ss", "sses"]
    backward = list(reversed(forward))
    assert find_longest_suffix("caresses", forward) == "sses"
    assert find_longest_suffix("caresses", backward) == "sses"
    assert find_longest_suffix("caress", backward) == "ss"


def test_accepts_mapping_keys():
    table = {"ational": "ate", "tional": "tion", "al": ""}
    assert find_longest_suffix("relational", table) == "ational"
    assert find_longest_suffix("conditional", table) == "tional"


def test_no_match_returns_empty_string():
    assert find_longest_suffix("cat", ["dog", "s"]) == ""
    assert find_longest_suffix("", ["s"]) == ""
    assert find_longest_suffix("cats", []) == ""


def test_strip_empty_suffix_is_noop():
    assert strip_suffix("cat", "") == "cat"


@pytest.mark.parametrize(
    "candidates",
    [
        ["xb", "ab", "b", "ab"],
        ["b", "ab", "xb"],
        ("ab", "xb", "b"),
    ],
)
def test_equal_lengths_are_ordered_lexicographically(candidates):
    assert order_suffixes(candidates) == ("ab", "xb", "b")


@pytest.mark.parametrize(
    "word,expected",
    [("cab", "ab"), ("cxb", "xb"), ("cb", "b"), ("ca", "")],
)
def test_equal_length_candidates_match_in_any_order(word, expected):
    forward = ["ab", "xb", "b"]
    backward = list(reversed(forward))
    assert find_longest_suffix(word, forward) == expected
    assert find_longest_suffix(word, backward) == expected
    assert find_longest_suffix(word, order_suffixes(backward), ordered=True) == expected


def test_ordered_flag_trusts_caller_order():
    # caller-supplied order is used as is
    assert find_longest_suffix("caresses", ("s", "sses"), ordered=True) == "s"
    assert find_longest_suffix("caresses", ("s", "sses")) == "sses"
