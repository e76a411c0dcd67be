# english_stemmer/stemming/__init__.py
"""
stemming.
========

Does: Provide the Porter2 stemming core: classification, regions, suffix matching,
      exception tables, the ordered steps and the stem() entry point.
Exports: stem, get_r1, get_r1_r2, region_tail, mark_consonant_y, is_vowel,
         find_longest_suffix
Used by: english_stemmer (package root), evaluation harness, demo CLI.
"""

from __future__ import annotations

from .classify import (
    is_vowel,
    mark_consonant_y,
    unmark_consonant_y,
)
from .regions import (
    get_r1,
    get_r1_r2,
    region_tail,
)
from .stemmer import stem
from .suffix import find_longest_suffix

__all__ = [
    # entry point
    "stem",
    # regions
    "get_r1",
    "get_r1_r2",
    "region_tail",
    # classification
    "is_vowel",
    "mark_consonant_y",
    "unmark_consonant_y",
    # suffixes
    "find_longest_suffix",
]
