# english_stemmer/evaluation/__init__.py
"""
evaluation.
==========

Does: Score the stemmer against reference vocabularies and cross-check it with NLTK.
Exports: load_vocabulary, parse_vocabulary, clear_vocabulary_cache, temp_data_dir,
         score_accuracy, near_misses, format_report, reference_stem, compare_with_reference,
         plus the vocabulary exception types.
Used by: demo CLI and regression tests.
"""

from __future__ import annotations

from .accuracy import (
    AccuracyReport,
    Mismatch,
    format_report,
    near_misses,
    score_accuracy,
)
from .reference import (
    compare_with_reference,
    reference_stem,
)
from .vocabulary import (
    DataDirNotFound,
    VocabularyFileNotFound,
    VocabularyParseError,
    clear_vocabulary_cache,
    load_vocabulary,
    parse_vocabulary,
    temp_data_dir,
)

__all__ = [
    # vocabulary loading
    "load_vocabulary",
    "parse_vocabulary",
    "clear_vocabulary_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "VocabularyFileNotFound",
    "VocabularyParseError",
    # scoring
    "AccuracyReport",
    "Mismatch",
    "score_accuracy",
    "near_misses",
    "format_report",
    # reference cross-check
    "reference_stem",
    "compare_with_reference",
]
