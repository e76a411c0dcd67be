# src/english_stemmer/evaluation/accuracy.py
from __future__ import annotations

"""
accuracy.py

Does: Score a stemmer against a reference vocabulary of (word, expected stem) pairs,
      grading each mismatch by string similarity so near-misses stand out.
Returns: score_accuracy() → AccuracyReport, format_report() → str.
Used by: demo CLI (--vocab) and regression tests on the shipped sample vocabulary.
"""

import logging
from typing import Callable, Iterable, List, Tuple, TypedDict

from rapidfuzz import fuzz as rf_fuzz

from english_stemmer.stemming import stem
from english_stemmer.utils import debug as topic_debug

__all__ = [
    "Mismatch",
    "AccuracyReport",
    "score_accuracy",
    "near_misses",
    "format_report",
    "NEAR_MISS_THRESHOLD",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

# Similarity (0–100) at or above which a wrong stem counts as a near-miss
NEAR_MISS_THRESHOLD = 80.0


class Mismatch(TypedDict):
    word: str
    expected: str
    actual: str
    similarity: float


class AccuracyReport(TypedDict):
    total: int
    correct: int
    accuracy: float
    mismatches: List[Mismatch]


def score_accuracy(
    pairs: Iterable[Tuple[str, str]],
    *,
    stemmer: Callable[[str], str] = stem,
) -> AccuracyReport:
    """
    Does: Run stemmer on every word and compare with the expected stem literally.
    Returns: AccuracyReport; accuracy is a percentage (0.0 for an empty vocabulary).
    """
    total = 0
    correct = 0
    mismatches: List[Mismatch] = []

    for word, expected in pairs:
        total += 1
        actual = stemmer(word)
        if actual == expected:
            correct += 1
            continue
        similarity = float(rf_fuzz.ratio(actual, expected))
        mismatches.append(
            Mismatch(word=word, expected=expected, actual=actual, similarity=similarity)
        )
        topic_debug(f"{word}: expected {expected!r}, got {actual!r} ({similarity:.1f})", "accuracy")

    accuracy = 100.0 * correct / total if total else 0.0
    log.info("Accuracy %.2f%% (%d/%d, %d mismatches)", accuracy, correct, total, len(mismatches))
    return AccuracyReport(total=total, correct=correct, accuracy=accuracy, mismatches=mismatches)


def near_misses(report: AccuracyReport, threshold: float = NEAR_MISS_THRESHOLD) -> List[Mismatch]:
    """Does: Mismatches whose similarity reaches threshold. Returns: list, most similar first."""
    hits = [m for m in report["mismatches"] if m["similarity"] >= threshold]
    return sorted(hits, key=lambda m: (-m["similarity"], m["word"]))


def format_report(report: AccuracyReport, *, limit: int = 20) -> str:
    """
    Does: Render a plain-text summary line plus up to `limit` mismatches.
    Returns: Multi-line string.
    """
    lines = [
        f"Accuracy: {report['accuracy']:.2f}% "
        f"({report['correct']}/{report['total']} correct, "
        f"{len(report['mismatches'])} mismatches, "
        f"{len(near_misses(report))} near-misses)"
    ]
    for m in report["mismatches"][:limit]:
        lines.append(
            f"  {m['word']} -> {m['actual']} (expected {m['expected']}, similarity {m['similarity']:.1f})"
        )
    hidden = len(report["mismatches"]) - limit
    if hidden > 0:
        lines.append(f"  ... {hidden} more")
    return "\n".join(lines)
