# src/english_stemmer/stemming/irregular.py
"""
irregular.py.

Does: Hold the two exact-match exception tables that override the generic rules.
Returns: PRE_PIPELINE_EXCEPTIONS, POST_STEP_1A_EXCEPTIONS (read-only mappings).
Used by: stemming.stemmer.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

__all__ = ["PRE_PIPELINE_EXCEPTIONS", "POST_STEP_1A_EXCEPTIONS"]

# ── Table 1: raw word → final stem, checked before any processing ────────────
PRE_PIPELINE_EXCEPTIONS: Mapping[str, str] = MappingProxyType({
    # irregular forms
    "skis": "ski",
    "skies": "sky",
    "dying": "die",
    "lying": "lie",
    "tying": "tie",
    "idly": "idl",
    "gently": "gentl",
    "ugly": "ugli",
    "early": "earli",
    "only": "onli",
    "singly": "singl",
    # invariants
    "sky": "sky",
    "news": "news",
    "howe": "howe",
    "atlas": "atlas",
    "cosmos": "cosmos",
    "bias": "bias",
    "andes": "andes",
    # pinned stems; canonical Porter2 gives agre and relat, so these no longer
    # share a stem with agree, relate or relations
    "agreed": "agree",
    "relational": "relate",
})

# ── Table 2: word after step 1a → stem, before step 1b can mis-stem it ───────
POST_STEP_1A_EXCEPTIONS: Mapping[str, str] = MappingProxyType({
    w: w
    for w in (
        "inning",
        "outing",
        "canning",
        "herring",
        "earring",
        "proceed",
        "exceed",
        "succeed",
    )
})
