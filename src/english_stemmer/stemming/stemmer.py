# src/english_stemmer/stemming/stemmer.py
"""
stemmer.py.

Does: Entry point of the Porter2 (Snowball English) stemmer. Orchestrates the
      short-word bail-out, both exception tables, consonant-Y marking, the ordered
      steps and the final unmarking.
Returns: stem().
Used by: english_stemmer (package root), evaluation harness, demo CLI.

Input is expected to be a lowercase ASCII word; anything else is stemmed on a
best-effort basis and never raises.
"""

from __future__ import annotations

import logging

from english_stemmer.utils import debug as topic_debug
from english_stemmer.utils import topic_enabled

from .classify import mark_consonant_y, unmark_consonant_y
from .irregular import POST_STEP_1A_EXCEPTIONS, PRE_PIPELINE_EXCEPTIONS
from .steps import PIPELINE_STEPS, PRELUDE_STEPS, StepFn

log: logging.Logger = logging.getLogger(__name__)

__all__ = ["stem"]


def stem(word: str, *, debug: bool = False) -> str:
    """
    Does: Reduce one word to its stem.
          - len ≤ 2 → unchanged
          - table-1 hit → table value
          - strip one leading apostrophe, mark consonant y, steps 0 and 1a
          - table-2 hit → table value
          - steps 1b, 1c, 2, 3, 4, 5, then unmark
    Returns: Stem string.

    >>> stem("generously")
    'generous'
    """
    if len(word) <= 2:
        return word

    if word in PRE_PIPELINE_EXCEPTIONS:
        if debug:
            log.debug("[exception] %r → %r (before pipeline)", word, PRE_PIPELINE_EXCEPTIONS[word])
        return PRE_PIPELINE_EXCEPTIONS[word]

    current = word[1:] if word.startswith("'") else word
    current = mark_consonant_y(current)

    for name, step in PRELUDE_STEPS:
        current = _run_step(name, step, current, debug)

    plain = unmark_consonant_y(current)
    if plain in POST_STEP_1A_EXCEPTIONS:
        if debug:
            log.debug("[exception] %r → %r (after step 1a)", word, POST_STEP_1A_EXCEPTIONS[plain])
        return POST_STEP_1A_EXCEPTIONS[plain]

    for name, step in PIPELINE_STEPS:
        current = _run_step(name, step, current, debug)

    result = unmark_consonant_y(current)
    if debug:
        log.debug("[stem] %r → %r", word, result)
    if topic_enabled("stemming"):
        topic_debug(f"{word!r} → {result!r}", "stemming")
    return result


def _run_step(name: str, step: StepFn, current: str, debug: bool) -> str:
    out = step(current)
    if debug and out != current:
        log.debug("[step %s] %r → %r", name, current, out)
    return out
