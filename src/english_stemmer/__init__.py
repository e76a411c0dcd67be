"""
english_stemmer
===============

Does: Root package of the Porter2 (Snowball English) stemmer.
Returns: Re-exports stem(), get_r1() and get_r1_r2() from `english_stemmer.stemming`.
Used by: Indexing/search code that needs one stem per lowercase English word.
"""

from .stemming import get_r1, get_r1_r2, stem

__all__: list[str] = ["stem", "get_r1", "get_r1_r2"]
__docformat__ = "google"
