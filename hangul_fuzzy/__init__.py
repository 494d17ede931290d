"""
Korean-aware fuzzy string matching.

Usage::

    import hangul_fuzzy
    hangul_fuzzy.distance("A학급", "B학급")        # 1.0
    hangul_fuzzy.matches("ㅎㄱ", "한글")            # 0.99
    hangul_fuzzy.rank("강남", ["서울시 강남구", "부산시 해운대구"])
"""

from .domain.korean import (  # noqa: F401
    has_final,
    is_consonant,
    is_korean,
    is_similar,
    is_syllable,
    leading_consonant_of,
    strip_trailing_consonant,
)
from .domain.similarity import KOREAN_SIMILARITY_PENALTY, distance, is_contained, matches  # noqa: F401
from .services.search import SearchHit, best_match, rank  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "distance",
    "matches",
    "is_contained",
    "KOREAN_SIMILARITY_PENALTY",
    "is_korean",
    "is_consonant",
    "is_syllable",
    "has_final",
    "is_similar",
    "strip_trailing_consonant",
    "leading_consonant_of",
    "rank",
    "best_match",
    "SearchHit",
]
