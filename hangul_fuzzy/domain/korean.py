from __future__ import annotations

"""Korean character classification (domain layer).

Pure predicates over a single character:
  - is_consonant / is_syllable / is_korean
  - has_final (syllable carries a trailing consonant)
  - is_similar (near-match used by the similarity engine)

Anything that is not exactly one character classifies as "other".
"""

from typing import Final

from hangul_fuzzy.domain.hangul_compose import (
    BASE_SYLLABLE_TO_CONSONANT,
    JAMO_FIRST,
    JAMO_LAST,
    N_COUNT,
    S_BASE,
    S_LAST,
    T_COUNT,
)


# Returned by leading_consonant_of() when the lookup table has no entry.
# Compares unequal to every real consonant.
NO_CONSONANT: Final[str] = "\x00"


def _code(c: str) -> int:
    if len(c) != 1:
        return -1
    return ord(c)


def is_consonant(c: str) -> bool:
    """True if `c` is in the compatibility jamo range U+3131..U+314E."""
    return JAMO_FIRST <= _code(c) <= JAMO_LAST


def is_syllable(c: str) -> bool:
    """True if `c` is a precomposed Hangul syllable (U+AC00..U+D7A3)."""
    return S_BASE <= _code(c) <= S_LAST


def is_korean(c: str) -> bool:
    return is_consonant(c) or is_syllable(c)


def has_final(c: str) -> bool:
    """True if `c` is a syllable with a trailing consonant (e.g. 강, not 가)."""
    if not is_syllable(c):
        return False
    return (ord(c) - S_BASE) % T_COUNT != 0


def strip_trailing_consonant(c: str) -> str:
    """Return `c` without its trailing consonant (강 -> 가); other input unchanged."""
    if not has_final(c):
        return c
    return chr((ord(c) - S_BASE) // T_COUNT * T_COUNT + S_BASE)


def leading_consonant_of(c: str) -> str:
    """Return the bare leading consonant of a syllable (강 -> ㄱ).

    Non-syllables are returned unchanged. If the syllable's group is missing
    from the consonant table, NO_CONSONANT is returned.
    """
    if not is_syllable(c):
        return c

    base = chr((ord(c) - S_BASE) // N_COUNT * N_COUNT + S_BASE)
    return BASE_SYLLABLE_TO_CONSONANT.get(base, NO_CONSONANT)


def is_similar(c1: str, c2: str) -> bool:
    """Check whether two Korean characters are near-matches.

    - identical characters are always similar
    - a bare consonant is similar to a syllable starting with it (ㄱ ~ 강)
    - two syllables are similar if they differ only in the final (가 ~ 강)

    Symmetric and reflexive, not transitive. Callers check is_korean() first
    when the distinction matters.
    """
    if c1 == c2:
        return True

    if is_consonant(c1) or is_consonant(c2):
        return leading_consonant_of(c1) == leading_consonant_of(c2)

    return strip_trailing_consonant(c1) == strip_trailing_consonant(c2)
