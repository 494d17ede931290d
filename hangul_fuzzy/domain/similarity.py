from __future__ import annotations

"""Korean-aware string similarity (domain layer).

Primary API:
- distance(a, b, case_sensitive)   weighted Levenshtein distance
- matches(needle, haystack, case_sensitive)   fuzzy containment score in [0.0, 1.0]

Korean characters that are near-matches (see korean.is_similar) substitute for
KOREAN_SIMILARITY_PENALTY instead of a full edit, so distances are floats.
"""

import logging
from typing import Final

from hangul_fuzzy.domain.korean import has_final, is_consonant, is_korean, is_similar

logger = logging.getLogger(__name__)


# Cost of substituting one Korean character for a similar one.
# Must stay strictly between 0 (exact match) and 1 (full substitution).
KOREAN_SIMILARITY_PENALTY: Final[float] = 0.01


def _substitution_cost(a_char: str, b_char: str) -> float:
    if a_char == b_char:
        return 0.0
    if is_korean(a_char) and is_korean(b_char) and is_similar(a_char, b_char):
        return KOREAN_SIMILARITY_PENALTY
    return 1.0


def distance(a: str, b: str, case_sensitive: bool = False) -> float:
    """Calculate the Levenshtein distance between two strings.

    Single-row Wagner-Fischer: insert and delete cost 1, substitution costs
    0 / KOREAN_SIMILARITY_PENALTY / 1.

    If either string is empty the distance is the length of the other one.
    """
    if not a or not b:
        return float(max(len(a), len(b)))

    if not case_sensitive:
        a = a.lower()
        b = b.lower()

    column = [float(i) for i in range(len(a) + 1)]

    for b_idx, b_char in enumerate(b):
        column[0] = float(b_idx + 1)
        last_diag = float(b_idx)

        for a_idx, a_char in enumerate(a):
            old_diag = column[a_idx + 1]
            column[a_idx + 1] = min(
                column[a_idx + 1] + 1.0,
                column[a_idx] + 1.0,
                last_diag + _substitution_cost(a_char, b_char),
            )
            last_diag = old_diag

    return column[len(a)]


def _char_matches(n_char: str, h_char: str) -> bool:
    """Containment equality between one needle and one haystack character."""
    if not is_korean(n_char) or has_final(n_char):
        return h_char == n_char
    # A bare consonant in the haystack only stands for itself
    if is_consonant(h_char):
        return h_char == n_char
    return is_similar(h_char, n_char)


def is_contained(needle: str, haystack: str) -> bool:
    """Return True if every needle character occurs in the haystack, in order.

    Greedy leftmost scan: each needle character is searched for after the
    position of the previous match. Case is compared as given.
    """
    pos = 0
    for n_char in needle:
        for h_idx in range(pos, len(haystack)):
            if _char_matches(n_char, haystack[h_idx]):
                pos = h_idx + 1
                break
        else:
            logger.debug("matches: %r not found in %r after position %d", n_char, haystack, pos)
            return False
    return True


def matches(needle: str, haystack: str, case_sensitive: bool = False) -> float:
    """Score how well `needle` is fuzzily contained in `haystack`.

    Returns 0.0 when the needle is longer than the haystack or is not
    contained in it (see is_contained). Otherwise returns
    (len(haystack) - distance) / len(haystack), where the distance is always
    computed case-insensitively.

    1.0 only for an exact match; Korean near-matches score just below.
    """
    haystack_len = len(haystack)
    if len(needle) > haystack_len:
        logger.debug("matches: needle %r longer than haystack %r", needle, haystack)
        return 0.0

    n_str = needle if case_sensitive else needle.lower()
    h_str = haystack if case_sensitive else haystack.lower()

    if not is_contained(n_str, h_str):
        return 0.0

    if haystack_len == 0:
        return 0.0

    dist = distance(n_str, h_str, False)
    score = (haystack_len - dist) / haystack_len
    return min(1.0, max(0.0, score))
