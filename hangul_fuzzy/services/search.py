from __future__ import annotations

"""Rank candidate strings against a needle using matches()."""

import logging
from dataclasses import dataclass
from typing import Iterable

from hangul_fuzzy.domain.similarity import matches

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchHit:
    text: str
    score: float
    index: int  # position in the candidate sequence


def rank(
    needle: str,
    candidates: Iterable[str],
    *,
    case_sensitive: bool = False,
    min_score: float = 0.0,
    limit: int | None = None,
) -> list[SearchHit]:
    """Return candidates that fuzzily contain `needle`, best first.

    Only hits with a score above 0.0 and at least `min_score` are kept.
    Equal scores keep their input order. `limit=None` returns every hit.

    Raises:
        ValueError: if `min_score` is outside [0.0, 1.0].
    """
    if not 0.0 <= min_score <= 1.0:
        raise ValueError("min_score must be within [0.0, 1.0], got %r" % (min_score,))

    if limit is not None and limit <= 0:
        return []

    hits: list[SearchHit] = []
    for index, text in enumerate(candidates):
        score = matches(needle, text, case_sensitive)
        if score > 0.0 and score >= min_score:
            hits.append(SearchHit(text=text, score=score, index=index))

    hits.sort(key=lambda h: (-h.score, h.index))
    logger.debug("rank: %d hit(s) for %r", len(hits), needle)

    if limit is not None:
        return hits[:limit]
    return hits


def best_match(
    needle: str,
    candidates: Iterable[str],
    *,
    case_sensitive: bool = False,
    min_score: float = 0.0,
) -> SearchHit | None:
    """Return the highest scoring candidate, or None if nothing matches."""
    hits = rank(needle, candidates, case_sensitive=case_sensitive, min_score=min_score, limit=1)
    return hits[0] if hits else None
