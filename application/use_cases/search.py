"""Use case that ranks FAQ entries by keyword relevance to a query."""
from __future__ import annotations

import logging
from typing import Iterable

from application.services.relevance import DEFAULT_WEIGHTS, ScoringWeights, score_entry, tokenize
from domain.entities import FaqCategory, ScoredEntry

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 2


def search(
    corpus: Iterable[FaqCategory],
    query: str,
    limit: int = DEFAULT_LIMIT,
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> list[ScoredEntry]:
    """Return at most ``limit`` entries of ``corpus`` that best match ``query``.

    Entries scoring zero are dropped. Equal scores keep corpus order
    (category order, then entry order within the category).
    """

    if not isinstance(query, str):
        raise TypeError(f"query must be a string, got {type(query).__name__}")
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise TypeError(f"limit must be an integer, got {type(limit).__name__}")
    categories = _as_categories(corpus)

    search_words = tokenize(query)
    if not search_words or limit <= 0:
        return []

    phrase = query.lower()
    candidates = 0
    results: list[ScoredEntry] = []
    for category in categories:
        for entry in category.entries:
            candidates += 1
            score = score_entry(entry, phrase, search_words, weights)
            if score <= 0:
                continue
            results.append(
                ScoredEntry(
                    entry=entry,
                    score=score,
                    category_id=category.id,
                    category_name=category.name,
                )
            )

    # sorted() is stable, so ties stay in traversal order.
    ranked = sorted(results, key=lambda result: result.score, reverse=True)[:limit]
    logger.debug(
        "Query %r matched %d of %d entries, returning %d",
        query,
        len(results),
        candidates,
        len(ranked),
    )
    return ranked


def _as_categories(corpus: Iterable[FaqCategory]) -> list[FaqCategory]:
    if isinstance(corpus, (str, bytes)):
        raise TypeError("corpus must be a sequence of FaqCategory, not a string")
    try:
        categories = list(corpus)
    except TypeError as exc:
        raise TypeError(f"corpus must be iterable, got {type(corpus).__name__}") from exc
    for category in categories:
        if not isinstance(category, FaqCategory):
            raise TypeError(f"corpus items must be FaqCategory, got {type(category).__name__}")
    return categories


__all__ = ["DEFAULT_LIMIT", "search"]
