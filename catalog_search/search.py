"""In-memory catalog search with fuzzy matching and category scoping."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Iterable, Sequence

from .config import DEFAULT_WEIGHTS, ScoringWeights
from .correction import build_dictionary, correct
from .haystack import build_category_index, build_haystack, resolve_category_token
from .models import SearchOutcome
from .scoring import has_close_token, quality_boost, score_tokens
from .text import normalize, tokenize

logger = logging.getLogger(__name__)


def _fallback_hit(tokens: Sequence[str], haystack: str, weights: ScoringWeights) -> bool:
    haystack_tokens = haystack.split(" ")
    return any(
        has_close_token(token, haystack_tokens, weights.fallback_distance)
        for token in tokens
        if len(token) >= weights.fallback_token_length
    )


def _score_item(
    item: Any,
    normalized_query: str,
    tokens: Sequence[str],
    category_name_by_token: Mapping[str, str] | None,
    scope_token: str,
    allow_fuzzy: bool,
    weights: ScoringWeights,
) -> float:
    haystack = build_haystack(item, category_name_by_token)
    if not haystack:
        return 0
    category_token = resolve_category_token(item)
    if scope_token and category_token and category_token != scope_token:
        return 0

    score = weights.direct_hit if normalized_query in haystack else 0
    score += score_tokens(tokens, haystack, weights)
    if not score and allow_fuzzy and _fallback_hit(tokens, haystack, weights):
        score += weights.fuzzy_fallback
    if not score:
        return 0
    return score + quality_boost(item, weights)


def score_item(
    item: Any,
    query: Any,
    *,
    category_name_by_token: Mapping[str, str] | None = None,
    scope_token: Any = "",
    allow_fuzzy: bool = True,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> float:
    """Relevance of a single item; 0 means the item is not a match."""

    normalized_query = normalize(query)
    if not normalized_query:
        return 0
    return _score_item(
        item,
        normalized_query,
        tokenize(normalized_query),
        category_name_by_token,
        normalize(scope_token),
        allow_fuzzy,
        weights,
    )


def search(
    items: Sequence[Any],
    query: Any,
    *,
    category_name_by_token: Mapping[str, str] | None = None,
    scope_token: Any = "",
    allow_fuzzy: bool = True,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> Sequence[Any]:
    """Rank ``items`` against ``query``, best match first.

    An empty query means "show everything": ``items`` is returned untouched.
    Otherwise items that do not match are dropped and the rest are ordered by
    descending score, keeping catalog order between equal scores.
    """

    normalized_query = normalize(query)
    if not normalized_query:
        return items

    tokens = tokenize(normalized_query)
    scope = normalize(scope_token)
    scored = []
    candidates = 0
    for item in items or ():
        candidates += 1
        score = _score_item(item, normalized_query, tokens, category_name_by_token, scope, allow_fuzzy, weights)
        if score > 0:
            scored.append((score, item))
    scored.sort(key=lambda entry: entry[0], reverse=True)

    logger.debug(
        "search q=%r scope=%r fuzzy=%s candidates=%s hits=%s",
        normalized_query,
        scope,
        allow_fuzzy,
        candidates,
        len(scored),
    )
    return [item for _, item in scored]


def search_with_correction(
    items: Sequence[Any],
    query: Any,
    *,
    categories: Iterable[Any] | None = None,
    scope_token: Any = "",
    allow_fuzzy: bool = True,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> SearchOutcome:
    """Search, and retry with a typo correction when nothing matched.

    The dictionary for the correction is built from category names and item
    names. ``correctionApplied`` is only set when the corrected query actually
    returned items.
    """

    categories = list(categories or ())
    normalized_query = normalize(query)
    if not normalized_query:
        return SearchOutcome(items=list(items or ()))

    category_name_by_token = build_category_index(categories, include_aliases=True)
    direct = search(
        items,
        normalized_query,
        category_name_by_token=category_name_by_token,
        scope_token=scope_token,
        allow_fuzzy=allow_fuzzy,
        weights=weights,
    )
    if direct:
        return SearchOutcome(items=direct, appliedQuery=normalized_query)

    correction = correct(normalized_query, build_dictionary(categories, items), weights)
    if not correction.isCorrected:
        return SearchOutcome(items=direct, appliedQuery=normalized_query)

    corrected = search(
        items,
        correction.correctedQuery,
        category_name_by_token=category_name_by_token,
        scope_token=scope_token,
        allow_fuzzy=allow_fuzzy,
        weights=weights,
    )
    logger.debug("search corrected q=%r -> %r hits=%s", normalized_query, correction.correctedQuery, len(corrected))
    return SearchOutcome(
        items=corrected,
        appliedQuery=correction.correctedQuery,
        correctionApplied=bool(corrected),
        correctedQuery=correction.correctedQuery,
    )
