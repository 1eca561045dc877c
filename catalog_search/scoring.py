"""Lexical relevance scoring of a tokenized query against an item haystack."""
from __future__ import annotations

import math
from typing import Any, Sequence

from .config import DEFAULT_WEIGHTS, ScoringWeights
from .distance import bounded_levenshtein
from .haystack import get_field


def token_distance_limit(token: str, weights: ScoringWeights = DEFAULT_WEIGHTS) -> int:
    if len(token) > weights.long_token_length:
        return weights.long_token_distance
    return weights.short_token_distance


def has_close_token(token: str, candidates: Sequence[str], max_distance: int) -> bool:
    return any(bounded_levenshtein(token, candidate, max_distance) <= max_distance for candidate in candidates)


def score_tokens(tokens: Sequence[str], haystack: str, weights: ScoringWeights = DEFAULT_WEIGHTS) -> float:
    """Sum of per-token substring, prefix and fuzzy matches.

    A token found anywhere in the haystack earns ``token_substring`` (plus
    ``token_prefix`` when the haystack starts with it). Otherwise tokens long
    enough to be fuzzy-matched earn ``token_fuzzy`` if some haystack word lies
    within the allowed edit distance.
    """

    if not tokens or not haystack:
        return 0
    haystack_tokens = haystack.split()
    joined = " ".join(haystack_tokens)

    score: float = 0
    for token in tokens:
        if token in joined:
            score += weights.token_substring
            if joined.startswith(token):
                score += weights.token_prefix
            continue
        if len(token) < weights.min_fuzzy_token_length:
            continue
        if has_close_token(token, haystack_tokens, token_distance_limit(token, weights)):
            score += weights.token_fuzzy
    return score


def _as_number(value: Any) -> float:
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) and number > 0 else 0.0


def quality_boost(item: Any, weights: ScoringWeights = DEFAULT_WEIGHTS) -> float:
    """Rating and review-volume boost added to items that already matched."""

    rating = _as_number(get_field(item, "rating"))
    reviews = _as_number(get_field(item, "reviewCount")) or _as_number(get_field(item, "reviewsCount"))
    boost = rating * weights.rating_multiplier
    if reviews > weights.review_threshold:
        boost += weights.review_bonus
    return boost
