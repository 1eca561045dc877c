"""Typo correction against a dictionary of known catalog labels."""
from __future__ import annotations

import logging
from itertools import islice
from typing import Any, Iterable

from .config import DEFAULT_WEIGHTS, ScoringWeights
from .distance import bounded_levenshtein
from .haystack import as_text, get_field
from .models import CorrectionResult
from .text import normalize

logger = logging.getLogger(__name__)


def build_dictionary(categories: Iterable[Any] | None, items: Iterable[Any] | None) -> list[str]:
    """Normalized category names followed by item names, blanks dropped."""

    names = [as_text(get_field(category, "name")) for category in categories or ()]
    names.extend(as_text(get_field(item, "name")) for item in items or ())
    return [normalized for normalized in (normalize(name) for name in names) if normalized]


def correct(query: Any, dictionary: Iterable[Any], weights: ScoringWeights = DEFAULT_WEIGHTS) -> CorrectionResult:
    """Closest dictionary label to ``query`` within a small edit distance.

    Returns an empty result when the query is too short, already matches a
    label exactly, or nothing lies within the distance cap. Ties prefer the
    shorter label, then the earlier one.
    """

    normalized_query = normalize(query)
    if len(normalized_query) < weights.min_correction_length:
        return CorrectionResult()

    entries = [normalize(entry) for entry in dictionary or ()]
    if normalized_query in entries:
        return CorrectionResult()

    eligible = (entry for entry in entries if len(entry) >= weights.min_correction_length)
    candidates = list(islice(eligible, weights.correction_pool_size))
    if len(normalized_query) > weights.long_correction_length:
        limit = weights.long_correction_distance
    else:
        limit = weights.short_correction_distance

    best = ""
    best_distance = limit + 1
    for candidate in candidates:
        distance = bounded_levenshtein(normalized_query, candidate, limit)
        if distance > limit:
            continue
        if distance < best_distance or (distance == best_distance and len(candidate) < len(best)):
            best = candidate
            best_distance = distance

    logger.debug(
        "correct q=%r candidates=%s best=%r distance=%s",
        normalized_query,
        len(candidates),
        best,
        best_distance if best else None,
    )
    if not best:
        return CorrectionResult()
    return CorrectionResult(correctedQuery=best, isCorrected=True)
