"""Search-box suggestions: category names, product names and typo fixes."""
from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from .config import DEFAULT_WEIGHTS, ScoringWeights
from .correction import build_dictionary, correct
from .haystack import as_text, build_category_index, get_field, resolve_category_token
from .models import AutocompletePayload, CorrectionResult, SuggestionEntry
from .search import search
from .text import normalize

logger = logging.getLogger(__name__)


def _limit(value: Any) -> int:
    try:
        return max(int(value), 0)
    except (TypeError, ValueError):
        return 0


def unique_by_label(entries: Iterable[SuggestionEntry]) -> list[SuggestionEntry]:
    """Drop entries whose normalized label is blank or already seen."""

    seen: set[str] = set()
    unique = []
    for entry in entries:
        token = normalize(entry.label)
        if not token or token in seen:
            continue
        seen.add(token)
        unique.append(entry)
    return unique


def _category_suggestions(categories: Sequence[Any], normalized_query: str) -> list[SuggestionEntry]:
    suggestions = []
    for category in categories:
        name = as_text(get_field(category, "name"))
        if normalized_query not in normalize(name):
            continue
        token = normalize(
            as_text(get_field(category, "slug")) or as_text(get_field(category, "id")) or name
        )
        suggestions.append(SuggestionEntry(label=name, scopeToken=token))
    return suggestions


def autocomplete(
    query: Any = "",
    items: Sequence[Any] | None = None,
    categories: Sequence[Any] | None = None,
    scope_token: Any = "",
    query_limit: int = 6,
    product_limit: int = 5,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> AutocompletePayload:
    """Build the suggestion payload shown under the search box.

    Inactive items (``isActive`` explicitly false) are never suggested. When the
    query matches nothing, the closest category or product name is used as a
    corrected query and the suggestions are built from its results instead.
    """

    normalized_query = normalize(query)
    if not normalized_query:
        return AutocompletePayload()

    categories = list(categories or ())
    query_limit = _limit(query_limit)
    product_limit = _limit(product_limit)
    scope = normalize(scope_token)
    category_name_by_token = build_category_index(categories)
    pool = [item for item in items or () if get_field(item, "isActive") is not False]

    matched = search(
        pool,
        normalized_query,
        category_name_by_token=category_name_by_token,
        scope_token=scope,
        allow_fuzzy=True,
        weights=weights,
    )

    correction = CorrectionResult()
    if not matched:
        correction = correct(normalized_query, build_dictionary(categories, pool), weights)
        if correction.isCorrected and correction.correctedQuery:
            matched = search(
                pool,
                correction.correctedQuery,
                category_name_by_token=category_name_by_token,
                scope_token=scope,
                allow_fuzzy=True,
                weights=weights,
            )

    product_entries = [
        SuggestionEntry(label=as_text(get_field(item, "name")), scopeToken=resolve_category_token(item))
        for item in matched[:query_limit]
    ]
    suggested = unique_by_label(_category_suggestions(categories, normalized_query) + product_entries)

    logger.debug(
        "autocomplete q=%r scope=%r pool=%s matched=%s corrected=%r",
        normalized_query,
        scope,
        len(pool),
        len(matched),
        correction.correctedQuery,
    )
    return AutocompletePayload(
        suggestedQueries=suggested[:query_limit],
        productSuggestions=list(matched[:product_limit]),
        correctedQuery=correction.correctedQuery,
        hasCorrection=correction.isCorrected,
    )
