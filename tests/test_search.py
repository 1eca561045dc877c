"""Tests for ranked catalog search."""

from catalog_search.models import Product
from catalog_search.search import score_item, search, search_with_correction

CATALOG = [
    {"id": "p1", "name": "Комплект Cinque Terre", "category": "bed-linen"},
    {"id": "p2", "name": "Плед Fogliare", "category": "blankets", "rating": 4.8},
    {"id": "p3", "name": "Плед Onda", "categorySlug": "blankets", "rating": 4.2, "reviewCount": 30},
    {"id": "p4", "name": "Плед детский"},
    {"id": "p5", "name": "Плед для пикника", "category": "bed-linen"},
]


def _ids(items):
    return [item["id"] for item in items]


def test_empty_query_returns_items_unchanged():
    assert search(CATALOG, "") is CATALOG
    assert search(CATALOG, "  ?! ") is CATALOG


def test_direct_hit_scores_at_least_direct_weight():
    item = {"name": "Комплект Cinque Terre", "category": "bed-linen"}

    assert score_item(item, "cinque") >= 120
    assert search([item], "cinque") == [item]


def test_results_sorted_by_score_then_catalog_order():
    results = search(CATALOG, "плед")

    # Rating and review boosts break the lexical tie; unrated items keep catalog order.
    assert _ids(results) == ["p3", "p2", "p4", "p5"]


def test_scope_excludes_other_categories():
    results = search(CATALOG, "плед", scope_token="Bed-Linen")

    assert _ids(results) == ["p4", "p5"]
    assert all(item.get("category") in (None, "bed-linen") for item in results)


def test_category_display_name_is_searchable():
    results = search(CATALOG, "постельное", category_name_by_token={"bed-linen": "Постельное бельё"})

    assert _ids(results) == ["p1", "p5"]


def test_fuzzy_fallback_requires_allow_fuzzy():
    items = [{"name": "Плед"}]

    assert score_item(items[0], "плэдд") == 24
    assert search(items, "плэдд") == items
    assert search(items, "плэдд", allow_fuzzy=False) == []


def test_two_letter_query_gets_no_fuzzy_credit():
    items = [{"name": "xa"}]

    assert score_item(items[0], "xq") == 0
    assert search(items, "xq") == []


def test_quality_boost_does_not_rescue_non_matches():
    items = [{"name": "Полотенце", "rating": 5, "reviewCount": 100}]

    assert search(items, "диффузор") == []


def test_search_accepts_models_and_non_string_queries():
    product = Product(id="m1", name="Модель 42")

    assert search([product], 42) == [product]


def test_search_does_not_mutate_input():
    items = [dict(item) for item in CATALOG]

    search(items, "плед", scope_token="blankets")

    assert items == CATALOG


def test_search_with_correction_retries_with_dictionary_label():
    items = [{"id": "p1", "name": "Постельное белье Cozy", "category": "bed-linen"}]
    categories = [{"slug": "bed-linen", "name": "Постельное бельё"}]

    outcome = search_with_correction(items, "постельноебелье", categories=categories)

    assert outcome.items == items
    assert outcome.correctionApplied is True
    assert outcome.appliedQuery == "постельное белье"
    assert outcome.correctedQuery == "постельное белье"


def test_search_with_correction_direct_match():
    outcome = search_with_correction(CATALOG, "Fogliare")

    assert _ids(outcome.items) == ["p2"]
    assert outcome.appliedQuery == "fogliare"
    assert outcome.correctionApplied is False


def test_search_with_correction_empty_and_hopeless_queries():
    assert search_with_correction(CATALOG, "").items == CATALOG

    outcome = search_with_correction(CATALOG, "zzzzzz")
    assert outcome.items == []
    assert outcome.appliedQuery == "zzzzzz"
    assert outcome.correctionApplied is False
