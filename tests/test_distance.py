"""Tests for the bounded Levenshtein distance."""

import itertools

import pytest

from catalog_search.distance import bounded_levenshtein


def _levenshtein(a: str, b: str) -> int:
    rows = [[i + j if i * j == 0 else 0 for j in range(len(b) + 1)] for i in range(len(a) + 1)]
    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            rows[i][j] = min(rows[i - 1][j] + 1, rows[i][j - 1] + 1, rows[i - 1][j - 1] + cost)
    return rows[len(a)][len(b)]


WORDS = ["", "a", "ab", "kitten", "sitting", "flaw", "lawn", "плед", "пледы", "плэдд", "постельное", "пастелное"]


def test_known_distances():
    assert bounded_levenshtein("kitten", "sitting", 3) == 3
    assert bounded_levenshtein("flaw", "lawn", 2) == 2
    assert bounded_levenshtein("плед", "плед", 0) == 0


def test_exceeding_bound_reports_more_than_bound():
    assert bounded_levenshtein("kitten", "sitting", 2) > 2


def test_length_difference_is_pruned():
    assert bounded_levenshtein("a", "abcd", 1) == 2


def test_empty_side_returns_other_length_clamped():
    assert bounded_levenshtein("", "abc", 5) == 3
    assert bounded_levenshtein("abc", "", 2) == 3


@pytest.mark.parametrize("limit", [0, 1, 2, 3])
def test_matches_full_levenshtein_within_bound(limit):
    for a, b in itertools.product(WORDS, repeat=2):
        true_distance = _levenshtein(a, b)
        result = bounded_levenshtein(a, b, limit)
        if true_distance <= limit:
            assert result == true_distance, (a, b)
            assert bounded_levenshtein(b, a, limit) == result
        else:
            assert result > limit, (a, b)
