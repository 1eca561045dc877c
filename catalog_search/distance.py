"""Levenshtein distance with an upper bound and early termination."""
from __future__ import annotations


def bounded_levenshtein(a: str, b: str, max_distance: int) -> int:
    """Edit distance between ``a`` and ``b`` if it is at most ``max_distance``.

    Any result greater than ``max_distance`` only means "too far"; callers must
    compare against the bound instead of relying on the exact value.
    """

    a = a or ""
    b = b or ""
    if a == b:
        return 0
    if not a or not b:
        distance = max(len(a), len(b))
        return max_distance + 1 if distance > max_distance else distance
    if abs(len(a) - len(b)) > max_distance:
        return max_distance + 1

    previous = list(range(len(b) + 1))
    current = [0] * (len(b) + 1)

    for i in range(1, len(a) + 1):
        current[0] = i
        row_min = i
        char_a = a[i - 1]
        for j in range(1, len(b) + 1):
            cost = 0 if char_a == b[j - 1] else 1
            current[j] = min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost)
            if current[j] < row_min:
                row_min = current[j]
        # Later rows can never drop below this row's minimum.
        if row_min > max_distance:
            return max_distance + 1
        previous, current = current, previous

    return previous[len(b)]
