"""Text normalization shared by indexing-time haystacks and user queries.

The pipeline is intentionally small:

    1) :func:`normalize` lowercases the text, folds ``ё`` into ``е``, replaces
       every run of characters that are not Unicode letters, digits, whitespace
       or hyphens with a single space, then collapses whitespace and trims.
    2) :func:`tokenize` splits the normalized string into words.

Both helpers accept anything (``None``, numbers, objects) and never raise, so
catalog records with odd field types can be fed in directly.
"""
from __future__ import annotations

import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

# ``\w`` covers Unicode letters and digits but also the underscore, which is
# punctuation for search purposes.
_NON_WORD_RE = re.compile(r"(?:[^\w\s-]|_)+")
_YO_TABLE = str.maketrans({"ё": "е"})


def normalize(text: Any = "") -> str:
    """Return the canonical search form of ``text``.

    ``normalize(normalize(x)) == normalize(x)`` holds for every input.
    """

    if text is None:
        return ""
    lowered = str(text).lower().translate(_YO_TABLE)
    cleaned = _NON_WORD_RE.sub(" ", lowered)
    return " ".join(cleaned.split())


def tokenize(text: Any = "") -> list[str]:
    normalized = normalize(text)
    if not normalized:
        return []
    return [token for token in normalized.split(" ") if token]
