"""Search configuration and scoring constants."""
from __future__ import annotations

import os
from dataclasses import dataclass


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value is not None else default


@dataclass(frozen=True)
class ScoringWeights:
    """Relevance weights and limits shared by search, correction and autocomplete."""

    direct_hit: float = 120
    token_substring: float = 30
    token_prefix: float = 10
    token_fuzzy: float = 12
    fuzzy_fallback: float = 24
    rating_multiplier: float = 2
    review_bonus: float = 3
    review_threshold: int = 10
    # Length gates and edit-distance caps.
    min_fuzzy_token_length: int = 3
    long_token_length: int = 5
    short_token_distance: int = 1
    long_token_distance: int = 2
    fallback_token_length: int = 4
    fallback_distance: int = 2
    min_correction_length: int = 3
    long_correction_length: int = 6
    short_correction_distance: int = 1
    long_correction_distance: int = 2
    correction_pool_size: int = 1200


DEFAULT_WEIGHTS = ScoringWeights()


@dataclass(frozen=True)
class Settings:
    """Terminal client settings with environment variable overrides."""

    catalog_path: str = _get_env("CATALOG_PATH", "data/catalog.json")
    log_level: str = _get_env("LOG_LEVEL", "INFO")
    query_limit: int = int(_get_env("QUERY_LIMIT", "6"))
    product_limit: int = int(_get_env("PRODUCT_LIMIT", "5"))
    max_results: int = int(_get_env("MAX_RESULTS", "20"))


settings = Settings()
