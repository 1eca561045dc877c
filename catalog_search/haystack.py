"""Projection of heterogeneous catalog records into searchable text.

Catalog items arrive either as plain mappings decoded from JSON or as model
objects. Every field read goes through :func:`get_field`, and all of the
"which field wins" rules for categories and brands live here so that scoring
never has to probe record shapes itself.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Iterable

from .text import normalize

logger = logging.getLogger(__name__)

TEXT_FIELDS = ("name", "description", "material", "size", "color")
CATEGORY_TOKEN_FIELDS = ("categorySlug", "categoryId", "category_id")


def get_field(record: Any, name: str) -> Any:
    """Read ``name`` from a mapping or an attribute-bearing object."""

    if record is None:
        return None
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def as_text(value: Any) -> str:
    """Scalar field value as text; structured values and blanks become ``""``."""

    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def _first_text(values: Iterable[Any]) -> str:
    for value in values:
        text = as_text(value)
        if text:
            return text
    return ""


def raw_category_token(item: Any) -> str:
    """Category identifier of ``item`` before normalization.

    Precedence: a plain ``category`` string, ``categorySlug``, ``categoryId``,
    ``category_id``, then the nested category's ``slug`` and ``id``.
    """

    category = get_field(item, "category")
    return _first_text(
        [
            category,
            *(get_field(item, name) for name in CATEGORY_TOKEN_FIELDS),
            get_field(category, "slug") if not isinstance(category, str) else None,
            get_field(category, "id") if not isinstance(category, str) else None,
        ]
    )


def resolve_category_token(item: Any) -> str:
    return normalize(raw_category_token(item))


def _category_label(item: Any) -> str:
    category = get_field(item, "category")
    nested = get_field(category, "name") if not isinstance(category, str) else None
    return _first_text([get_field(item, "categoryName"), nested])


def brand_name(item: Any) -> str:
    brand = get_field(item, "brand")
    if isinstance(brand, str):
        return brand
    return as_text(get_field(brand, "name"))


def iter_variants(item: Any) -> list[Any]:
    variants = get_field(item, "variants")
    if isinstance(variants, (list, tuple)):
        return list(variants)
    return []


def lookup_category_name(token: str, category_name_by_token: Mapping[str, str] | None) -> str:
    if not token or not category_name_by_token:
        return ""
    name = category_name_by_token.get(token)
    if name is None:
        name = category_name_by_token.get(normalize(token))
    return as_text(name)


def build_haystack(item: Any, category_name_by_token: Mapping[str, str] | None = None) -> str:
    """Normalized text of every searchable field of ``item``."""

    parts = [as_text(get_field(item, name)) for name in TEXT_FIELDS]
    category_token = raw_category_token(item)
    parts.append(category_token)
    parts.append(_category_label(item))
    parts.append(brand_name(item))
    for variant in iter_variants(item):
        parts.append(as_text(get_field(variant, "name")))
        parts.append(as_text(get_field(variant, "sku")))
    parts.append(lookup_category_name(category_token, category_name_by_token))
    return normalize(" ".join(part for part in parts if part))


def build_category_index(categories: Iterable[Any] | None, include_aliases: bool = False) -> dict[str, str]:
    """Map normalized category tokens to display names.

    Each category is keyed by the first present of ``slug``, ``id`` and
    ``name``. With ``include_aliases`` the ``id`` and ``slug`` are also indexed
    separately so records referring to either identifier resolve.
    """

    index: dict[str, str] = {}
    for category in categories or ():
        slug = as_text(get_field(category, "slug"))
        identifier = as_text(get_field(category, "id"))
        name = as_text(get_field(category, "name"))
        token = normalize(slug or identifier or name)
        if not token:
            continue
        index[token] = name or token
        if include_aliases:
            for alias in (normalize(identifier), normalize(slug)):
                if alias:
                    index[alias] = name or token
    logger.debug("category index built tokens=%s", len(index))
    return index
