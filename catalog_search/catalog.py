"""Loading of JSON catalog files for the terminal client."""
from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from .models import Catalog

logger = logging.getLogger(__name__)


class CatalogError(RuntimeError):
    """Raised when a catalog file cannot be read or does not validate."""


def load_catalog(path: str | Path) -> Catalog:
    """Read ``{"categories": [...], "products": [...]}`` from ``path``.

    A bare JSON list is accepted as a product list without categories.
    """

    file_path = Path(path)
    if not file_path.exists():
        raise CatalogError(f"Catalog file not found: {file_path}")
    try:
        with file_path.open("r", encoding="utf-8") as fh:
            raw = json.load(fh)
    except (OSError, json.JSONDecodeError) as exc:
        raise CatalogError(f"Failed to read catalog {file_path}") from exc

    if isinstance(raw, list):
        raw = {"products": raw}
    try:
        catalog = Catalog.model_validate(raw)
    except ValidationError as exc:
        raise CatalogError(f"Invalid catalog {file_path}: {exc.error_count()} validation error(s)") from exc

    logger.info(
        "Loaded catalog %s categories=%s products=%s",
        file_path,
        len(catalog.categories),
        len(catalog.products),
    )
    return catalog
