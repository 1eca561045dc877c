"""Pydantic models for catalog records and engine results."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Variant(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str | None = None
    sku: str | None = None


class Brand(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str | None = None


class CategoryRef(BaseModel):
    model_config = ConfigDict(extra="allow")

    slug: str | None = None
    id: str | int | None = None
    name: str | None = None


class Category(BaseModel):
    model_config = ConfigDict(extra="allow")

    slug: str | None = None
    id: str | int | None = None
    name: str | None = None
    parentId: str | int | None = None


class Product(BaseModel):
    """Searchable catalog item. Unknown storefront fields are kept as extras."""

    model_config = ConfigDict(extra="allow")

    id: str | int | None = None
    name: str | None = None
    description: str | None = None
    material: str | None = None
    size: str | int | float | None = None
    color: str | None = None
    category: str | CategoryRef | None = None
    categoryName: str | None = None
    categorySlug: str | None = None
    categoryId: str | int | None = None
    category_id: str | int | None = None
    brand: str | Brand | None = None
    rating: float | None = None
    reviewCount: int | None = None
    reviewsCount: int | None = None
    variants: list[Variant] = Field(default_factory=list)
    isActive: bool | None = None


class Catalog(BaseModel):
    categories: list[Category] = Field(default_factory=list)
    products: list[Product] = Field(default_factory=list)


class CorrectionResult(BaseModel):
    correctedQuery: str = ""
    isCorrected: bool = False


class SuggestionEntry(BaseModel):
    label: str
    scopeToken: str = ""


class AutocompletePayload(BaseModel):
    suggestedQueries: list[SuggestionEntry] = Field(default_factory=list)
    productSuggestions: list[Any] = Field(default_factory=list)
    correctedQuery: str = ""
    hasCorrection: bool = False


class SearchOutcome(BaseModel):
    """Ranked items plus the query that produced them after any correction."""

    items: list[Any] = Field(default_factory=list)
    appliedQuery: str = ""
    correctionApplied: bool = False
    correctedQuery: str = ""
