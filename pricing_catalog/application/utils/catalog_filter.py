from __future__ import annotations

from typing import Sequence

from pricing_catalog.domain.entities.catalog_item import CatalogItem


def normalize_query(query: str | None) -> str:
    return (query or "").lower().strip()


def item_matches(item: CatalogItem, needle: str) -> bool:
    """True when the needle occurs in the item's service name, variant name or category."""
    fields = (item.service_name, item.variant_name, item.category)
    return any(needle in (field or "").lower() for field in fields)


def filter_catalog(items: Sequence[CatalogItem], query: str | None = None) -> list[CatalogItem]:
    """
    Case-insensitive substring filter over service name, variant name and category.
    An absent or empty query returns every item; source order is kept.
    """
    if not query:
        return list(items)
    needle = normalize_query(query)
    return [item for item in items if item_matches(item, needle)]
