from __future__ import annotations

from typing import Any

import pytest

from pricing_catalog.domain.entities.catalog_item import CatalogItem

from factories import make_entry


@pytest.fixture
def raw_catalog() -> list[dict[str, Any]]:
    return [
        make_entry(1, "USA Company Registration", "Delaware", "Company Incorporation"),
        make_entry(2, "USA Company Registration", "California", "Company Incorporation"),
        make_entry(3, "Trademark Filing", "Standard", "Intellectual Property", market_price=999),
        make_entry(7, "USA Company Registration", "New York", "Company Incorporation"),
    ]


@pytest.fixture
def catalog_items(raw_catalog: list[dict[str, Any]]) -> list[CatalogItem]:
    return [CatalogItem.from_payload(entry) for entry in raw_catalog]
