from __future__ import annotations

from dataclasses import dataclass

from pricing_catalog.domain.entities.catalog_item import CatalogItem


@dataclass(frozen=True)
class CatalogResult:
    items: tuple[CatalogItem, ...] = ()
    error: str | None = None  # when set, items is always empty

    @property
    def ok(self) -> bool:
        return not self.error

    @classmethod
    def failure(cls, error: str) -> CatalogResult:
        return cls(items=(), error=error)
