from __future__ import annotations

from abc import ABC, abstractmethod

from pricing_catalog.domain.entities.catalog_item import CatalogItem


class LocalCatalogPort(ABC):
    @abstractmethod
    async def fetch_catalog(self) -> list[CatalogItem]:
        """
        Fetch the catalog through the local retrieval endpoint.
        Raises LocalCatalogError when the endpoint reports a failure.
        """
        raise NotImplementedError
