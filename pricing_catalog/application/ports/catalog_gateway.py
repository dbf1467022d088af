from __future__ import annotations

from abc import ABC, abstractmethod

from pricing_catalog.domain.entities.catalog_result import CatalogResult


class CatalogGatewayPort(ABC):
    @abstractmethod
    async def fetch(self) -> CatalogResult:
        """Fetch the full catalog. Failures are reported in CatalogResult.error, never raised."""
        raise NotImplementedError
