from __future__ import annotations

import logging

from pricing_catalog.application.ports.catalog_gateway import CatalogGatewayPort
from pricing_catalog.application.utils.catalog_filter import filter_catalog
from pricing_catalog.domain.entities.invocation_result import InvocationResult

NO_MATCH_MESSAGE = "No matching services found, showing all"
EMPTY_CATALOG_MESSAGE = "No services available"


class ShowPricingUseCase:
    """Fetch the catalog and narrow it to the services matching an optional query."""

    def __init__(self, gateway: CatalogGatewayPort) -> None:
        self._gateway = gateway
        self._logger = logging.getLogger(__name__)

    async def execute(self, query: str | None = None) -> InvocationResult:
        query = query or None
        result = await self._gateway.fetch()

        if result.error:
            self._logger.warning("Pricing invocation failed", extra={"query": query, "error": result.error})
            return InvocationResult(
                summary=f"Error fetching catalog: {result.error}. Please check the API configuration.",
                query=query,
                items=(),
                error=result.error,
            )

        catalog = result.items
        filtered = filter_catalog(catalog, query)

        if not catalog:
            # Nothing to fall back to, so the empty catalog is reported even when a query was given.
            return InvocationResult(
                summary=f"{_found(0, query)}. No services available in the catalog.",
                query=query,
                items=(),
                count=0,
                message=EMPTY_CATALOG_MESSAGE,
            )

        if not filtered:
            self._logger.info("Query matched no services", extra={"query": query, "item_count": len(catalog)})
            return InvocationResult(
                summary=(
                    f'No services found matching "{query}". '
                    f"Showing all {len(catalog)} available service(s)."
                ),
                query=query,
                items=tuple(catalog),
                count=len(catalog),
                message=NO_MATCH_MESSAGE,
            )

        self._logger.info("Pricing invocation served", extra={"query": query, "item_count": len(filtered)})
        return InvocationResult(
            summary=f"{_found(len(filtered), query)}.",
            query=query,
            items=tuple(filtered),
            count=len(filtered),
        )


def _found(count: int, query: str | None) -> str:
    text = f"Found {count} service(s)"
    if query:
        text += f' matching "{query}"'
    return text
