from __future__ import annotations

import logging
from typing import Any

import httpx

from pricing_catalog.application.exceptions import CatalogConfigurationError, CatalogUpstreamError
from pricing_catalog.application.ports.catalog_gateway import CatalogGatewayPort
from pricing_catalog.core.config import settings
from pricing_catalog.domain.entities.catalog_item import CatalogItem
from pricing_catalog.domain.entities.catalog_result import CatalogResult

MISSING_KEY_ERROR = "API key not configured. Please set CATALOG_API_KEY environment variable."
GENERIC_FETCH_ERROR = "Failed to fetch catalog data"


class HttpCatalogGateway(CatalogGatewayPort):
    """
    Catalog source adapter over httpx.

    Contract guarantees:
    - fetch never raises; failures come back as CatalogResult.error
    - a missing credential is reported before any request is made
    - one attempt per call, a fresh client per call (safe for concurrent callers)
    """

    def __init__(
        self,
        api_url: str | None = None,
        api_key: str | None = None,
        payload: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_url = api_url or settings.CATALOG_API_URL
        self._api_key = api_key if api_key is not None else settings.CATALOG_API_KEY
        self._payload = payload or {
            "operation": settings.CATALOG_OPERATION,
            "catalog_id": settings.CATALOG_ID,
            "type": settings.CATALOG_TYPE,
        }
        self._transport = transport
        self._logger = logging.getLogger(__name__)

    async def fetch(self) -> CatalogResult:
        try:
            data = await self._request()
            entries = normalize_catalog_payload(data)
            items = tuple(CatalogItem.from_payload(entry) for entry in entries if isinstance(entry, dict))
        except CatalogConfigurationError as e:
            self._logger.warning("Catalog fetch skipped", extra={"error": str(e)})
            return CatalogResult.failure(str(e))
        except CatalogUpstreamError as e:
            self._logger.error("Catalog fetch failed", extra={"error": str(e)})
            return CatalogResult.failure(str(e))
        except Exception as e:
            self._logger.exception("Catalog fetch failed", extra={"error": str(e)})
            return CatalogResult.failure(str(e) or GENERIC_FETCH_ERROR)

        if len(items) != len(entries):
            self._logger.warning(
                "Skipped malformed catalog entries", extra={"item_count": len(entries) - len(items)}
            )
        self._logger.info("Catalog fetched", extra={"item_count": len(items)})
        return CatalogResult(items=items)

    async def _request(self) -> Any:
        if not self._api_key or not self._api_key.strip():
            raise CatalogConfigurationError(MISSING_KEY_ERROR)

        headers = {"x-api-key": self._api_key, "Content-Type": "application/json"}
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(self._api_url, json=self._payload, headers=headers)
        except httpx.HTTPError as e:
            raise CatalogUpstreamError(str(e) or GENERIC_FETCH_ERROR) from e

        if not response.is_success:
            raise CatalogUpstreamError(
                f"Failed to fetch catalog: {response.status_code} {response.reason_phrase}".rstrip()
            )

        try:
            return response.json()
        except ValueError as e:
            raise CatalogUpstreamError(str(e) or GENERIC_FETCH_ERROR) from e


def normalize_catalog_payload(data: Any) -> list[Any]:
    """
    Accept a bare array, {"catalog": [...]} or {"data": [...]}, checked in that order.
    Any other shape is treated as an empty catalog.
    """
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        if isinstance(data.get("catalog"), list):
            return data["catalog"]
        if isinstance(data.get("data"), list):
            return data["data"]
    return []
