from __future__ import annotations

import logging

import httpx

from pricing_catalog.application.exceptions import LocalCatalogError
from pricing_catalog.application.ports.local_catalog import LocalCatalogPort
from pricing_catalog.domain.entities.catalog_item import CatalogItem

LOCAL_CATALOG_PATH = "/api/catalog"


class LocalCatalogClient(LocalCatalogPort):
    """Calls the service's own POST /api/catalog endpoint, used by the surface as a fallback source."""

    def __init__(self, base_url: str = "", transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._url = f"{base_url.rstrip('/')}{LOCAL_CATALOG_PATH}"
        self._transport = transport
        self._logger = logging.getLogger(__name__)

    async def fetch_catalog(self) -> list[CatalogItem]:
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                resp = await client.post(self._url, headers={"Content-Type": "application/json"})
        except httpx.HTTPError as e:
            raise LocalCatalogError(str(e) or "Failed to fetch catalog data") from e

        if resp.status_code >= 400:
            try:
                error_message = resp.json().get("error")
            except Exception:
                error_message = None
            self._logger.error(
                "Local catalog endpoint failed",
                extra={"status": resp.status_code, "error": error_message},
            )
            raise LocalCatalogError(error_message or f"Failed to fetch: {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as e:
            raise LocalCatalogError(str(e) or "Failed to fetch catalog data") from e

        entries = data.get("catalog") if isinstance(data, dict) else None
        if not isinstance(entries, list):
            return []
        try:
            return [CatalogItem.from_payload(entry) for entry in entries if isinstance(entry, dict)]
        except (TypeError, ValueError, ArithmeticError) as e:
            raise LocalCatalogError(str(e) or "Failed to fetch catalog data") from e
