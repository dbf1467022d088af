from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pricing_catalog.domain.entities.catalog_item import CatalogItem


@dataclass(frozen=True)
class InvocationResult:
    summary: str  # human-readable text returned to the host model
    query: str | None = None
    items: tuple[CatalogItem, ...] = ()
    count: int | None = None
    message: str | None = None
    error: str | None = None

    def to_structured_content(self) -> dict[str, Any]:
        content: dict[str, Any] = {
            "serviceName": self.query,
            "catalog": [item.to_payload() for item in self.items],
        }
        if self.count is not None:
            content["count"] = self.count
        if self.error:
            content["error"] = self.error
        if self.message:
            content["message"] = self.message
        return content
