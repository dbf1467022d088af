from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class CatalogItem:
    id: int | None = None
    service_name: str = ""
    variant_name: str = ""
    description: str = ""
    about: str = ""
    price: int | float = 0
    market_price: int | float = 0
    currency: str = ""
    rating: str | None = None  # numeric string, e.g. "4.8"
    customers: int = 0
    delivery_time: int = 0  # days
    category: str = ""
    page_url: str = ""
    unit: str = ""

    @property
    def is_discounted(self) -> bool:
        return self.market_price > self.price

    @property
    def rating_value(self) -> float | None:
        if not self.rating:
            return None
        try:
            return float(self.rating)
        except (TypeError, ValueError):
            return None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> CatalogItem:
        """Build an item from one raw catalog entry. Missing or malformed fields fall back to empty values."""
        rating = payload.get("rating")
        return cls(
            id=_as_int(payload.get("id")),
            service_name=_as_str(payload.get("service_name")),
            variant_name=_as_str(payload.get("variant_name")),
            description=_as_str(payload.get("description")),
            about=_as_str(payload.get("about")),
            price=_as_number(payload.get("price")),
            market_price=_as_number(payload.get("market_price")),
            currency=_as_str(payload.get("currency")),
            rating=str(rating) if rating not in (None, "") else None,
            customers=_as_int(payload.get("customers")) or 0,
            delivery_time=_as_int(payload.get("delivery_time")) or 0,
            category=_as_str(payload.get("category")),
            page_url=_as_str(payload.get("page_url")),
            unit=_as_str(payload.get("unit")),
        )

    def to_payload(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "service_name": self.service_name,
            "variant_name": self.variant_name,
            "description": self.description,
            "price": self.price,
            "market_price": self.market_price,
            "currency": self.currency,
            "rating": self.rating,
            "customers": self.customers,
            "delivery_time": self.delivery_time,
            "category": self.category,
            "page_url": self.page_url,
            "about": self.about,
            "unit": self.unit,
        }


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _as_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


def _as_number(value: Any) -> int | float:
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, (int, float)):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    return int(number) if number.is_integer() else number
