from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pricing_catalog.domain.entities.catalog_item import CatalogItem
from pricing_catalog.domain.entities.host_context import HostContext


class SurfacePhase(str, Enum):
    AWAITING_SOURCE = "awaiting_source"
    LOCAL_FETCH_IN_FLIGHT = "local_fetch_in_flight"
    HAS_LOCAL_DATA = "has_local_data"
    LOCAL_FETCH_FAILED = "local_fetch_failed"
    HAS_INVOCATION_DATA = "has_invocation_data"


@dataclass(frozen=True)
class CardView:
    item: CatalogItem
    image_url: str
    price_label: str
    market_price_label: str | None = None  # only set when discounted
    rating_label: str | None = None


@dataclass(frozen=True)
class SurfaceView:
    phase: SurfacePhase
    cards: tuple[CardView, ...] = ()
    selected: CardView | None = None
    query: str | None = None
    error: str | None = None
    loading: bool = False
    context: HostContext = HostContext()
