from __future__ import annotations

from pricing_catalog.application.utils.asset_resolver import resolve_asset_url
from pricing_catalog.domain.entities.catalog_item import CatalogItem
from pricing_catalog.domain.entities.surface_view import CardView, SurfaceView

HEADER_HEIGHT = 96
CARD_ROW_HEIGHT = 360
CARDS_PER_ROW = {"inline": 2, "pip": 1, "fullscreen": 3}
DETAIL_PANEL_HEIGHT = 640
MESSAGE_HEIGHT = 120


def build_card(item: CatalogItem) -> CardView:
    rating = item.rating_value
    return CardView(
        item=item,
        image_url=resolve_asset_url(item.variant_name, item.service_name),
        price_label=_money(item.currency, item.price),
        market_price_label=_money(item.currency, item.market_price) if item.is_discounted else None,
        rating_label=f"{rating:.1f}" if rating is not None else None,
    )


def estimate_content_height(view: SurfaceView) -> int:
    """Rough intrinsic height in pixels, reported to the host after layout changes."""
    if view.selected is not None:
        return HEADER_HEIGHT + DETAIL_PANEL_HEIGHT
    if not view.cards:
        return HEADER_HEIGHT + MESSAGE_HEIGHT
    per_row = CARDS_PER_ROW.get(view.context.display_mode, 2)
    rows = -(-len(view.cards) // per_row)
    return HEADER_HEIGHT + rows * CARD_ROW_HEIGHT


def _money(currency: str, amount: int | float) -> str:
    return f"{currency} {amount}".strip()
