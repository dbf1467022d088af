#!/usr/bin/env python3
"""
Local preview of the show_pricing tool (no MCP host, no HTTP server).

Usage:
  python3 scripts/preview_catalog.py
  python3 scripts/preview_catalog.py --query delaware
  python3 scripts/preview_catalog.py --query delaware --surface

What it does:
- Runs the same ShowPricingUseCase the MCP tool uses and prints the summary and cards
- With --surface, feeds the result to a SurfaceController as host tool output
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pricing_catalog.application.utils.card_view import build_card
from pricing_catalog.infrastructure.host.memory_host import InMemoryHostBridge
from pricing_catalog.wiring.dependencies import build_surface_controller, get_show_pricing_use_case


def _print_cards(cards) -> None:
    for card in cards:
        item = card.item
        line = f"  [{item.id}] {item.service_name} / {item.variant_name}: {card.price_label}"
        if card.market_price_label:
            line += f" (was {card.market_price_label})"
        if card.rating_label:
            line += f" rating {card.rating_label}"
        print(line)
        print(f"      image: {card.image_url}")


async def _run(query: str | None, surface: bool) -> int:
    result = await get_show_pricing_use_case().execute(query)
    print(result.summary)
    print("-" * 60)
    if result.error:
        return 1

    if not surface:
        _print_cards([build_card(item) for item in result.items])
        return 0

    host = InMemoryHostBridge(hosted=True, tool_output=result.to_structured_content())
    controller = build_surface_controller(host)
    controller.mount()
    view = controller.view()
    print(f"phase: {view.phase.value}  query: {view.query}  cards: {len(view.cards)}")
    _print_cards(view.cards)
    print(f"reported heights: {host.reported_heights}")
    controller.teardown()
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Preview the pricing catalog tool locally.")
    parser.add_argument("--query", default=None, help="Service name filter, e.g. 'delaware'")
    parser.add_argument("--surface", action="store_true", help="Render through the surface controller")
    args = parser.parse_args()
    return asyncio.run(_run(args.query, args.surface))


if __name__ == "__main__":
    sys.exit(main())
