from __future__ import annotations

import logging

import httpx

logger = logging.getLogger(__name__)

SHELL_HTML = '<head><meta charset="utf-8"></head><body><div id="root"></div></body>'


async def load_widget_html(
    base_url: str,
    path: str = "/",
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """Fetch the rendered widget page from the public site, or a bare shell when no site is configured."""
    if not base_url:
        return SHELL_HTML

    url = f"{base_url.rstrip('/')}{path}"
    try:
        async with httpx.AsyncClient(transport=transport) as client:
            resp = await client.get(url)
        resp.raise_for_status()
    except httpx.HTTPError as e:
        logger.warning("Widget template unavailable, serving shell", extra={"error": str(e)})
        return SHELL_HTML
    return resp.text


def wrap_html(html: str) -> str:
    return f"<html>{html}</html>"
