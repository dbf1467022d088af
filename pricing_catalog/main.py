import logging

from fastapi import FastAPI

from pricing_catalog.api.catalog import router as catalog_router
from pricing_catalog.core.config import settings
from pricing_catalog.wiring.dependencies import build_mcp_server

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("item_count", "query", "status", "error", "phase", "item_id"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

mcp_app = build_mcp_server().http_app(path="/mcp")

app = FastAPI(title="Pricing Catalog Widget", version="1.0.0", lifespan=mcp_app.lifespan)

app.include_router(catalog_router, tags=["catalog"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


# Mounted last so the routes above take precedence.
app.mount("/", mcp_app)
