from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from pricing_catalog.application.ports.catalog_gateway import CatalogGatewayPort
from pricing_catalog.wiring.dependencies import get_catalog_gateway


router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/api/catalog")
async def fetch_catalog(
    gateway: CatalogGatewayPort = Depends(get_catalog_gateway),
) -> JSONResponse:
    try:
        result = await gateway.fetch()
    except Exception as e:
        logger.exception("Catalog endpoint failed", extra={"error": str(e)})
        return JSONResponse({"error": str(e) or "Failed to fetch catalog data"}, status_code=500)

    if result.error:
        return JSONResponse({"error": result.error}, status_code=500)

    return JSONResponse({"catalog": [item.to_payload() for item in result.items]})
