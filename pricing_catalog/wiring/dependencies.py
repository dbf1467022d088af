from functools import lru_cache, partial

from fastmcp import FastMCP

from pricing_catalog.api.mcp_tools import register_pricing_tools
from pricing_catalog.application.ports.catalog_gateway import CatalogGatewayPort
from pricing_catalog.application.ports.host_bridge import HostBridgePort
from pricing_catalog.application.use_cases.show_pricing import ShowPricingUseCase
from pricing_catalog.application.use_cases.surface_controller import SurfaceController
from pricing_catalog.core.config import settings
from pricing_catalog.domain.entities.widget import PricingWidget
from pricing_catalog.infrastructure.catalog.catalog_gateway import HttpCatalogGateway
from pricing_catalog.infrastructure.catalog.local_catalog_client import LocalCatalogClient
from pricing_catalog.infrastructure.host.memory_host import InMemoryHostBridge
from pricing_catalog.infrastructure.widget.template_loader import load_widget_html


def get_catalog_gateway() -> CatalogGatewayPort:
    return HttpCatalogGateway()


def get_show_pricing_use_case() -> ShowPricingUseCase:
    return ShowPricingUseCase(gateway=get_catalog_gateway())


@lru_cache
def get_pricing_widget() -> PricingWidget:
    return PricingWidget(widget_domain=settings.WIDGET_DOMAIN)


def build_mcp_server() -> FastMCP:
    mcp = FastMCP("Pricing Catalog")
    register_pricing_tools(
        mcp,
        use_case_factory=get_show_pricing_use_case,
        widget=get_pricing_widget(),
        html_loader=partial(load_widget_html, settings.PUBLIC_BASE_URL),
    )
    return mcp


def build_surface_controller(host: HostBridgePort | None = None) -> SurfaceController:
    return SurfaceController(
        host=host or InMemoryHostBridge(hosted=False),
        local_catalog=LocalCatalogClient(base_url=settings.PUBLIC_BASE_URL),
        grace_seconds=settings.SURFACE_GRACE_SECONDS,
    )
