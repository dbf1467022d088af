"""MCP tool and widget resource for the pricing catalog."""

from __future__ import annotations

from typing import Annotated, Awaitable, Callable

from fastmcp import FastMCP
from fastmcp.tools.tool import ToolResult
from pydantic import Field

from pricing_catalog.application.use_cases.show_pricing import ShowPricingUseCase
from pricing_catalog.domain.entities.widget import WIDGET_MIME_TYPE, PricingWidget
from pricing_catalog.infrastructure.widget.template_loader import wrap_html

TOOL_DESCRIPTION = (
    "Use this tool when users want to register a company, incorporate a business, or view company "
    "registration services and pricing. This tool displays an interactive pricing catalog with service "
    "cards showing different company registration options (e.g., USA Company Registration, "
    "state-specific incorporations). Extract the service name from the user's query (e.g., 'USA Company "
    "Registration', 'Company Incorporation', or specific state names like 'Delaware', 'California', "
    "'New York'). If the user mentions a location or state, include it in the serviceName parameter."
)

SERVICE_NAME_DESCRIPTION = (
    "The service name to search for in the catalog. Examples: 'USA Company Registration', "
    "'Company Incorporation', 'Delaware', 'California', 'New York'. If user says 'register a company "
    "in USA', use 'USA Company Registration'. If not provided, shows all company registration services."
)


def register_pricing_tools(
    mcp: FastMCP,
    use_case_factory: Callable[[], ShowPricingUseCase],
    widget: PricingWidget,
    html_loader: Callable[[], Awaitable[str]],
) -> dict[str, object]:
    @mcp.resource(
        widget.template_uri,
        name="pricing-widget",
        title=widget.title,
        description=widget.description,
        mime_type=WIDGET_MIME_TYPE,
        meta=widget.resource_meta(),
    )
    async def pricing_template() -> str:
        return wrap_html(await html_loader())

    @mcp.tool(
        name=widget.id,
        title=widget.title,
        description=TOOL_DESCRIPTION,
        meta=widget.tool_meta(),
    )
    async def show_pricing(
        serviceName: Annotated[str | None, Field(description=SERVICE_NAME_DESCRIPTION)] = None,  # noqa: N803
    ) -> ToolResult:
        result = await use_case_factory().execute(serviceName)
        return ToolResult(content=result.summary, structured_content=result.to_structured_content())

    return {
        "pricing_template": pricing_template,
        "show_pricing": show_pricing,
    }
