from __future__ import annotations

from dataclasses import dataclass
from typing import Any


WIDGET_MIME_TYPE = "text/html+skybridge"


@dataclass(frozen=True)
class PricingWidget:
    id: str = "show_pricing"
    title: str = "Show Pricing Catalog"
    template_uri: str = "ui://widget/pricing-template.html"
    invoking: str = "Loading pricing catalog..."
    invoked: str = "Pricing catalog loaded"
    description: str = "Displays service pricing catalog with interactive cards"
    widget_domain: str = "https://nextjs.org/docs"

    def tool_meta(self) -> dict[str, Any]:
        return {
            "openai/outputTemplate": self.template_uri,
            "openai/toolInvocation/invoking": self.invoking,
            "openai/toolInvocation/invoked": self.invoked,
            "openai/widgetAccessible": False,
            "openai/resultCanProduceWidget": True,
        }

    def resource_meta(self) -> dict[str, Any]:
        return {
            "openai/widgetDescription": self.description,
            "openai/widgetPrefersBorder": True,
            "openai/widgetDomain": self.widget_domain,
        }
