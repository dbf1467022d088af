from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable

from pricing_catalog.domain.entities.host_context import HostContext


class HostBridgePort(ABC):
    """Capabilities the hosting runtime offers to the pricing surface."""

    @abstractmethod
    def is_hosted(self) -> bool:
        """True when running inside the host, False when standalone."""
        raise NotImplementedError

    @abstractmethod
    def get_tool_output(self) -> dict[str, Any] | None:
        """Structured content injected by the host after a tool invocation."""
        raise NotImplementedError

    @abstractmethod
    def get_widget_state(self) -> dict[str, Any] | None:
        raise NotImplementedError

    @abstractmethod
    def set_widget_state(self, state: dict[str, Any]) -> None:
        raise NotImplementedError

    @abstractmethod
    def get_context(self) -> HostContext:
        raise NotImplementedError

    @abstractmethod
    def notify_intrinsic_height(self, height: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def subscribe(self, listener: Callable[[], None]) -> Callable[[], None]:
        """
        Register a listener called whenever host globals change
        (tool output, widget state, context). Returns an unsubscribe callable.
        """
        raise NotImplementedError
