from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable

from pricing_catalog.application.ports.host_bridge import HostBridgePort
from pricing_catalog.domain.entities.host_context import HostContext


class InMemoryHostBridge(HostBridgePort):
    """
    Host capabilities kept in process memory.
    Used when the surface runs standalone, and as the host in tests.
    """

    def __init__(
        self,
        hosted: bool = False,
        tool_output: dict[str, Any] | None = None,
        widget_state: dict[str, Any] | None = None,
        context: HostContext | None = None,
    ) -> None:
        self._hosted = hosted
        self._tool_output = tool_output
        self._widget_state = widget_state
        self._context = context or HostContext()
        self._listeners: list[Callable[[], None]] = []
        self.reported_heights: list[int] = []
        self._logger = logging.getLogger(__name__)

    def is_hosted(self) -> bool:
        return self._hosted

    def get_tool_output(self) -> dict[str, Any] | None:
        return self._tool_output

    def get_widget_state(self) -> dict[str, Any] | None:
        return dict(self._widget_state) if self._widget_state is not None else None

    def set_widget_state(self, state: dict[str, Any]) -> None:
        self._widget_state = dict(state)
        self._emit()

    def get_context(self) -> HostContext:
        return self._context

    def notify_intrinsic_height(self, height: int) -> None:
        self.reported_heights.append(height)
        self._logger.debug("Intrinsic height reported: %s", height)

    def subscribe(self, listener: Callable[[], None]) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # Host-side actions

    def deliver_tool_output(self, tool_output: dict[str, Any] | None) -> None:
        self._tool_output = tool_output
        self._emit()

    def set_display_mode(self, display_mode: str) -> None:
        self._context = replace(self._context, display_mode=display_mode)
        self._emit()

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def _emit(self) -> None:
        for listener in list(self._listeners):
            listener()
