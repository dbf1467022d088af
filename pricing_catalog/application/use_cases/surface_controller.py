from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable

from pricing_catalog.application.exceptions import LocalCatalogError
from pricing_catalog.application.ports.host_bridge import HostBridgePort
from pricing_catalog.application.ports.local_catalog import LocalCatalogPort
from pricing_catalog.application.utils.card_view import build_card, estimate_content_height
from pricing_catalog.domain.entities.catalog_item import CatalogItem
from pricing_catalog.domain.entities.selection_state import SelectionState
from pricing_catalog.domain.entities.surface_view import SurfacePhase, SurfaceView

DEFAULT_GRACE_SECONDS = 2.0
LOCAL_FETCH_ERROR = "Failed to fetch catalog data"


class SurfaceController:
    """
    Reconcile the data shown by the pricing surface.

    Sources, by precedence:
    1. catalog injected by the host as tool output (always wins once present)
    2. a single local fetch through the retrieval endpoint, started immediately
       when standalone or after a grace window when hosted

    Must be mounted from inside a running event loop.
    """

    def __init__(
        self,
        host: HostBridgePort,
        local_catalog: LocalCatalogPort,
        grace_seconds: float = DEFAULT_GRACE_SECONDS,
        measure_height: Callable[[SurfaceView], int] = estimate_content_height,
    ) -> None:
        self._host = host
        self._local_catalog = local_catalog
        self._grace_seconds = grace_seconds
        self._measure_height = measure_height
        self._logger = logging.getLogger(__name__)

        self._local_items: list[CatalogItem] = []
        self._local_error: str | None = None
        self._local_loaded = False
        self._local_attempted = False
        self._loading = False
        self._fetch_task: asyncio.Task[None] | None = None
        self._grace_handle: asyncio.TimerHandle | None = None
        self._parsed_output: Any = None
        self._parsed_items: list[CatalogItem] = []

        self._unsubscribe: Callable[[], None] | None = None
        self._mounted = False
        self._torn_down = False
        self._last_layout: tuple[Any, ...] | None = None

    # Lifecycle

    def mount(self) -> None:
        if self._mounted or self._torn_down:
            return
        self._mounted = True
        self._unsubscribe = self._host.subscribe(self._on_host_change)
        self._reconcile()
        self._refresh_layout()

    def teardown(self) -> None:
        """Stop every pending timer, fetch and subscription. Nothing fires afterwards."""
        if self._torn_down:
            return
        self._torn_down = True
        self._cancel_grace_timer()
        if self._fetch_task is not None and not self._fetch_task.done():
            self._fetch_task.cancel()
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._logger.debug("Surface torn down")

    def retry(self) -> asyncio.Task[None] | None:
        """Re-run the local fetch on demand. Returns the fetch task, or None when nothing to do."""
        if self._torn_down or self._invocation_items():
            return None
        self._cancel_grace_timer()
        return self._start_local_fetch()

    # Effective state

    @property
    def phase(self) -> SurfacePhase:
        if self._invocation_items():
            return SurfacePhase.HAS_INVOCATION_DATA
        if self._loading:
            return SurfacePhase.LOCAL_FETCH_IN_FLIGHT
        if self._local_error:
            return SurfacePhase.LOCAL_FETCH_FAILED
        if self._local_loaded:
            return SurfacePhase.HAS_LOCAL_DATA
        return SurfacePhase.AWAITING_SOURCE

    @property
    def items(self) -> list[CatalogItem]:
        invocation_items = self._invocation_items()
        if invocation_items:
            return list(invocation_items)
        return list(self._local_items)

    @property
    def error(self) -> str | None:
        tool_error = self._tool_output().get("error") or None
        if self._invocation_items():
            return tool_error
        return tool_error or self._local_error

    @property
    def loading(self) -> bool:
        return self._loading and not self._invocation_items()

    @property
    def query(self) -> str | None:
        return self._tool_output().get("serviceName") or None

    @property
    def selection(self) -> SelectionState:
        return SelectionState.from_widget_state(self._host.get_widget_state())

    @property
    def selected_item(self) -> CatalogItem | None:
        selected_id = self.selection.selected_card_id
        if selected_id is None:
            return None
        return next((item for item in self.items if item.id == selected_id), None)

    def view(self) -> SurfaceView:
        selected = self.selected_item
        return SurfaceView(
            phase=self.phase,
            cards=tuple(build_card(item) for item in self.items),
            selected=build_card(selected) if selected is not None else None,
            query=self.query,
            error=self.error,
            loading=self.loading,
            context=self._host.get_context(),
        )

    # Selection

    def select(self, item: CatalogItem) -> None:
        self._write_selection(SelectionState(selected_card_id=item.id))
        self._logger.info("Card selected", extra={"item_id": item.id})

    def clear_selection(self) -> None:
        self._write_selection(SelectionState())

    def _write_selection(self, selection: SelectionState) -> None:
        state = dict(self._host.get_widget_state() or {})
        state.update(selection.to_widget_state())
        self._host.set_widget_state(state)
        self._refresh_layout()

    # Reconciliation

    def _on_host_change(self) -> None:
        if self._torn_down:
            return
        self._reconcile()
        self._refresh_layout()

    def _reconcile(self) -> None:
        if self._torn_down:
            return

        if self._invocation_items():
            self._cancel_grace_timer()
            if self._fetch_task is not None and not self._fetch_task.done():
                self._logger.info("Tool output arrived, dropping local fetch")
                self._fetch_task.cancel()
            return

        if self._local_attempted:
            return

        if not self._host.is_hosted():
            self._start_local_fetch()
        elif self._grace_handle is None:
            loop = asyncio.get_running_loop()
            self._grace_handle = loop.call_later(self._grace_seconds, self._on_grace_elapsed)
            self._logger.debug("Waiting for tool output", extra={"phase": self.phase.value})

    def _on_grace_elapsed(self) -> None:
        self._grace_handle = None
        self._logger.info("No tool output after grace window, fetching locally")
        self._start_local_fetch()

    def _cancel_grace_timer(self) -> None:
        if self._grace_handle is not None:
            self._grace_handle.cancel()
            self._grace_handle = None

    def _start_local_fetch(self) -> asyncio.Task[None]:
        if self._fetch_task is not None and not self._fetch_task.done():
            return self._fetch_task
        self._local_attempted = True
        self._local_error = None
        self._loading = True
        self._fetch_task = asyncio.get_running_loop().create_task(self._run_local_fetch())
        self._fetch_task.add_done_callback(self._on_fetch_done)
        self._refresh_layout()
        return self._fetch_task

    def _on_fetch_done(self, task: asyncio.Task[None]) -> None:
        if task.cancelled():
            # A cancelled fetch never counts as the one attempt of this mount.
            self._loading = False
            self._local_attempted = False

    async def _run_local_fetch(self) -> None:
        try:
            items = await self._local_catalog.fetch_catalog()
        except LocalCatalogError as e:
            self._local_error = str(e)
            self._logger.error("Local catalog fetch failed", extra={"error": str(e)})
        except Exception as e:
            self._local_error = str(e) or LOCAL_FETCH_ERROR
            self._logger.exception("Local catalog fetch failed", extra={"error": str(e)})
        else:
            self._local_items = list(items)
            self._local_loaded = True
            self._logger.info("Local catalog loaded", extra={"item_count": len(self._local_items)})
        finally:
            self._loading = False
        self._refresh_layout()

    def _refresh_layout(self) -> None:
        if self._torn_down:
            return
        view = self.view()
        layout = (
            view.phase,
            len(view.cards),
            view.selected.item.id if view.selected else None,
            view.error,
            view.context.display_mode,
        )
        if layout == self._last_layout:
            return
        self._last_layout = layout
        self._host.notify_intrinsic_height(self._measure_height(view))

    # Host data

    def _tool_output(self) -> dict[str, Any]:
        output = self._host.get_tool_output()
        return output if isinstance(output, dict) else {}

    def _invocation_items(self) -> list[CatalogItem]:
        output = self._host.get_tool_output()
        if output is self._parsed_output:
            return self._parsed_items
        entries = output.get("catalog") if isinstance(output, dict) else None
        if isinstance(entries, list):
            items = [CatalogItem.from_payload(entry) for entry in entries if isinstance(entry, dict)]
        else:
            items = []
        # Parsed once per tool output object; the host replaces it on every delivery.
        self._parsed_output = output
        self._parsed_items = items
        return items
