"""Widget Orchestrator - owns the authoritative widget list and mediates every fetch.

Invariants:
    - The widget list is replaced only through dispatch() -> reduce_widgets()
    - Adds fetch immediately (never debounced); refreshes are debounced per widget
    - Refreshing a widget that is no longer listed raises WidgetNotFoundError (no debouncer, no fetch)
    - A cache hit dispatches UpdateWidgetData without ever setting loading=True
    - Failed fetches are never cached and never raised: they become SetWidgetError
    - Removing a widget does not cancel its in-flight fetch; the late dispatch is a reducer no-op
    - Invalid widget types and reorder indices are rejected before any dispatch

Design Decisions:
    - Single asyncio loop, no locks: every dispatch runs on the loop thread
    - Fetches run as tracked tasks so wait_idle()/close() can await or cancel them
    - Timeout on every fetch (fetch_timeout_seconds): a hung source ends in Failed, not Loading forever
    - Listeners get (action, widgets) after each dispatch; SSE streaming builds on this
"""

import asyncio
import logging
import time
import uuid
from collections.abc import Callable, Coroutine
from typing import Any

from wallboard.core.boundary_protocols import IdFactory, WidgetDataSource, WidgetListener
from wallboard.core.domain_types import (
    FETCH_TIMEOUT_SECONDS, REFRESH_DEBOUNCE_SECONDS, WidgetId,
)
from wallboard.core.errors import (
    ErrorContext, FetchTimeoutError, ReorderIndexError,
    WallboardError, WidgetNotFoundError,
)
from wallboard.core.widget import Widget, WidgetList, find_widget
from wallboard.core.widget_actions import (
    AddWidget, RemoveWidget, ReorderWidgets,
    UpdateWidgetData, SetWidgetLoading, SetWidgetError, WidgetAction,
)
from wallboard.core.widget_cache import MISSING, WidgetCache, make_cache_key
from wallboard.core.widget_catalog import (
    DEFAULT_CATALOG, WidgetCatalog, normalize_widget_type,
)
from wallboard.core.widget_reducer import is_valid_move, reduce_widgets
from wallboard.services.debouncer import Debouncer

logger = logging.getLogger(__name__)

def generate_widget_id() -> WidgetId:
    return WidgetId(f"widget-{uuid.uuid4().hex}")


def _epoch_ms() -> float:
    return time.time() * 1000


class WidgetOrchestrator:
    """Controller for add/remove/refresh/reorder intents on one dashboard."""

    def __init__(
        self,
        data_source: WidgetDataSource,
        cache: WidgetCache,
        catalog: WidgetCatalog = DEFAULT_CATALOG,
        *,
        refresh_delay_seconds: float = REFRESH_DEBOUNCE_SECONDS,
        fetch_timeout_seconds: float | None = FETCH_TIMEOUT_SECONDS,
        id_factory: IdFactory = generate_widget_id,
        clock: Callable[[], float] = _epoch_ms,
    ):
        self.data_source = data_source
        self.cache = cache
        self.catalog = catalog
        self.refresh_delay_seconds = refresh_delay_seconds
        self.fetch_timeout_seconds = fetch_timeout_seconds
        self._id_factory = id_factory
        self._clock = clock
        self._widgets: WidgetList = ()
        self._listeners: list[WidgetListener] = []
        self._tasks: set[asyncio.Task] = set()
        self._refreshers: dict[str, Debouncer] = {}

    # --- State access ---------------------------------------------------------

    @property
    def widgets(self) -> WidgetList:
        return self._widgets

    def get_widget(self, widget_id: str) -> Widget:
        widget = find_widget(self._widgets, widget_id)
        if widget is None:
            raise WidgetNotFoundError(widget_id)
        return widget

    def subscribe(self, listener: WidgetListener) -> Callable[[], None]:
        """Register a listener; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: WidgetAction) -> WidgetList:
        """Run the reducer, store the new list, notify listeners."""
        self._widgets = reduce_widgets(self._widgets, action)
        action_type = getattr(action, "action_type", None)
        logger.debug(
            "Dispatched %s", action_type.value if action_type else type(action).__name__,
            extra={
                "action": action_type.value if action_type else None,
                "widget_id": getattr(action, "widget_id", None),
            },
        )
        for listener in list(self._listeners):
            try:
                listener(action, self._widgets)
            except Exception as e:
                logger.error(f"Widget listener failed: {e}", exc_info=True)
        return self._widgets

    # --- Intents --------------------------------------------------------------

    def add_widget(self, widget_type: str) -> Widget:
        """Create a widget, append it, and start its first fetch."""
        normalized = normalize_widget_type(widget_type, self.catalog)
        widget = Widget(
            id=self._id_factory(), type=normalized, created_at=self._clock(),
        )
        self.dispatch(AddWidget(widget))
        logger.info("Widget added",
            extra={"widget_id": widget.id, "widget_type": widget.type})
        self._start_fetch(widget.type, widget.id)
        return widget

    def remove_widget(self, widget_id: str) -> WidgetList:
        refresher = self._refreshers.pop(widget_id, None)
        if refresher is not None:
            refresher.cancel_pending()
        widgets = self.dispatch(RemoveWidget(WidgetId(widget_id)))
        logger.info("Widget removed", extra={"widget_id": widget_id})
        return widgets

    def refresh_widget(self, widget: Widget) -> None:
        """Debounced refetch: bursts for the same widget collapse into one fetch."""
        if find_widget(self._widgets, widget.id) is None:
            raise WidgetNotFoundError(widget.id)
        refresher = self._refreshers.get(widget.id)
        if refresher is None:
            refresher = Debouncer(
                self._start_fetch, self.refresh_delay_seconds,
                name=f"refresh:{widget.id}",
            )
            self._refreshers[widget.id] = refresher
        refresher.call(widget.type, widget.id)

    def reorder_widgets(self, from_index: int, to_index: int) -> WidgetList:
        size = len(self._widgets)
        if not is_valid_move(size, from_index, to_index):
            raise ReorderIndexError(from_index, to_index, size)
        return self.dispatch(ReorderWidgets(from_index, to_index))

    # --- Lifecycle ------------------------------------------------------------

    def flush_refreshes(self) -> None:
        """Fire every pending debounced refresh now."""
        for refresher in list(self._refreshers.values()):
            refresher.flush_pending()

    async def wait_idle(self) -> None:
        """Await all fetches already started (including fired refreshes)."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def close(self) -> None:
        """Drop pending refreshes and cancel in-flight fetches."""
        for refresher in self._refreshers.values():
            refresher.cancel_pending()
        self._refreshers.clear()
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    # --- Fetching -------------------------------------------------------------

    def _start_fetch(self, widget_type: str, widget_id: str) -> None:
        self._spawn(self._fetch_and_apply(widget_type, WidgetId(widget_id)))

    def _spawn(self, coro: Coroutine[Any, Any, None]) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _fetch_and_apply(self, widget_type: str, widget_id: WidgetId) -> None:
        key = make_cache_key(widget_type, widget_id)
        cached = self.cache.get(key, MISSING)
        if cached is not MISSING:
            logger.debug("Cache hit",
                extra={"widget_id": widget_id, "widget_type": widget_type})
            self.dispatch(UpdateWidgetData(widget_id, cached))
            return

        self.dispatch(SetWidgetLoading(widget_id, True))
        try:
            data = await self._fetch(widget_type)
        except Exception as e:
            message = e.message if isinstance(e, WallboardError) else (str(e) or type(e).__name__)
            logger.warning(
                f"Fetch failed: {message}",
                extra={
                    "widget_id": widget_id, "widget_type": widget_type,
                    "error_code": getattr(e, "code", None),
                },
            )
            self.dispatch(SetWidgetError(widget_id, message))
            return

        self.cache.set(key, data)
        self.dispatch(UpdateWidgetData(widget_id, data))

    async def _fetch(self, widget_type: str) -> Any:
        if self.fetch_timeout_seconds is None:
            return await self.data_source.fetch_widget_data(widget_type)
        try:
            return await asyncio.wait_for(
                self.data_source.fetch_widget_data(widget_type),
                timeout=self.fetch_timeout_seconds,
            )
        except asyncio.TimeoutError:
            raise FetchTimeoutError(
                self.fetch_timeout_seconds, ErrorContext(widget_type=widget_type),
            )
