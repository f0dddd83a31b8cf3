"""Widget Stream - Server-Sent Events feed of the widget list after every dispatch.

Invariants:
    - First event is always a `snapshot` of the current list
    - Then exactly one `widgets` event per dispatch, in dispatch order
    - A SetWidgetError dispatch is followed by one `error` event (recoverable, carries widget_id)
    - Listener unsubscribed when the client disconnects

Design Decisions:
    - Unbounded asyncio.Queue per client: dispatch never blocks on a slow consumer
    - widget_events() is a plain async generator so it can be tested without HTTP
"""

import asyncio
import json
import logging
from collections.abc import AsyncIterator

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from wallboard.core.widget import WidgetList
from wallboard.core.errors import ErrorContext, WidgetFetchError
from wallboard.core.widget_actions import SetWidgetError, WidgetAction
from wallboard.infrastructure.dashboard_registry import Dashboard, get_dashboard
from wallboard.services.widget_orchestrator import WidgetOrchestrator

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/widgets", tags=["widgets"])

# Prevent proxy/browser buffering of streamed events
_SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "X-Accel-Buffering": "no",
    "Connection": "keep-alive",
}


def _list_event(event_type: str, widgets: WidgetList, action: str | None = None) -> dict:
    data: dict = {"widgets": [w.to_dict() for w in widgets]}
    if action is not None:
        data["action"] = action
    return {"type": event_type, "data": data}


def _fetch_error_event(action: SetWidgetError) -> dict:
    return WidgetFetchError(
        action.error, ErrorContext(widget_id=action.widget_id),
    ).to_sse_event()


async def widget_events(
    orchestrator: WidgetOrchestrator, max_events: int | None = None,
) -> AsyncIterator[dict]:
    """Yield a snapshot, then one event per dispatch (max_events counts both)."""
    queue: asyncio.Queue[dict] = asyncio.Queue()

    def on_dispatch(action: WidgetAction, widgets: WidgetList) -> None:
        action_type = getattr(action, "action_type", None)
        queue.put_nowait(_list_event(
            "widgets", widgets, action_type.value if action_type else None,
        ))
        if isinstance(action, SetWidgetError):
            queue.put_nowait(_fetch_error_event(action))

    unsubscribe = orchestrator.subscribe(on_dispatch)
    try:
        sent = 0
        yield _list_event("snapshot", orchestrator.widgets)
        sent += 1
        while max_events is None or sent < max_events:
            yield await queue.get()
            sent += 1
    finally:
        unsubscribe()


@router.get("/stream")
async def stream_widgets(dashboard: Dashboard = Depends(get_dashboard)):
    """SSE feed of widget list changes."""

    async def event_generator():
        try:
            async for event in widget_events(dashboard.orchestrator):
                yield _sse_line(event)
        except asyncio.CancelledError:
            logger.info("Client disconnected from widget stream")
            raise

    return StreamingResponse(
        event_generator(),
        media_type="text/event-stream",
        headers=_SSE_HEADERS,
    )


def _sse_line(event: dict) -> str:
    """Format event as SSE data line."""
    return f"data: {json.dumps(event, ensure_ascii=False, default=str)}\n\n"
