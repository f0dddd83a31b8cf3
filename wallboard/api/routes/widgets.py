"""Widget Routes - add, list, remove, refresh and reorder dashboard widgets.

Invariants:
    - Every mutating route returns the widget list as it stands after the intent
    - Unknown widget ids -> 404 before any dispatch
    - Refresh is asynchronous: 202 Accepted, the fetch lands later (see /widgets/stream)

Design Decisions:
    - Dashboard injected via Depends(get_dashboard): tests override the dependency
    - Reorder range check delegated to the orchestrator (ReorderIndexError -> 400)
"""

import logging

from fastapi import APIRouter, Depends, status

from wallboard.infrastructure.dashboard_registry import Dashboard, get_dashboard
from wallboard.schemas.widget import (
    WidgetCreate, WidgetListResponse, WidgetReorder,
    WidgetResponse, WidgetTypeResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["widgets"])


@router.get("/widget-types", response_model=list[WidgetTypeResponse])
async def list_widget_types(dashboard: Dashboard = Depends(get_dashboard)):
    """Catalog of widget types that can be added."""
    return [
        WidgetTypeResponse(id=t.id, name=t.name, description=t.description)
        for t in dashboard.orchestrator.catalog
    ]


@router.get("/widgets", response_model=WidgetListResponse)
async def list_widgets(dashboard: Dashboard = Depends(get_dashboard)):
    return WidgetListResponse.from_widgets(dashboard.orchestrator.widgets)


@router.post(
    "/widgets", response_model=WidgetResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_widget(
    body: WidgetCreate, dashboard: Dashboard = Depends(get_dashboard),
):
    """Add a widget; its first fetch starts in the background."""
    widget = dashboard.orchestrator.add_widget(body.type)
    return WidgetResponse.from_widget(widget)


@router.post("/widgets/reorder", response_model=WidgetListResponse)
async def reorder_widgets(
    body: WidgetReorder, dashboard: Dashboard = Depends(get_dashboard),
):
    widgets = dashboard.orchestrator.reorder_widgets(body.from_index, body.to_index)
    return WidgetListResponse.from_widgets(widgets)


@router.get("/widgets/{widget_id}", response_model=WidgetResponse)
async def get_widget(widget_id: str, dashboard: Dashboard = Depends(get_dashboard)):
    return WidgetResponse.from_widget(dashboard.orchestrator.get_widget(widget_id))


@router.delete("/widgets/{widget_id}", response_model=WidgetListResponse)
async def remove_widget(
    widget_id: str, dashboard: Dashboard = Depends(get_dashboard),
):
    """Remove a widget. An in-flight fetch for it is left to finish as a no-op."""
    orchestrator = dashboard.orchestrator
    orchestrator.get_widget(widget_id)
    widgets = orchestrator.remove_widget(widget_id)
    return WidgetListResponse.from_widgets(widgets)


@router.post(
    "/widgets/{widget_id}/refresh", response_model=WidgetListResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
async def refresh_widget(
    widget_id: str, dashboard: Dashboard = Depends(get_dashboard),
):
    """Debounced refresh; repeated calls within the window collapse into one fetch."""
    orchestrator = dashboard.orchestrator
    orchestrator.refresh_widget(orchestrator.get_widget(widget_id))
    return WidgetListResponse.from_widgets(orchestrator.widgets)
