"""Drag Routes - drive the process-wide ReorderCoordinator with resolved indices.

Invariants:
    - start/over/leave never change the widget list
    - end commits at most one reorder, then the drag state is always cleared

Design Decisions:
    - Presentation sends indices, not pointer events; the gesture stream stays client-side
"""

from fastapi import APIRouter, Depends

from wallboard.infrastructure.dashboard_registry import Dashboard, get_dashboard
from wallboard.schemas.widget import DragIndex, DragStateResponse, WidgetResponse

router = APIRouter(prefix="/api/v1/widgets/drag", tags=["drag"])


def _drag_state(dashboard: Dashboard, reordered: bool = False) -> DragStateResponse:
    coordinator = dashboard.coordinator
    return DragStateResponse(
        dragged_index=coordinator.dragged_index,
        drag_over_index=coordinator.drag_over_index,
        is_dragging=coordinator.is_dragging,
        reordered=reordered,
        widgets=[
            WidgetResponse.from_widget(w) for w in dashboard.orchestrator.widgets
        ],
    )


@router.post("/start", response_model=DragStateResponse)
async def drag_start(body: DragIndex, dashboard: Dashboard = Depends(get_dashboard)):
    dashboard.coordinator.start(body.index)
    return _drag_state(dashboard)


@router.post("/over", response_model=DragStateResponse)
async def drag_over(body: DragIndex, dashboard: Dashboard = Depends(get_dashboard)):
    dashboard.coordinator.hover(body.index)
    return _drag_state(dashboard)


@router.post("/leave", response_model=DragStateResponse)
async def drag_leave(dashboard: Dashboard = Depends(get_dashboard)):
    dashboard.coordinator.leave()
    return _drag_state(dashboard)


@router.post("/end", response_model=DragStateResponse)
async def drag_end(dashboard: Dashboard = Depends(get_dashboard)):
    """Commit the drag. Out-of-range indices surface as 400 (state still cleared)."""
    reordered = dashboard.coordinator.end()
    return _drag_state(dashboard, reordered)
