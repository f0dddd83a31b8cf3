"""Widget - immutable value type for one dashboard tile.

Invariants:
    - Frozen: a Widget is never mutated, transitions build a new instance via with_changes()
    - loading=True and a present error never coexist
    - id, type and created_at never change after creation

Design Decisions:
    - Frozen dataclass over dict: identity comparison tells a consuming UI whether a tile changed
    - data stays Any: payload shape is owned by the data source, opaque here
"""

from dataclasses import dataclass, replace
from typing import Any

from wallboard.core.domain_types import WidgetId, WidgetStatus


@dataclass(frozen=True)
class Widget:
    """One dashboard tile instance bound to a data type and lifecycle flags."""

    id: WidgetId
    type: str
    created_at: float  # epoch milliseconds
    data: Any | None = None
    loading: bool = False
    error: str | None = None

    @property
    def status(self) -> WidgetStatus:
        if self.loading:
            return WidgetStatus.LOADING
        if self.error is not None:
            return WidgetStatus.FAILED
        if self.data is not None:
            return WidgetStatus.READY
        return WidgetStatus.IDLE

    def with_changes(self, **changes: Any) -> "Widget":
        return replace(self, **changes)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type,
            "data": self.data,
            "loading": self.loading,
            "error": self.error,
            "created_at": self.created_at,
            "status": self.status.value,
        }


# Ordered, immutable; replaced wholesale by the reducer
WidgetList = tuple[Widget, ...]


def find_widget(widgets: WidgetList, widget_id: str) -> Widget | None:
    """Return the widget with widget_id, or None."""
    return next((w for w in widgets if w.id == widget_id), None)
