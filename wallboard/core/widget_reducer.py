"""Widget Reducer - pure, total state transition (widgets, action) -> widgets.

Invariants:
    - Never mutates the input tuple or any Widget in it
    - Never raises: unknown actions, unknown ids and out-of-range indices return the input unchanged
    - "Unchanged" means the same tuple object, so `new is old` detects a no-op
    - Untouched widgets keep their identity in the new tuple
    - At most one widget per id (a duplicate AddWidget is ignored)
    - SetWidgetLoading(True) clears error so loading and error never coexist

Design Decisions:
    - match on action dataclasses over a dispatch dict: the whole transition table reads top-down
    - Reorder range checks live here as no-ops; the orchestrator rejects bad indices before dispatch
"""

from typing import Any

from wallboard.core.widget import Widget, WidgetList, find_widget
from wallboard.core.widget_actions import (
    AddWidget, RemoveWidget, ReorderWidgets,
    UpdateWidgetData, SetWidgetLoading, SetWidgetError,
)


def reduce_widgets(widgets: WidgetList, action: object) -> WidgetList:
    """Apply one action and return the resulting widget list."""
    match action:
        case AddWidget(widget=widget):
            if find_widget(widgets, widget.id) is not None:
                return widgets
            return (*widgets, widget)
        case RemoveWidget(widget_id=widget_id):
            return _remove(widgets, widget_id)
        case ReorderWidgets(from_index=from_index, to_index=to_index):
            return _reorder(widgets, from_index, to_index)
        case UpdateWidgetData(widget_id=widget_id, data=data):
            return _update_one(
                widgets, widget_id, data=data, loading=False, error=None,
            )
        case SetWidgetLoading(widget_id=widget_id, loading=True):
            return _update_one(widgets, widget_id, loading=True, error=None)
        case SetWidgetLoading(widget_id=widget_id, loading=loading):
            return _update_one(widgets, widget_id, loading=bool(loading))
        case SetWidgetError(widget_id=widget_id, error=error):
            return _update_one(widgets, widget_id, error=error, loading=False)
        case _:
            return widgets


def is_valid_move(size: int, from_index: int, to_index: int) -> bool:
    """True when both indices address an existing slot of a list of `size`."""
    return 0 <= from_index < size and 0 <= to_index < size


def _remove(widgets: WidgetList, widget_id: str) -> WidgetList:
    kept = tuple(w for w in widgets if w.id != widget_id)
    return widgets if len(kept) == len(widgets) else kept


def _reorder(widgets: WidgetList, from_index: int, to_index: int) -> WidgetList:
    """Remove at from_index, insert at to_index of the shortened list."""
    if from_index == to_index or not is_valid_move(len(widgets), from_index, to_index):
        return widgets
    moved = widgets[from_index]
    rest = widgets[:from_index] + widgets[from_index + 1:]
    return rest[:to_index] + (moved,) + rest[to_index:]


def _update_one(widgets: WidgetList, widget_id: str, **changes: Any) -> WidgetList:
    if find_widget(widgets, widget_id) is None:
        return widgets
    return tuple(
        _apply(w, changes) if w.id == widget_id else w for w in widgets
    )


def _apply(widget: Widget, changes: dict[str, Any]) -> Widget:
    return widget.with_changes(**changes)
