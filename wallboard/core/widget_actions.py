"""Widget Actions - the closed set of messages the reducer understands.

Invariants:
    - Every action is a frozen dataclass carrying exactly the payload its transition needs
    - action_type tags are unique (ActionType enum)

Design Decisions:
    - One dataclass per action over a generic {type, payload} dict: structural pattern matching
      in the reducer, typed payloads at every call site
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Union

from wallboard.core.domain_types import ActionType, WidgetId
from wallboard.core.widget import Widget


@dataclass(frozen=True)
class AddWidget:
    widget: Widget
    action_type: ClassVar[ActionType] = ActionType.ADD_WIDGET

    @property
    def widget_id(self) -> WidgetId:
        return self.widget.id


@dataclass(frozen=True)
class RemoveWidget:
    widget_id: WidgetId
    action_type: ClassVar[ActionType] = ActionType.REMOVE_WIDGET


@dataclass(frozen=True)
class ReorderWidgets:
    from_index: int
    to_index: int
    action_type: ClassVar[ActionType] = ActionType.REORDER_WIDGETS

    @property
    def widget_id(self) -> None:
        return None


@dataclass(frozen=True)
class UpdateWidgetData:
    widget_id: WidgetId
    data: Any
    action_type: ClassVar[ActionType] = ActionType.UPDATE_WIDGET_DATA


@dataclass(frozen=True)
class SetWidgetLoading:
    widget_id: WidgetId
    loading: bool
    action_type: ClassVar[ActionType] = ActionType.SET_WIDGET_LOADING


@dataclass(frozen=True)
class SetWidgetError:
    widget_id: WidgetId
    error: str
    action_type: ClassVar[ActionType] = ActionType.SET_WIDGET_ERROR


WidgetAction = Union[
    AddWidget, RemoveWidget, ReorderWidgets,
    UpdateWidgetData, SetWidgetLoading, SetWidgetError,
]
