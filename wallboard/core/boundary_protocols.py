"""Boundary Protocols - contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Data sources are reached only through WidgetDataSource

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO, the orchestrator awaits them
"""

from typing import Any, Protocol

from wallboard.core.domain_types import WidgetId
from wallboard.core.widget import WidgetList
from wallboard.core.widget_actions import WidgetAction


class WidgetDataSource(Protocol):
    """Fetch-by-type capability. Raises on failure; the exception message becomes widget.error."""
    async def fetch_widget_data(self, widget_type: str) -> Any: ...


class WidgetListener(Protocol):
    """Called after every dispatch with the action and the resulting list."""
    def __call__(self, action: WidgetAction, widgets: WidgetList) -> None: ...


class IdFactory(Protocol):
    def __call__(self) -> WidgetId: ...
