"""Widget Schemas - Pydantic models with field-level validation for API boundaries.

Invariants:
    - WidgetCreate.type: 1-50 chars, stripped, non-empty (catalog check happens in core)
    - Reorder and drag indices are non-negative; upper bound checked against the live list

Design Decisions:
    - field_validator for side-effect-free transforms (strip) - keeps models pure
    - Catalog membership NOT validated here: UnknownWidgetTypeError owns that error shape
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from wallboard.core.domain_types import WidgetStatus
from wallboard.core.widget import Widget, WidgetList


class WidgetCreate(BaseModel):
    """Add-widget request."""
    type: str = Field(min_length=1, max_length=50)

    @field_validator("type")
    @classmethod
    def strip_type(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("type cannot be empty or whitespace")
        return v


class WidgetReorder(BaseModel):
    from_index: int = Field(ge=0)
    to_index: int = Field(ge=0)


class DragIndex(BaseModel):
    index: int = Field(ge=0)


class WidgetResponse(BaseModel):
    """Public-facing widget data."""
    id: str
    type: str
    data: Any | None = None
    loading: bool
    error: str | None = None
    created_at: float
    status: WidgetStatus

    @classmethod
    def from_widget(cls, widget: Widget) -> "WidgetResponse":
        return cls(**widget.to_dict())


class WidgetListResponse(BaseModel):
    widgets: list[WidgetResponse]

    @classmethod
    def from_widgets(cls, widgets: WidgetList) -> "WidgetListResponse":
        return cls(widgets=[WidgetResponse.from_widget(w) for w in widgets])


class WidgetTypeResponse(BaseModel):
    id: str
    name: str
    description: str


class DragStateResponse(BaseModel):
    dragged_index: int | None
    drag_over_index: int | None
    is_dragging: bool
    reordered: bool = False
    widgets: list[WidgetResponse]
