"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - WidgetId wraps the opaque string id - never build ids outside the id factory
    - All action tags encoded as Enums - no raw string matching
    - Freshness and debounce windows defined once, here

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (SSE events carry the action tag)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

WidgetId = NewType("WidgetId", str)
WidgetType = NewType("WidgetType", str)

# (widget_type, widget_id) - see WidgetCache
CacheKey = tuple[str, str]


# ─── Enums ───────────────────────────────────────────────────────

class ActionType(str, Enum):
    """Reducer action tags - one per state transition."""
    ADD_WIDGET = "ADD_WIDGET"
    REMOVE_WIDGET = "REMOVE_WIDGET"
    REORDER_WIDGETS = "REORDER_WIDGETS"
    UPDATE_WIDGET_DATA = "UPDATE_WIDGET_DATA"
    SET_WIDGET_LOADING = "SET_WIDGET_LOADING"
    SET_WIDGET_ERROR = "SET_WIDGET_ERROR"


class WidgetStatus(str, Enum):
    """Derived per-widget lifecycle state (never stored, computed from flags)."""
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


# ─── Constants ───────────────────────────────────────────────────

CACHE_TTL_SECONDS = 5 * 60
REFRESH_DEBOUNCE_SECONDS = 0.3
FETCH_TIMEOUT_SECONDS = 10.0
