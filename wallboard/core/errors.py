"""Error Hierarchy - typed, categorized exceptions for all Wallboard failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are raised before any state mutation
    - Fetch errors (500-level) never escape the orchestrator; they become widget state
    - to_response() produces REST envelope; to_sse_event() produces SSE envelope

Design Decisions:
    - Single hierarchy with WallboardError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    EXTERNAL_API = "external_api"
    TIMEOUT = "timeout"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    widget_id: str | None = None
    widget_type: str | None = None


class WallboardError(Exception):
    """Base exception for all Wallboard errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "widget_id": self.context.widget_id,
                    "widget_type": self.context.widget_type,
                },
            }
        }

    def to_sse_event(self) -> dict:
        """Convert to SSE error event."""
        return {
            "type": "error",
            "data": {
                "code": self.code,
                "message": self.message,
                "severity": self.severity.value,
                "recoverable": self.severity in (
                    ErrorSeverity.INFO, ErrorSeverity.WARNING,
                ),
                "widget_id": self.context.widget_id,
            },
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class UnknownWidgetTypeError(WallboardError):
    """Widget type is not in the catalog."""
    def __init__(
        self, widget_type: str, known: list[str], context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.widget_type = widget_type
        super().__init__(
            f"Unknown widget type '{widget_type}'. Expected one of: {', '.join(known)}",
            "UNKNOWN_WIDGET_TYPE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.widget_type = widget_type


class ReorderIndexError(WallboardError):
    """Reorder indices fall outside the current widget list."""
    def __init__(
        self, from_index: int, to_index: int, size: int,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Cannot move widget {from_index} -> {to_index}: "
            f"indices must be in [0, {size})",
            "REORDER_OUT_OF_RANGE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.from_index = from_index
        self.to_index = to_index


class WidgetNotFoundError(WallboardError):
    """Requested widget does not exist."""
    def __init__(self, widget_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.widget_id = widget_id
        super().__init__(
            f"Widget '{widget_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


# ─── Fetch Errors (500-level) ───────────────────────────────────

class WidgetFetchError(WallboardError):
    """Data source failed to produce a payload."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "WIDGET_FETCH_FAILED", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.WARNING, context, 502,
        )


class FetchTimeoutError(WallboardError):
    """Data source did not answer within the fetch timeout."""
    def __init__(self, timeout_seconds: float, context: ErrorContext | None = None):
        super().__init__(
            f"Fetch timed out after {timeout_seconds:g}s",
            "WIDGET_FETCH_TIMEOUT", ErrorCategory.TIMEOUT,
            ErrorSeverity.WARNING, context, 504,
        )
        self.timeout_seconds = timeout_seconds
