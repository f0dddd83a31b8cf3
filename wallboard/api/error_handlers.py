"""Error Handlers - map Wallboard failures onto HTTP responses and log lines.

Invariants:
    - Every error body uses the same envelope: {"error": {code, message, category, severity, ...}}
    - Log level follows the category: caller mistakes at INFO, upstream trouble at WARNING,
      anything unclassified at ERROR with a traceback
    - widget_id / widget_type from the error context ride along in the log extra
    - Upstream categories (EXTERNAL_API, TIMEOUT) answer with Retry-After; caller mistakes never do
    - The catch-all never leaks exception text to the client

Design Decisions:
    - Fetch failures normally end up as widget state, so the upstream branch mostly serves
      routes that surface a fetch outcome directly
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from wallboard.core.errors import ErrorCategory, ErrorSeverity, WallboardError

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorCategory.VALIDATION: logging.INFO,
    ErrorCategory.RESOURCE_NOT_FOUND: logging.INFO,
    ErrorCategory.EXTERNAL_API: logging.WARNING,
    ErrorCategory.TIMEOUT: logging.WARNING,
    ErrorCategory.INTERNAL: logging.ERROR,
}

# Seconds
RETRY_AFTER_SECONDS = 2
_RETRYABLE = frozenset({ErrorCategory.EXTERNAL_API, ErrorCategory.TIMEOUT})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(WallboardError, wallboard_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


def _envelope(
    code: str, message: str, category: ErrorCategory, severity: ErrorSeverity,
    **extra,
) -> dict:
    return {"error": {
        "code": code,
        "message": message,
        "category": category.value,
        "severity": severity.value,
        **extra,
    }}


async def wallboard_error_handler(request: Request, exc: WallboardError) -> JSONResponse:
    level = _LOG_LEVELS.get(exc.category, logging.ERROR)
    logger.log(
        level, f"{exc.code}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "widget_id": exc.context.widget_id,
            "widget_type": exc.context.widget_type,
        },
    )
    headers = None
    if exc.category in _RETRYABLE:
        headers = {"Retry-After": str(RETRY_AFTER_SECONDS)}
    return JSONResponse(
        status_code=exc.http_status, content=exc.to_response(), headers=headers,
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    logger.info(
        "Rejected request: %s", ", ".join(d["field"] for d in details),
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, details=details,
        ),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled {type(exc).__name__}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )
