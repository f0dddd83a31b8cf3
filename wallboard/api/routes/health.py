"""Health & Readiness - liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 until the dashboard singleton exists (readiness)
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from wallboard.infrastructure import dashboard_registry

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness check. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "wallboard-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check():
    """Readiness check - includes widget and cache counts."""
    dashboard = dashboard_registry.dashboard
    if dashboard is None:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "dashboard_uninitialized",
            },
        )
    orchestrator = dashboard.orchestrator
    return {
        "status": "ready",
        "checks": {
            "widgets": len(orchestrator.widgets),
            "cache_entries": orchestrator.cache.size(),
        },
    }
