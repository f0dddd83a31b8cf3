"""Wallboard API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map WallboardError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Dashboard singleton built on startup and closed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - widget_stream and widget_drag registered before widgets so /widgets/stream and
      /widgets/drag/* win over /widgets/{widget_id}
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wallboard.api.error_handlers import register_error_handlers
from wallboard.api.routes import health, widget_drag, widget_stream, widgets
from wallboard.config import get_settings
from wallboard.infrastructure.dashboard_registry import close_dashboard, init_dashboard
from wallboard.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_dashboard(settings)
    logger.info("Wallboard API started")
    yield
    await close_dashboard()
    logger.info("Wallboard API shutting down")


app = FastAPI(
    title="Wallboard API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(widget_stream.router)
app.include_router(widget_drag.router)
app.include_router(widgets.router)

register_error_handlers(app)
