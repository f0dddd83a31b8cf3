"""Dashboard Registry - process-wide orchestrator + drag coordinator, built on startup.

Invariants:
    - One Dashboard per process; init_dashboard() replaces it, close_dashboard() tears it down
    - get_dashboard() raises if called before startup

Design Decisions:
    - Singleton initialized from FastAPI lifespan (no import-time side effects)
    - Exposed as a FastAPI dependency so tests override it like any other dependency
"""

import logging
from dataclasses import dataclass

from wallboard.config import Settings
from wallboard.core.reorder_coordinator import ReorderCoordinator
from wallboard.core.widget_cache import WidgetCache
from wallboard.core.widget_catalog import DEFAULT_CATALOG
from wallboard.services.widget_data_source import MockWidgetDataSource
from wallboard.services.widget_orchestrator import WidgetOrchestrator

logger = logging.getLogger(__name__)


@dataclass
class Dashboard:
    orchestrator: WidgetOrchestrator
    coordinator: ReorderCoordinator


def build_dashboard(orchestrator: WidgetOrchestrator) -> Dashboard:
    return Dashboard(
        orchestrator=orchestrator,
        coordinator=ReorderCoordinator(orchestrator.reorder_widgets),
    )


def build_orchestrator(settings: Settings) -> WidgetOrchestrator:
    data_source = MockWidgetDataSource(
        latency_min_seconds=settings.mock_latency_min_seconds,
        latency_max_seconds=settings.mock_latency_max_seconds,
        failure_rate=settings.mock_failure_rate,
    )
    return WidgetOrchestrator(
        data_source,
        WidgetCache(ttl_seconds=settings.cache_ttl_seconds),
        DEFAULT_CATALOG,
        refresh_delay_seconds=settings.refresh_debounce_ms / 1000,
        fetch_timeout_seconds=settings.fetch_timeout_seconds,
    )


# Singleton (initialized on startup)
dashboard: Dashboard | None = None


def init_dashboard(settings: Settings) -> Dashboard:
    global dashboard
    dashboard = build_dashboard(build_orchestrator(settings))
    return dashboard


async def close_dashboard() -> None:
    global dashboard
    if dashboard is not None:
        await dashboard.orchestrator.close()
    dashboard = None


def get_dashboard() -> Dashboard:
    """FastAPI dependency for the process-wide dashboard."""
    if not dashboard:
        raise RuntimeError("Dashboard not initialized")
    return dashboard
