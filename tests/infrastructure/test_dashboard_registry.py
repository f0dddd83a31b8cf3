"""Dashboard registry tests - process-wide lifecycle and coordinator wiring."""

import pytest

from wallboard.config import Settings
from wallboard.infrastructure import dashboard_registry


async def test_registry_lifecycle():
    settings = Settings(_env_file=None, refresh_debounce_ms=50)
    dashboard = dashboard_registry.init_dashboard(settings)
    try:
        assert dashboard_registry.get_dashboard() is dashboard
        assert dashboard.orchestrator.refresh_delay_seconds == 0.05
        assert dashboard.orchestrator.cache.ttl_seconds == 300
    finally:
        await dashboard_registry.close_dashboard()
    with pytest.raises(RuntimeError):
        dashboard_registry.get_dashboard()


async def test_coordinator_is_wired_to_orchestrator():
    dashboard = dashboard_registry.init_dashboard(Settings(_env_file=None))
    try:
        orchestrator = dashboard.orchestrator
        for t in ("weather", "news"):
            orchestrator.add_widget(t)
        first = orchestrator.widgets[0]
        dashboard.coordinator.start(0)
        dashboard.coordinator.hover(1)
        assert dashboard.coordinator.end() is True
        assert orchestrator.widgets[1] is first
    finally:
        await dashboard_registry.close_dashboard()
