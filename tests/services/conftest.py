"""Service test fixtures - orchestrator wired to fakes + FastAPI test client.

Invariants:
    - Every test gets a fresh orchestrator, cache and fake data source
    - get_dashboard dependency overridden so routes hit the test orchestrator
    - Debounce delay shrunk to 10 ms so refresh tests stay fast

Design Decisions:
    - Orchestrator built synchronously: it needs a running loop only when an intent spawns a fetch
"""

import pytest
from httpx import ASGITransport, AsyncClient

from wallboard.core.widget_cache import WidgetCache
from wallboard.infrastructure.dashboard_registry import build_dashboard, get_dashboard
from wallboard.main import app
from wallboard.services.widget_orchestrator import WidgetOrchestrator

from tests.services.fakes import FakeClock, FakeDataSource, sequential_ids


@pytest.fixture
def data_source():
    return FakeDataSource()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return WidgetCache(ttl_seconds=300, clock=clock)


@pytest.fixture
async def orchestrator(data_source, cache):
    orch = WidgetOrchestrator(
        data_source, cache,
        refresh_delay_seconds=0.01,
        fetch_timeout_seconds=1.0,
        id_factory=sequential_ids(),
        clock=lambda: 1_700_000_000_000.0,
    )
    yield orch
    await orch.close()


@pytest.fixture
def dashboard(orchestrator):
    return build_dashboard(orchestrator)


@pytest.fixture
async def client(dashboard):
    """FastAPI test client with the dashboard dependency overridden."""
    app.dependency_overrides[get_dashboard] = lambda: dashboard
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
