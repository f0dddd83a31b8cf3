"""Mock Widget Data Source - simulated backend with latency and random failures.

Invariants:
    - Every call sleeps a latency drawn from [latency_min_seconds, latency_max_seconds]
    - Fails with WidgetFetchError("Network error occurred") with probability failure_rate
    - Unknown types fail with WidgetFetchError("Unknown widget type")

Design Decisions:
    - Injectable random.Random: deterministic payloads and failures in tests
    - Payload builders keyed by type in a dict; adding a tile type means adding one builder
"""

import asyncio
import logging
import random
from collections.abc import Callable

from wallboard.core.errors import ErrorContext, WidgetFetchError

logger = logging.getLogger(__name__)

_LOCATIONS = ["New York", "London", "Tokyo", "Paris"]
_CONDITIONS = ["Sunny", "Cloudy", "Rainy"]
_SYMBOLS = ["AAPL", "GOOGL", "MSFT", "AMZN"]
_TOPICS = ["Tech News", "World News", "Business", "Sports"]


def _weather(rng: random.Random) -> dict:
    return {
        "value": f"{rng.randint(10, 29)}°C",
        "location": rng.choice(_LOCATIONS),
        "condition": rng.choice(_CONDITIONS),
    }


def _stock(rng: random.Random) -> dict:
    price = rng.uniform(100, 1100)
    change = rng.uniform(-5, 5)
    return {
        "value": f"${price:.2f}",
        "change": f"{'+' if change > 0 else ''}{change:.2f}%",
        "symbol": rng.choice(_SYMBOLS),
    }


def _news(rng: random.Random) -> dict:
    return {
        "value": f"{rng.randint(10, 59)} articles",
        "trending": rng.choice(_TOPICS),
        "updated": "Just now",
    }


PAYLOAD_BUILDERS: dict[str, Callable[[random.Random], dict]] = {
    "weather": _weather,
    "stock": _stock,
    "news": _news,
}


class MockWidgetDataSource:
    """Simulated per-type data backend."""

    def __init__(
        self,
        latency_min_seconds: float = 1.0,
        latency_max_seconds: float = 1.5,
        failure_rate: float = 0.1,
        rng: random.Random | None = None,
    ):
        self.latency_min_seconds = latency_min_seconds
        self.latency_max_seconds = latency_max_seconds
        self.failure_rate = failure_rate
        self._rng = rng or random.Random()

    async def fetch_widget_data(self, widget_type: str) -> dict:
        await asyncio.sleep(
            self._rng.uniform(self.latency_min_seconds, self.latency_max_seconds),
        )
        ctx = ErrorContext(widget_type=widget_type)
        if self._rng.random() < self.failure_rate:
            logger.info("Simulated network failure",
                extra={"widget_type": widget_type})
            raise WidgetFetchError("Network error occurred", ctx)
        builder = PAYLOAD_BUILDERS.get(widget_type)
        if builder is None:
            raise WidgetFetchError("Unknown widget type", ctx)
        return builder(self._rng)
