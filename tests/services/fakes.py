"""Test doubles for the orchestrator boundary - data source, clock, id factory.

Invariants:
    - FakeDataSource records every fetch in .calls (widget types, in call order)
    - results[type] may be a payload or an exception instance (raised)
    - When .gate is set, every fetch blocks until gate.set() - lets tests interleave intents
"""

import asyncio
import itertools

from wallboard.core.domain_types import WidgetId


class FakeDataSource:
    """Controllable WidgetDataSource."""

    def __init__(self):
        self.calls: list[str] = []
        self.results: dict[str, object] = {}
        self.gate: asyncio.Event | None = None

    async def fetch_widget_data(self, widget_type: str):
        self.calls.append(widget_type)
        if self.gate is not None:
            await self.gate.wait()
        result = self.results.get(widget_type, {"value": f"{widget_type}-{len(self.calls)}"})
        if isinstance(result, BaseException):
            raise result
        return result


class FakeClock:
    """Manually advanced monotonic clock (seconds)."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def sequential_ids():
    counter = itertools.count()
    return lambda: WidgetId(f"widget-{next(counter)}")
