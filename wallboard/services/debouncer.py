"""Debouncer - collapses bursts of calls into one trailing invocation.

Invariants:
    - Each call() resets the timer; only the last call of a burst runs, exactly once
    - Superseded calls are discarded (no queue, no call counting)
    - Target exceptions are logged, never raised into the event loop
    - One instance per logical operation; never shared between unrelated operations

Design Decisions:
    - loop.call_later over a sleeping task: cancelling a TimerHandle is cheap and synchronous
    - Coroutine targets run as tracked tasks so wait_running() can await them (tests, shutdown)
"""

import asyncio
import inspect
import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class Debouncer:
    """Trailing-edge debounce around a sync or async target."""

    def __init__(self, target: Callable[..., Any], delay_seconds: float, name: str = ""):
        self._target = target
        self.delay_seconds = delay_seconds
        self.name = name or getattr(target, "__name__", "debounced")
        self._handle: asyncio.TimerHandle | None = None
        self._pending_args: tuple[tuple, dict] | None = None
        self._running: set[asyncio.Task] = set()

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def call(self, *args: Any, **kwargs: Any) -> None:
        """Schedule target(*args, **kwargs) after the delay, replacing any pending call."""
        self.cancel_pending()
        loop = asyncio.get_running_loop()
        self._pending_args = (args, kwargs)
        self._handle = loop.call_later(self.delay_seconds, self._fire)

    def cancel_pending(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
        self._handle = None
        self._pending_args = None

    def flush_pending(self) -> None:
        """Run the pending call now instead of waiting for the timer."""
        if self._handle is None:
            return
        self._handle.cancel()
        self._fire()

    async def wait_running(self) -> None:
        """Await coroutine targets that already fired."""
        while self._running:
            await asyncio.gather(*list(self._running), return_exceptions=True)

    def _fire(self) -> None:
        args, kwargs = self._pending_args or ((), {})
        self._handle = None
        self._pending_args = None
        try:
            result = self._target(*args, **kwargs)
        except Exception as e:
            logger.error(f"Debounced call {self.name} failed: {e}", exc_info=True)
            return
        if inspect.isawaitable(result):
            task = asyncio.ensure_future(result)
            self._running.add(task)
            task.add_done_callback(self._on_task_done)

    def _on_task_done(self, task: asyncio.Task) -> None:
        self._running.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error(
                f"Debounced call {self.name} failed: {exc}", exc_info=exc,
            )
