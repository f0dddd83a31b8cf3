"""Debouncer - trailing-edge collapse, flush, cancel and async target tests.

Design Decisions:
    - Real asyncio timers with short delays; the burst test uses the production 300 ms window
"""

import asyncio
import logging

from wallboard.services.debouncer import Debouncer


async def test_burst_collapses_to_last_call():
    calls = []
    debouncer = Debouncer(lambda *a: calls.append(a), 0.3)

    for i in range(5):
        debouncer.call("weather", i)
        await asyncio.sleep(0.02)

    assert calls == []
    await asyncio.sleep(0.4)
    assert calls == [("weather", 4)]


async def test_calls_spaced_beyond_delay_each_run():
    calls = []
    debouncer = Debouncer(calls.append, 0.01)

    debouncer.call(1)
    await asyncio.sleep(0.05)
    debouncer.call(2)
    await asyncio.sleep(0.05)

    assert calls == [1, 2]


async def test_pending_flag_tracks_timer():
    debouncer = Debouncer(lambda: None, 0.01)
    assert not debouncer.pending
    debouncer.call()
    assert debouncer.pending
    await asyncio.sleep(0.05)
    assert not debouncer.pending


async def test_cancel_pending_discards_call():
    calls = []
    debouncer = Debouncer(calls.append, 0.01)
    debouncer.call(1)
    debouncer.cancel_pending()
    await asyncio.sleep(0.05)
    assert calls == []


async def test_flush_runs_pending_call_immediately():
    calls = []
    debouncer = Debouncer(calls.append, 10)
    debouncer.call(1)
    debouncer.call(2)
    debouncer.flush_pending()
    assert calls == [2]
    assert not debouncer.pending


async def test_flush_without_pending_is_noop():
    calls = []
    debouncer = Debouncer(calls.append, 0.01)
    debouncer.flush_pending()
    assert calls == []


async def test_kwargs_are_forwarded():
    calls = []
    debouncer = Debouncer(lambda **kw: calls.append(kw), 10)
    debouncer.call(widget_id="w1")
    debouncer.flush_pending()
    assert calls == [{"widget_id": "w1"}]


async def test_async_target_runs_as_task():
    done = []

    async def target(value):
        await asyncio.sleep(0)
        done.append(value)

    debouncer = Debouncer(target, 10)
    debouncer.call("x")
    debouncer.flush_pending()
    await debouncer.wait_running()
    assert done == ["x"]


async def test_target_exception_is_logged_not_raised(caplog):
    def boom():
        raise RuntimeError("kaput")

    debouncer = Debouncer(boom, 10, name="boom")
    with caplog.at_level(logging.ERROR):
        debouncer.call()
        debouncer.flush_pending()
    assert "kaput" in caplog.text


async def test_async_target_exception_is_logged(caplog):
    async def boom():
        raise RuntimeError("async kaput")

    debouncer = Debouncer(boom, 10)
    with caplog.at_level(logging.ERROR):
        debouncer.call()
        debouncer.flush_pending()
        await debouncer.wait_running()
        await asyncio.sleep(0)
    assert "async kaput" in caplog.text
