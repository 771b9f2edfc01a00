"""Tests for the periodic cache sweeper."""

import asyncio
from unittest.mock import MagicMock

from services.cache import TTLCache
from services.sweeper import CacheSweeper


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_sweep_once_removes_expired_entries():
    clock = FakeClock()
    cache = TTLCache(clock=clock)
    cache.set("stale", 1, ttl=100)
    cache.set("fresh", 2, ttl=10000)
    clock.now = 500

    sweeper = CacheSweeper(cache, interval_ms=1000)

    assert sweeper.sweep_once() == 1
    assert cache.size() == 1


def test_sweep_once_logs_and_survives_errors():
    cache = MagicMock()
    cache.cleanup.side_effect = RuntimeError("boom")

    assert CacheSweeper(cache).sweep_once() == 0


def test_sweeper_runs_periodically_until_stopped():
    cache = MagicMock()
    cache.cleanup.return_value = 0
    sweeper = CacheSweeper(cache, interval_ms=10)

    async def run():
        sweeper.start()
        sweeper.start()  # second start is a no-op
        assert sweeper.running
        await asyncio.sleep(0.1)
        await sweeper.stop()

    asyncio.run(run())

    assert not sweeper.running
    assert cache.cleanup.call_count >= 2


def test_stop_without_start_is_noop():
    sweeper = CacheSweeper(MagicMock())

    asyncio.run(sweeper.stop())

    assert not sweeper.running
