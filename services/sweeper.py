"""Periodic sweep of expired cache entries."""

import asyncio
import logging
from typing import Optional

from config import CACHE_SWEEP_INTERVAL_MS
from services.cache import TTLCache

logger = logging.getLogger(__name__)


class CacheSweeper:
    """Runs ``cache.cleanup()`` on an asyncio task every ``interval_ms``."""

    def __init__(self, cache: TTLCache, interval_ms: float = CACHE_SWEEP_INTERVAL_MS):
        self.cache = cache
        self.interval_ms = interval_ms
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def sweep_once(self) -> int:
        """Run a single cleanup pass and return how many entries were removed."""
        try:
            return self.cache.cleanup()
        except Exception as e:
            logger.error(f"Cache sweep failed: {e}")
            return 0

    async def _run(self):
        while True:
            await asyncio.sleep(self.interval_ms / 1000)
            self.sweep_once()

    def start(self):
        """Schedule the sweep loop on the running event loop."""
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.info(f"Cache sweep scheduled every {self.interval_ms / 1000:.0f}s")

    async def stop(self):
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Cache sweep stopped")
