"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Cache sweeper: background loop that eagerly purges expired entries.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from .cache import Cache

logger = logging.getLogger("memocache.sweeper")


@dataclass
class SweeperConfig:
    """
    Configuration for the cache sweeper.

    Attributes:
        interval_s: Seconds between sweeps.
        shutdown_timeout_s: Grace period for the loop to exit on shutdown.
    """

    interval_s: float = 60.0
    shutdown_timeout_s: float = 5.0


class CacheSweeper:
    """
    Periodically calls ``Cache.purge_expired`` so expired entries do not
    accumulate when nobody reads them again.
    """

    def __init__(self, cache: Cache, *, config: SweeperConfig | None = None) -> None:
        self._cache = cache
        self._config = config or SweeperConfig()
        self._running = False
        self._task: asyncio.Task[None] | None = None
        self._total_swept = 0

    async def start(self) -> None:
        """Start the sweep loop in the background."""
        if self._running:
            raise RuntimeError("CacheSweeper is already running")
        if self._config.interval_s <= 0:
            raise ValueError("interval_s must be > 0")

        self._running = True
        self._task = asyncio.create_task(self._loop())
        logger.info(
            "CacheSweeper started (prefix=%s, interval=%.1fs)",
            self._cache.prefix,
            self._config.interval_s,
        )

    async def shutdown(self) -> None:
        """Stop the sweep loop, waiting up to ``shutdown_timeout_s``."""
        self._running = False

        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await asyncio.wait_for(self._task, timeout=self._config.shutdown_timeout_s)
            except (asyncio.CancelledError, asyncio.TimeoutError):
                pass

        self._task = None
        logger.info(
            "CacheSweeper shut down (prefix=%s, swept=%d)",
            self._cache.prefix,
            self._total_swept,
        )

    @property
    def is_running(self) -> bool:
        """Whether the sweep loop is active."""
        return self._running

    @property
    def total_swept(self) -> int:
        """Entries removed by this sweeper since construction."""
        return self._total_swept

    async def sweep_once(self) -> int:
        """Run a single sweep immediately."""
        removed = await self._cache.purge_expired()
        self._total_swept += removed
        return removed

    async def _loop(self) -> None:
        """Main sweep loop."""
        while self._running:
            try:
                await asyncio.sleep(self._config.interval_s)
                if not self._running:
                    break
                await self.sweep_once()
            except asyncio.CancelledError:
                break
            except Exception:
                logger.exception("Cache sweep failed (prefix=%s)", self._cache.prefix)
