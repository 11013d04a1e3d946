"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Factory helpers for building caches from environment variables.
"""

from __future__ import annotations

from collections.abc import Callable

from .cache import Cache
from .metrics import CacheMetrics
from .settings import CacheSettings
from .sweeper import CacheSweeper, SweeperConfig


def create_cache_from_env(
    *,
    settings: CacheSettings | None = None,
    metrics: CacheMetrics | None = None,
    clock: Callable[[], float] | None = None,
) -> Cache:
    """
    Create a cache from `MEMOCACHE_*` environment variables.

    Explicit `settings` skip the environment lookup.
    """
    resolved = settings or CacheSettings.from_env()
    return Cache(
        prefix=resolved.prefix,
        default_ttl=resolved.default_ttl_s,
        strict_patterns=resolved.strict_patterns,
        clock=clock,
        metrics=metrics,
    )


def create_sweeper_from_env(
    cache: Cache,
    *,
    settings: CacheSettings | None = None,
) -> CacheSweeper | None:
    """
    Create a sweeper for `cache` when `MEMOCACHE_SWEEP_INTERVAL_S` is set.

    Returns ``None`` when sweeping is disabled, leaving expiry lazy.
    """
    resolved = settings or CacheSettings.from_env()
    if resolved.sweep_interval_s is None:
        return None
    return CacheSweeper(cache, config=SweeperConfig(interval_s=resolved.sweep_interval_s))
