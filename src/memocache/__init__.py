"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

In-process key-value cache with TTL expiry and wildcard deletion.

Quick start::

    from memocache import Cache

    cache = Cache(prefix="app:", default_ttl=300)
    await cache.set("user:1", {"name": "Ada"}, ttl=60)
    user = await cache.get("user:1")
    removed = await cache.delete_pattern("user:*")
"""

from types import SimpleNamespace

from .cache import DEFAULT_PREFIX, DEFAULT_TTL_S, Cache
from .factory import create_cache_from_env, create_sweeper_from_env
from .metrics import CacheMetrics, NoOpCacheMetrics, PrometheusCacheMetrics
from .patterns import compile_key_pattern, translate_pattern
from .settings import CacheSettings
from .sweeper import CacheSweeper, SweeperConfig
from .types import CacheBackend, CacheEntry, CacheOptions

default = SimpleNamespace(Cache=Cache)

__all__ = [
    "Cache",
    "CacheBackend",
    "CacheEntry",
    "CacheOptions",
    "CacheSettings",
    "CacheSweeper",
    "SweeperConfig",
    "CacheMetrics",
    "NoOpCacheMetrics",
    "PrometheusCacheMetrics",
    "DEFAULT_PREFIX",
    "DEFAULT_TTL_S",
    "compile_key_pattern",
    "translate_pattern",
    "create_cache_from_env",
    "create_sweeper_from_env",
    "default",
]
