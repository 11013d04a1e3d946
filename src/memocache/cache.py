"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

In-memory TTL cache with prefix namespacing and wildcard deletion.
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable
from typing import Any

from .metrics import CacheMetrics, NoOpCacheMetrics
from .patterns import compile_key_pattern
from .types import CacheBackend, CacheEntry, CacheOptions

logger = logging.getLogger("memocache.cache")

DEFAULT_PREFIX = "cache:"
DEFAULT_TTL_S = 3600


def _ttl_or(ttl: float | None, fallback: float) -> float:
    """Return `ttl` unless it is unset: ``None``, ``0`` or NaN."""
    if not ttl or math.isnan(ttl):
        return fallback
    return ttl


class Cache(CacheBackend):
    """
    Process-local key-value cache with lazy TTL expiry.

    Every logical key is stored under ``prefix + key``. Expired entries stay
    in the store until a ``get`` touches them, a pattern deletion matches
    them, or ``purge_expired`` runs. Operations are coroutines but never
    await, so each one completes without interleaving with other tasks.
    Nothing bounds the number of live entries.
    """

    def __init__(
        self,
        *,
        prefix: str | None = None,
        default_ttl: float | None = None,
        strict_patterns: bool = False,
        clock: Callable[[], float] | None = None,
        metrics: CacheMetrics | None = None,
    ) -> None:
        self._prefix = prefix or DEFAULT_PREFIX
        self._default_ttl = _ttl_or(default_ttl, DEFAULT_TTL_S)
        self._strict_patterns = strict_patterns
        self._clock = clock or time.time
        self._metrics: CacheMetrics = metrics or NoOpCacheMetrics()
        self._store: dict[str, CacheEntry] = {}
        self._tags = {"prefix": self._prefix}

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def default_ttl(self) -> float:
        return self._default_ttl

    def __len__(self) -> int:
        """Number of physically stored entries, expired ones included."""
        return len(self._store)

    def _now_ms(self) -> float:
        return self._clock() * 1000

    async def get(self, key: str) -> Any | None:
        """Return the live value for `key`, or ``None`` on a miss."""
        full_key = self._prefix + key
        entry = self._store.get(full_key)
        if entry is None:
            self._metrics.incr("cache_misses_total", tags=self._tags)
            return None
        if entry.is_expired(self._now_ms()):
            self._store.pop(full_key, None)
            self._metrics.incr("cache_expired_total", tags=self._tags)
            self._metrics.incr("cache_misses_total", tags=self._tags)
            logger.debug("Evicted expired cache entry %s", full_key)
            return None
        self._metrics.incr("cache_hits_total", tags=self._tags)
        return entry.value

    async def set(
        self,
        key: str,
        value: Any,
        options: CacheOptions | None = None,
        *,
        ttl: float | None = None,
        compress: bool | None = None,
    ) -> None:
        """
        Store `value` under `key`, replacing any previous entry.

        `ttl` is in seconds. An unset TTL (``None``, ``0`` or NaN) means "not
        provided": the keyword falls back to ``options.ttl``, which falls back
        to the default TTL. `compress` is accepted and ignored.
        """
        opts = options or CacheOptions()
        _ = compress
        resolved_ttl = _ttl_or(ttl, _ttl_or(opts.ttl, self._default_ttl))

        self._store[self._prefix + key] = CacheEntry(
            value=value,
            expires_at_ms=self._now_ms() + resolved_ttl * 1000,
        )
        self._metrics.incr("cache_sets_total", tags=self._tags)

    async def delete(self, key: str) -> None:
        """Remove `key` if present."""
        if self._store.pop(self._prefix + key, None) is not None:
            self._metrics.incr("cache_deletes_total", tags=self._tags)

    async def delete_pattern(self, pattern: str, *, strict: bool | None = None) -> int:
        """
        Delete every stored key matching the wildcard `pattern`.

        `*` matches any run of characters. Unless strict mode is on, other
        regex metacharacters in `pattern` act as regex syntax. Expired entries
        that were never read are matched and counted like live ones.

        Returns:
            Number of deleted entries.

        Raises:
            re.error: If `pattern` does not compile in non-strict mode.
        """
        use_strict = self._strict_patterns if strict is None else strict
        matcher = compile_key_pattern(self._prefix, pattern, strict=use_strict)

        deleted = 0
        for full_key in list(self._store):
            if matcher.search(full_key):
                del self._store[full_key]
                deleted += 1

        if deleted:
            self._metrics.incr("cache_pattern_deleted_total", deleted, tags=self._tags)
        logger.debug("Pattern %r deleted %d cache entries", pattern, deleted)
        return deleted

    async def purge_expired(self) -> int:
        """Remove every expired entry now and return how many were removed."""
        now_ms = self._now_ms()
        expired = [k for k, entry in self._store.items() if entry.is_expired(now_ms)]
        for full_key in expired:
            del self._store[full_key]

        if expired:
            self._metrics.incr("cache_swept_total", len(expired), tags=self._tags)
            logger.debug("Purged %d expired cache entries", len(expired))
        return len(expired)
