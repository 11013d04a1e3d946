"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: types.py.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """One stored value with its absolute expiry in epoch milliseconds."""

    value: Any
    expires_at_ms: float

    def is_expired(self, now_ms: float) -> bool:
        return now_ms > self.expires_at_ms


@dataclass(frozen=True, slots=True)
class CacheOptions:
    """
    Per-call options accepted by ``Cache.set``.

    Attributes:
        ttl: Lifetime in seconds. Falsy values (``None`` and ``0``) fall back
            to the cache's default TTL.
        compress: Accepted for API compatibility; has no effect.
    """

    ttl: float | None = None
    compress: bool = False


class CacheBackend(Protocol):
    """Async key-value surface implemented by ``Cache``."""

    async def get(self, key: str) -> Any | None: ...

    async def set(
        self,
        key: str,
        value: Any,
        options: CacheOptions | None = None,
        *,
        ttl: float | None = None,
        compress: bool | None = None,
    ) -> None: ...

    async def delete(self, key: str) -> None: ...

    async def delete_pattern(self, pattern: str) -> int: ...
