"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Cache settings and explicit config loading.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


def _env_first(*names: str, default: str | None = None) -> str | None:
    """
    Return the first non-empty environment variable in `names`.

    Args:
        *names: Environment variable names to check in order.
        default: Value returned if no non-empty variable is found.
    """
    for name in names:
        raw = os.getenv(name)
        if raw is None:
            continue
        value = raw.strip()
        if value:
            return value
    return default


def _env_float(name: str, default: str) -> float:
    raw = _env_first(name, default=default) or default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


@dataclass(frozen=True, slots=True)
class CacheSettings:
    """Explicit settings used to build a cache and its optional sweeper."""

    prefix: str = "cache:"
    default_ttl_s: float = 3600.0
    strict_patterns: bool = False
    sweep_interval_s: float | None = None

    @staticmethod
    def from_env() -> "CacheSettings":
        """Load settings from `MEMOCACHE_*` environment variables."""
        sweep = _env_float("MEMOCACHE_SWEEP_INTERVAL_S", "0")
        return CacheSettings(
            prefix=_env_first("MEMOCACHE_PREFIX", default="cache:") or "cache:",
            default_ttl_s=_env_float("MEMOCACHE_DEFAULT_TTL_S", "3600"),
            strict_patterns=(
                (_env_first("MEMOCACHE_STRICT_PATTERNS", default="") or "").lower()
                in _TRUTHY
            ),
            sweep_interval_s=sweep if sweep > 0 else None,
        )
