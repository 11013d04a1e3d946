from __future__ import annotations

import asyncio
import uuid
from collections.abc import Mapping

import pytest

from memocache import Cache, NoOpCacheMetrics, PrometheusCacheMetrics


def run_async(coro):
    return asyncio.run(coro)


class _RecordingMetrics:
    def __init__(self) -> None:
        self.counts: dict[str, int] = {}
        self.tags: list[Mapping[str, str] | None] = []

    def incr(
        self, name: str, value: int = 1, *, tags: Mapping[str, str] | None = None
    ) -> None:
        self.counts[name] = self.counts.get(name, 0) + value
        self.tags.append(tags)


def test_cache_reports_hits_misses_and_deletions():
    async def scenario() -> None:
        metrics = _RecordingMetrics()
        cache = Cache(prefix="m:", metrics=metrics)

        await cache.set("user:1", 1)
        await cache.set("user:2", 2)
        await cache.get("user:1")
        await cache.get("absent")
        await cache.delete("absent")
        await cache.delete("user:1")
        await cache.delete_pattern("user:*")

        assert metrics.counts == {
            "cache_sets_total": 2,
            "cache_hits_total": 1,
            "cache_misses_total": 1,
            "cache_deletes_total": 1,
            "cache_pattern_deleted_total": 1,
        }
        assert all(tags == {"prefix": "m:"} for tags in metrics.tags)

    run_async(scenario())


def test_lazy_eviction_counts_as_expired_miss():
    async def scenario() -> None:
        now = [0.0]
        metrics = _RecordingMetrics()
        cache = Cache(clock=lambda: now[0], metrics=metrics)
        await cache.set("k", "v", ttl=1)
        now[0] = 5.0

        assert await cache.get("k") is None
        assert metrics.counts["cache_expired_total"] == 1
        assert metrics.counts["cache_misses_total"] == 1

    run_async(scenario())


def test_noop_metrics_accepts_any_call():
    NoOpCacheMetrics().incr("anything", 3, tags={"a": "b"})


def test_prometheus_metrics_counts_into_given_registry():
    prometheus_client = pytest.importorskip("prometheus_client")
    registry = prometheus_client.CollectorRegistry()
    metrics = PrometheusCacheMetrics(namespace="memotest", registry=registry)

    async def scenario() -> None:
        cache = Cache(prefix="p:", metrics=metrics)
        await cache.set("k", "v")
        await cache.get("k")
        await cache.get("k")

    run_async(scenario())

    assert registry.get_sample_value("memotest_cache_hits_total", {"prefix": "p:"}) == 2.0
    assert registry.get_sample_value("memotest_cache_sets_total", {"prefix": "p:"}) == 1.0


def test_prometheus_adapters_share_counters_in_default_registry():
    prometheus_client = pytest.importorskip("prometheus_client")
    registry = prometheus_client.REGISTRY
    suffix = uuid.uuid4().hex[:8]
    first = Cache(prefix=f"a-{suffix}:", metrics=PrometheusCacheMetrics())
    second = Cache(prefix=f"b-{suffix}:", metrics=PrometheusCacheMetrics())

    async def scenario() -> None:
        await first.set("k", 1)
        await second.set("k", 2)
        await second.get("k")
        await second.delete("k")

    run_async(scenario())

    assert registry.get_sample_value(
        "memocache_cache_sets_total", {"prefix": f"a-{suffix}:"}
    ) == 1.0
    assert registry.get_sample_value(
        "memocache_cache_sets_total", {"prefix": f"b-{suffix}:"}
    ) == 1.0
    assert registry.get_sample_value(
        "memocache_cache_deletes_total", {"prefix": f"b-{suffix}:"}
    ) == 1.0


def test_prometheus_adapters_on_one_registry_accumulate():
    prometheus_client = pytest.importorskip("prometheus_client")
    registry = prometheus_client.CollectorRegistry()
    first = PrometheusCacheMetrics(namespace="shared", registry=registry)
    second = PrometheusCacheMetrics(namespace="shared", registry=registry)

    first.incr("cache_hits_total", tags={"prefix": "x:"})
    second.incr("cache_hits_total", 2, tags={"prefix": "x:"})
    second.incr("cache_swept_total", 4)

    assert registry.get_sample_value("shared_cache_hits_total", {"prefix": "x:"}) == 3.0
    assert registry.get_sample_value("shared_cache_swept_total") == 4.0
