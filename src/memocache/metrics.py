"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Metrics adapters for cache observability.
"""

from __future__ import annotations

from collections.abc import Mapping
from threading import Lock
from typing import Any, Protocol


class CacheMetrics(Protocol):
    """Minimal metrics interface for cache instrumentation."""

    def incr(
        self, name: str, value: int = 1, *, tags: Mapping[str, str] | None = None
    ) -> None:
        """Increment a counter metric."""


class NoOpCacheMetrics:
    """Default metrics sink when no metrics backend is provided."""

    def incr(
        self, name: str, value: int = 1, *, tags: Mapping[str, str] | None = None
    ) -> None:
        _ = name
        _ = value
        _ = tags


# Counters are process-wide per registry: every adapter instance pointed at the
# same registry and namespace shares them, and caches are told apart by label.
_SHARED_COUNTERS: dict[tuple[Any, str, str, tuple[str, ...]], Any] = {}
_LOCK = Lock()


def _shared_counter(
    counter_cls: Any,
    *,
    registry: Any,
    namespace: str,
    name: str,
    label_names: tuple[str, ...],
) -> Any:
    key = (registry, namespace, name, label_names)
    with _LOCK:
        counter = _SHARED_COUNTERS.get(key)
        if counter is None:
            counter = counter_cls(
                name=name,
                documentation=f"memocache {name.removesuffix('_total').replace('_', ' ')}",
                namespace=namespace,
                labelnames=label_names,
                registry=registry,
            )
            _SHARED_COUNTERS[key] = counter
        return counter


class PrometheusCacheMetrics(CacheMetrics):
    """
    Prometheus-backed cache metrics adapter.

    Requires `prometheus_client` package. Any number of caches may each hold
    their own adapter; they count into the same counters, labelled by cache
    prefix. Pass `registry` to keep counters out of the default registry.
    """

    def __init__(self, *, namespace: str = "memocache", registry: Any | None = None) -> None:
        try:
            from prometheus_client import REGISTRY, Counter
        except ModuleNotFoundError as exc:  # pragma: no cover
            raise RuntimeError(
                "PrometheusCacheMetrics requires `prometheus_client` to be installed."
            ) from exc

        self._counter_cls = Counter
        self._namespace = namespace
        self._registry = registry if registry is not None else REGISTRY

    def incr(self, name: str, value: int = 1, *, tags: Mapping[str, str] | None = None) -> None:
        labels = dict(tags or {})
        counter = _shared_counter(
            self._counter_cls,
            registry=self._registry,
            namespace=self._namespace,
            name=name,
            label_names=tuple(sorted(labels)),
        )
        if labels:
            counter.labels(**{k: str(v) for k, v in labels.items()}).inc(value)
        else:
            counter.inc(value)
