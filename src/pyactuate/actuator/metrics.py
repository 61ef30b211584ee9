# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Metric readers and the public metrics exposed by the metrics endpoint."""

from __future__ import annotations

import os
import platform
import resource
import threading
import time
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class Metric:
    """A named numeric value with the time it was taken."""

    name: str
    value: float
    timestamp: float = field(default_factory=time.time)

    def increment(self, amount: float = 1) -> Metric:
        return replace(self, value=self.value + amount, timestamp=time.time())


@runtime_checkable
class MetricReader(Protocol):
    """Read access to a set of metrics."""

    def find_one(self, name: str) -> Metric | None: ...

    def find_all(self) -> Iterable[Metric]: ...

    def count(self) -> int: ...


@runtime_checkable
class PublicMetrics(Protocol):
    """Source of the metrics shown at ``/actuator/metrics``."""

    def metrics(self) -> Iterable[Metric]: ...


class InMemoryMetricRepository:
    """Thread-safe metric store kept in a dict."""

    def __init__(self) -> None:
        self._metrics: dict[str, Metric] = {}
        self._lock = threading.Lock()

    def set(self, name: str, value: float) -> None:
        with self._lock:
            self._metrics[name] = Metric(name=name, value=value)

    def increment(self, name: str, amount: float = 1) -> None:
        with self._lock:
            current = self._metrics.get(name)
            self._metrics[name] = current.increment(amount) if current else Metric(name=name, value=amount)

    def reset(self, name: str) -> None:
        with self._lock:
            self._metrics.pop(name, None)

    def find_one(self, name: str) -> Metric | None:
        with self._lock:
            return self._metrics.get(name)

    def find_all(self) -> list[Metric]:
        with self._lock:
            return list(self._metrics.values())

    def count(self) -> int:
        with self._lock:
            return len(self._metrics)


class PrometheusMetricReader:
    """Reads samples from a ``prometheus_client`` collector registry."""

    def __init__(self, registry: Any = None) -> None:
        if registry is None:
            from prometheus_client import REGISTRY

            registry = REGISTRY
        self._registry = registry

    def find_one(self, name: str) -> Metric | None:
        for metric in self.find_all():
            if metric.name == name:
                return metric
        return None

    def find_all(self) -> list[Metric]:
        now = time.time()
        metrics: list[Metric] = []
        for family in self._registry.collect():
            for sample in family.samples:
                labels = ",".join(f"{k}={v}" for k, v in sorted(sample.labels.items()))
                name = f"{sample.name}{{{labels}}}" if labels else sample.name
                metrics.append(Metric(name=name, value=sample.value, timestamp=sample.timestamp or now))
        return metrics

    def count(self) -> int:
        return len(self.find_all())


class VanillaPublicMetrics:
    """Process metrics plus everything in a :class:`MetricReader`."""

    def __init__(self, reader: MetricReader) -> None:
        self._reader = reader
        self._started = time.monotonic()

    def metrics(self) -> list[Metric]:
        result = [
            Metric(name="mem", value=_max_rss_kb()),
            Metric(name="processors", value=os.cpu_count() or 1),
            Metric(name="uptime", value=round((time.monotonic() - self._started) * 1000)),
            Metric(name="threads", value=threading.active_count()),
        ]
        result.extend(self._reader.find_all())
        return result


def _max_rss_kb() -> float:
    rss = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    # macOS reports in bytes, Linux in KB
    return rss / 1024 if platform.system() == "Darwin" else float(rss)
