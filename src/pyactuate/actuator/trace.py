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
"""Trace repository — recent request/response traces."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Protocol, runtime_checkable

DEFAULT_CAPACITY = 100


@dataclass(frozen=True)
class Trace:
    """One captured exchange."""

    info: dict[str, Any]
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def to_dict(self) -> dict[str, Any]:
        return {"timestamp": self.timestamp.isoformat(), "info": self.info}


@runtime_checkable
class TraceRepository(Protocol):
    """Stores traces and returns them newest first."""

    def add(self, info: dict[str, Any]) -> None: ...

    def find_all(self) -> list[Trace]: ...


class InMemoryTraceRepository:
    """Fixed-size ring buffer of traces; the oldest is dropped when full."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._traces: deque[Trace] = deque(maxlen=capacity)
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._traces.maxlen or DEFAULT_CAPACITY

    def add(self, info: dict[str, Any]) -> None:
        with self._lock:
            self._traces.append(Trace(info=dict(info)))

    def find_all(self) -> list[Trace]:
        with self._lock:
            return list(reversed(self._traces))

    def clear(self) -> None:
        with self._lock:
            self._traces.clear()
