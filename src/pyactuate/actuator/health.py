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
"""Health indicators — the three health-check strategies and their result type.

A resolved strategy is one of:

- :class:`VanillaHealthIndicator` — nothing to check, always ``UP``
- :class:`SimpleHealthIndicator` — runs a validation query on one data source
- :class:`CompositeHealthIndicator` — named children, ``DOWN`` if any child is
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Protocol, TypeAlias, runtime_checkable

from sqlalchemy import Engine, text
from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)

UP = "UP"
DOWN = "DOWN"

DEFAULT_QUERY = "SELECT 'Hello'"

DataSource: TypeAlias = AsyncEngine | Engine
"""A checkable resource: a SQLAlchemy engine, async or sync."""

DATA_SOURCE_TYPES: tuple[type, ...] = (AsyncEngine, Engine)


@dataclass
class HealthStatus:
    """Health status for a single component."""

    status: str  # "UP", "DOWN"
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"status": self.status}
        result.update(self.details)
        return result


@runtime_checkable
class HealthIndicator(Protocol):
    """Anything that can report a :class:`HealthStatus`.

    Registering a bean that satisfies this protocol replaces the resolved
    strategy in the health endpoint.
    """

    async def health(self) -> HealthStatus: ...


@dataclass(frozen=True)
class VanillaHealthIndicator:
    """Reports ``UP`` unconditionally."""

    async def health(self) -> HealthStatus:
        return HealthStatus(status=UP)


@dataclass(frozen=True)
class SimpleHealthIndicator:
    """Checks one data source by running *query* against it."""

    data_source: Any
    query: str = DEFAULT_QUERY

    async def health(self) -> HealthStatus:
        try:
            if isinstance(self.data_source, AsyncEngine):
                database, result = await self._check_async(self.data_source)
            else:
                database, result = await asyncio.to_thread(self._check_sync, self.data_source)
        except Exception as exc:
            logger.warning("Health query failed on %r: %s", self.data_source, exc)
            return HealthStatus(status=DOWN, details={"error": f"{type(exc).__name__}: {exc}"})
        return HealthStatus(status=UP, details={"database": database, "hello": result})

    async def _check_async(self, engine: AsyncEngine) -> tuple[str, Any]:
        async with engine.connect() as conn:
            result = await conn.execute(text(self.query))
            return engine.dialect.name, result.scalar()

    def _check_sync(self, engine: Engine) -> tuple[str, Any]:
        with engine.connect() as conn:
            return engine.dialect.name, conn.execute(text(self.query)).scalar()


@dataclass(frozen=True)
class CompositeHealthIndicator:
    """Named child indicators, fixed at construction."""

    indicators: Mapping[str, HealthCheckStrategy] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "indicators", MappingProxyType(dict(self.indicators)))

    async def health(self) -> HealthStatus:
        """Run every child indicator.

        Rules:
        - If any child reports DOWN, overall status is DOWN.
        - If a child raises an exception, it is treated as DOWN.
        """
        details: dict[str, Any] = {}
        overall = UP

        for name, indicator in self.indicators.items():
            try:
                status = await indicator.health()
            except Exception:
                logger.exception("Health indicator '%s' raised an exception", name)
                status = HealthStatus(status=DOWN, details={"error": "check failed"})
            details[name] = status.to_dict()
            if status.status == DOWN:
                overall = DOWN

        return HealthStatus(status=overall, details=details)


HealthCheckStrategy: TypeAlias = VanillaHealthIndicator | SimpleHealthIndicator | CompositeHealthIndicator
