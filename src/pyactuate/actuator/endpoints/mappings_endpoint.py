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
"""Request mappings endpoint — routes of every Starlette app in the registry."""

from __future__ import annotations

from typing import Any

from starlette.applications import Starlette
from starlette.routing import BaseRoute, Mount, Route, Router

from pyactuate.actuator.endpoints.base import AbstractEndpoint
from pyactuate.container.registry import ServiceRegistry


class RequestMappingEndpoint(AbstractEndpoint):
    """Exposes HTTP route metadata at ``/actuator/mappings``."""

    def __init__(self, registry: ServiceRegistry) -> None:
        super().__init__("mappings")
        self._registry = registry

    async def handle(self, context: Any = None) -> dict[str, Any]:
        mappings: list[dict[str, Any]] = []
        for bean_name, app in self._registry.beans_of_type((Starlette, Router)).items():
            mappings.extend(
                dict(mapping, bean=bean_name) for mapping in _describe_routes(app.routes, prefix="")
            )
        mappings.sort(key=lambda m: m["path"])
        return {"mappings": mappings, "total": len(mappings)}


def _describe_routes(routes: list[BaseRoute], prefix: str) -> list[dict[str, Any]]:
    result: list[dict[str, Any]] = []
    for route in routes:
        if isinstance(route, Mount):
            result.extend(_describe_routes(route.routes, prefix + route.path))
        elif isinstance(route, Route):
            endpoint = route.endpoint
            result.append({
                "path": prefix + route.path,
                "methods": sorted(route.methods or []),
                "name": route.name,
                "handler": f"{endpoint.__module__}.{getattr(endpoint, '__qualname__', repr(endpoint))}",
            })
    return result
