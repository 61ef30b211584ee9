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
"""Beans endpoint — lists everything in the service registry."""

from __future__ import annotations

from typing import Any

from pyactuate.actuator.endpoints.base import AbstractEndpoint
from pyactuate.container.registry import ServiceRegistry


class BeansEndpoint(AbstractEndpoint):
    """Exposes registry contents at ``/actuator/beans``."""

    def __init__(self, registry: ServiceRegistry) -> None:
        super().__init__("beans")
        self._registry = registry

    async def handle(self, context: Any = None) -> dict[str, Any]:
        beans: dict[str, Any] = {}
        for reg in self._registry.registrations:
            cls = reg.impl_type
            beans[reg.name] = {
                "type": f"{cls.__module__}.{cls.__qualname__}",
                "source": reg.source or "application",
            }
        return {"beans": beans}
