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
"""ActuatorRegistry — the enabled set of actuator endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pyactuate.actuator.ports import ActuatorEndpoint

if TYPE_CHECKING:
    from pyactuate.container.registry import ServiceRegistry
    from pyactuate.core.config import Config


class ActuatorRegistry:
    """Registry of :class:`ActuatorEndpoint` instances keyed by endpoint id.

    Supports per-endpoint enable/disable via configuration:
    ``pyactuate.actuator.endpoints.{endpoint_id}.enabled``
    """

    def __init__(self, config: Config | None = None) -> None:
        self._endpoints: dict[str, ActuatorEndpoint] = {}
        self._config = config

    def register(self, endpoint: ActuatorEndpoint) -> None:
        self._endpoints[endpoint.endpoint_id] = endpoint

    def get(self, endpoint_id: str) -> ActuatorEndpoint | None:
        return self._endpoints.get(endpoint_id)

    def get_enabled_endpoints(self) -> dict[str, ActuatorEndpoint]:
        """Return all endpoints that are currently enabled.

        Enable state is determined by (highest priority first):
        1. Config key ``pyactuate.actuator.endpoints.{id}.enabled``
        2. The endpoint's own ``enabled`` property
        """
        return {eid: ep for eid, ep in self._endpoints.items() if self.is_enabled(ep)}

    def discover(self, registry: ServiceRegistry) -> None:
        """Pick up every endpoint bean in *registry* not registered yet."""
        for ep in registry.beans_of_type(ActuatorEndpoint).values():
            if ep.endpoint_id not in self._endpoints:
                self._endpoints[ep.endpoint_id] = ep

    def is_enabled(self, endpoint: ActuatorEndpoint) -> bool:
        if self._config is not None:
            override = self._config.get(f"pyactuate.actuator.endpoints.{endpoint.endpoint_id}.enabled")
            if override is not None:
                if isinstance(override, bool):
                    return override
                return str(override).lower() in ("true", "1", "yes")
        return endpoint.enabled
