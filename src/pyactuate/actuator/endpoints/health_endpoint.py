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
"""Health endpoint."""

from __future__ import annotations

from typing import Any

from pyactuate.actuator.endpoints.base import AbstractEndpoint
from pyactuate.actuator.health import DOWN, HealthIndicator


class HealthEndpoint(AbstractEndpoint):
    """Exposes the resolved health indicator at ``/actuator/health``."""

    def __init__(self, indicator: HealthIndicator) -> None:
        super().__init__("health", sensitive=False)
        self._indicator = indicator

    @property
    def indicator(self) -> HealthIndicator:
        return self._indicator

    async def handle(self, context: Any = None) -> dict[str, Any]:
        status = await self._indicator.health()
        return status.to_dict()

    async def get_status_code(self) -> int:
        """Return the HTTP status code based on health state."""
        status = await self._indicator.health()
        return 503 if status.status == DOWN else 200
