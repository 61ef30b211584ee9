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
"""Metrics endpoint — current values of the public metrics."""

from __future__ import annotations

from typing import Any

from pyactuate.actuator.endpoints.base import AbstractEndpoint
from pyactuate.actuator.metrics import PublicMetrics


class MetricsEndpoint(AbstractEndpoint):
    """Endpoint at ``/actuator/metrics`` — metric name to value.

    Supports drill-down: pass ``context={"name": "mem"}`` to get one metric.
    """

    def __init__(self, metrics: PublicMetrics) -> None:
        super().__init__("metrics")
        self._metrics = metrics

    async def handle(self, context: Any = None) -> dict[str, Any]:
        values = {metric.name: metric.value for metric in self._metrics.metrics()}
        if context and isinstance(context, dict) and "name" in context:
            name = context["name"]
            if name not in values:
                return {"error": f"No such metric: {name}"}
            return {name: values[name]}
        return values
