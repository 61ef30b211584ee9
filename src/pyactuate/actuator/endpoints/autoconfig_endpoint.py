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
"""Auto-configuration report endpoint — which beans were wired and why."""

from __future__ import annotations

from typing import Any

from pyactuate.actuator.endpoints.base import AbstractEndpoint
from pyactuate.context.conditions import ConditionEvaluationReport


class AutoConfigurationReportEndpoint(AbstractEndpoint):
    """Exposes condition outcomes at ``/actuator/autoconfig``."""

    def __init__(self, report: ConditionEvaluationReport) -> None:
        super().__init__("autoconfig")
        self._report = report

    async def handle(self, context: Any = None) -> dict[str, Any]:
        return self._report.to_dict()
