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
"""Info endpoint — application metadata and build info."""

from __future__ import annotations

from typing import Any

from pyactuate.actuator.endpoints.base import AbstractEndpoint
from pyactuate.actuator.info import InfoReport, report_to_dict


class InfoEndpoint(AbstractEndpoint):
    """Exposes the info report built at startup at ``/actuator/info``."""

    def __init__(self, report: InfoReport) -> None:
        super().__init__("info", sensitive=False)
        self._report = report

    @property
    def report(self) -> InfoReport:
        return self._report

    async def handle(self, context: Any = None) -> dict[str, Any]:
        return report_to_dict(self._report)
