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
"""Trace endpoint — recent traces, newest first."""

from __future__ import annotations

from typing import Any

from pyactuate.actuator.endpoints.base import AbstractEndpoint
from pyactuate.actuator.trace import TraceRepository


class TraceEndpoint(AbstractEndpoint):
    """Exposes the trace repository at ``/actuator/trace``."""

    def __init__(self, repository: TraceRepository) -> None:
        super().__init__("trace")
        self._repository = repository

    async def handle(self, context: Any = None) -> dict[str, Any]:
        traces = self._repository.find_all()
        limit = context.get("limit") if isinstance(context, dict) else None
        if limit is not None:
            traces = traces[: max(int(limit), 0)]
        return {"traces": [trace.to_dict() for trace in traces]}
