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
"""Environment endpoint — configuration properties, their sources, active profiles."""

from __future__ import annotations

from typing import Any

from pyactuate.actuator.endpoints.base import AbstractEndpoint
from pyactuate.actuator.endpoints.sanitizer import Sanitizer
from pyactuate.core.config import Config


class EnvironmentEndpoint(AbstractEndpoint):
    """Exposes flattened configuration at ``/actuator/env``, credentials masked."""

    def __init__(self, config: Config, sanitizer: Sanitizer | None = None) -> None:
        super().__init__("env")
        self._config = config
        self._sanitizer = sanitizer or Sanitizer()

    async def handle(self, context: Any = None) -> dict[str, Any]:
        properties = {
            key: self._sanitizer.sanitize(key, value) for key, value in self._config.flatten().items()
        }
        if context and isinstance(context, dict) and "name" in context:
            name = context["name"]
            return {"name": name, "value": properties.get(name)}
        return {
            "activeProfiles": self._config.active_profiles,
            "sources": self._config.loaded_sources,
            "properties": properties,
        }
