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
"""Configuration properties endpoint — every ``@config_properties`` bean and its values."""

from __future__ import annotations

import dataclasses
from typing import Any

from pyactuate.actuator.endpoints.base import AbstractEndpoint
from pyactuate.actuator.endpoints.sanitizer import Sanitizer
from pyactuate.container.registry import ServiceRegistry
from pyactuate.core.config import config_prefix_of


class ConfigurationPropertiesReportEndpoint(AbstractEndpoint):
    """Exposes bound configuration objects at ``/actuator/configprops``."""

    def __init__(self, registry: ServiceRegistry, sanitizer: Sanitizer | None = None) -> None:
        super().__init__("configprops")
        self._registry = registry
        self._sanitizer = sanitizer or Sanitizer()

    async def handle(self, context: Any = None) -> dict[str, Any]:
        report: dict[str, Any] = {}
        for reg in self._registry.registrations:
            prefix = config_prefix_of(reg.instance)
            if prefix is None:
                continue
            if dataclasses.is_dataclass(reg.instance):
                values = dataclasses.asdict(reg.instance)
            else:
                values = {k: v for k, v in vars(reg.instance).items() if not k.startswith("_")}
            report[reg.name] = {
                "prefix": prefix,
                "properties": self._sanitizer.sanitize_tree(values),
            }
        return report
