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
"""HealthIndicatorResolver — pick a health-check strategy from the known data sources."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pyactuate.actuator.health import (
    DEFAULT_QUERY,
    CompositeHealthIndicator,
    HealthCheckStrategy,
    SimpleHealthIndicator,
    VanillaHealthIndicator,
)

logger = logging.getLogger(__name__)


class HealthIndicatorResolver:
    """Maps zero, one, or many named data sources onto a strategy.

    - none → :class:`VanillaHealthIndicator`
    - one → :class:`SimpleHealthIndicator` on that data source (name dropped)
    - many → :class:`CompositeHealthIndicator` with one simple child per name
    """

    def __init__(self, query: str = DEFAULT_QUERY) -> None:
        self._query = query

    def resolve(self, resources: Mapping[str, Any] | None) -> HealthCheckStrategy:
        if not resources:
            logger.debug("No data sources found, using vanilla health indicator")
            return VanillaHealthIndicator()

        if len(resources) == 1:
            (resource,) = resources.values()
            return SimpleHealthIndicator(resource, query=self._query)

        logger.debug("Composite health indicator over data sources %s", list(resources))
        return CompositeHealthIndicator(
            {name: SimpleHealthIndicator(resource, query=self._query) for name, resource in resources.items()}
        )
