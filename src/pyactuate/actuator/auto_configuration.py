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
"""Endpoint auto-configuration — register the standard actuator endpoints.

Every endpoint is created only when the registry has no bean of its type
yet, so an application overrides any of them by registering its own first.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from pyactuate.actuator.endpoints import (
    AutoConfigurationReportEndpoint,
    BeansEndpoint,
    ConfigurationPropertiesReportEndpoint,
    DumpEndpoint,
    EnvironmentEndpoint,
    HealthEndpoint,
    InfoEndpoint,
    MetricsEndpoint,
    ShutdownEndpoint,
    TraceEndpoint,
)
from pyactuate.actuator.health import DATA_SOURCE_TYPES, DEFAULT_QUERY, HealthIndicator
from pyactuate.actuator.info import InfoAggregator, InfoProperties
from pyactuate.actuator.metrics import (
    InMemoryMetricRepository,
    MetricReader,
    PrometheusMetricReader,
    PublicMetrics,
    VanillaPublicMetrics,
)
from pyactuate.actuator.registry import ActuatorRegistry
from pyactuate.actuator.resolver import HealthIndicatorResolver
from pyactuate.actuator.trace import DEFAULT_CAPACITY, InMemoryTraceRepository, TraceRepository
from pyactuate.container.registry import ServiceRegistry, default_bean_name
from pyactuate.context.conditions import ConditionEvaluationReport, Conditions
from pyactuate.core.config import Config

logger = logging.getLogger(__name__)

SOURCE = "EndpointAutoConfiguration"


class EndpointAutoConfiguration:
    """Wires health, info, env, metrics, trace, dump, beans, shutdown,
    mappings, configprops and autoconfig endpoints into a registry.

    Collaborators taken from the registry when present:

    - a :class:`HealthIndicator` bean replaces the resolved data-source indicator
    - SQLAlchemy engine beans are the data sources health-checked by default
    - a :class:`PublicMetrics` bean replaces :class:`VanillaPublicMetrics`
    - a :class:`MetricReader` bean replaces the in-memory metric repository
    - a :class:`TraceRepository` bean replaces the in-memory trace repository
    - a :class:`ConditionEvaluationReport` bean enables the autoconfig endpoint
    """

    def __init__(
        self,
        config: Config,
        base_dir: str | Path | None = None,
        shutdown_hook: Callable[[], Any] | None = None,
    ) -> None:
        self._config = config
        self._base_dir = base_dir
        self._shutdown_hook = shutdown_hook

    def configure(self, registry: ServiceRegistry) -> ActuatorRegistry:
        """Register missing endpoints and return the actuator registry over them.

        Raises:
            ResourceReadError: the git properties resource exists but is malformed.
        """
        report = registry.get_optional(ConditionEvaluationReport)
        conditions = Conditions(registry, self._config, report)

        def _register_if_missing(endpoint_type: type, factory: Callable[[], Any]) -> None:
            name = default_bean_name(endpoint_type)
            if conditions.on_missing_bean(name, endpoint_type):
                registry.register(factory(), name=name, source=SOURCE)

        _register_if_missing(EnvironmentEndpoint, lambda: EnvironmentEndpoint(self._config))
        _register_if_missing(HealthEndpoint, lambda: HealthEndpoint(self.health_indicator(registry)))
        _register_if_missing(BeansEndpoint, lambda: BeansEndpoint(registry))
        _register_if_missing(InfoEndpoint, lambda: InfoEndpoint(self.info_report()))
        _register_if_missing(MetricsEndpoint, lambda: MetricsEndpoint(self.public_metrics(registry, conditions)))
        _register_if_missing(TraceEndpoint, lambda: TraceEndpoint(self.trace_repository(registry)))
        _register_if_missing(DumpEndpoint, DumpEndpoint)

        has_report = conditions.on_bean("auto_configuration_report_endpoint", ConditionEvaluationReport)
        if has_report and report is not None:
            _register_if_missing(AutoConfigurationReportEndpoint, lambda: AutoConfigurationReportEndpoint(report))

        _register_if_missing(ShutdownEndpoint, lambda: ShutdownEndpoint(self._shutdown_hook))

        if conditions.on_class("request_mapping_endpoint", "starlette"):
            from pyactuate.actuator.endpoints.mappings_endpoint import RequestMappingEndpoint

            _register_if_missing(RequestMappingEndpoint, lambda: RequestMappingEndpoint(registry))

        _register_if_missing(
            ConfigurationPropertiesReportEndpoint, lambda: ConfigurationPropertiesReportEndpoint(registry)
        )

        actuator = ActuatorRegistry(config=self._config)
        actuator.discover(registry)
        registry.register(actuator, name="actuator_registry", source=SOURCE)
        logger.debug("Enabled actuator endpoints: %s", sorted(actuator.get_enabled_endpoints()))
        return actuator

    # ------------------------------------------------------------------
    # Collaborators
    # ------------------------------------------------------------------

    def health_indicator(self, registry: ServiceRegistry) -> HealthIndicator:
        user_indicator = registry.get_optional(HealthIndicator)
        if user_indicator is not None:
            return user_indicator
        query = str(self._config.get("pyactuate.health.db.query", DEFAULT_QUERY))
        return HealthIndicatorResolver(query=query).resolve(registry.beans_of_type(DATA_SOURCE_TYPES))

    def info_report(self) -> Any:
        return InfoProperties(self._config, self._base_dir).build_report(InfoAggregator())

    def public_metrics(self, registry: ServiceRegistry, conditions: Conditions) -> PublicMetrics:
        public = registry.get_optional(PublicMetrics)
        if public is not None:
            return public

        reader = registry.get_optional(MetricReader)
        if reader is None:
            use_prometheus = conditions.on_property(
                "metric_reader", "pyactuate.metrics.prometheus.enabled", match_if_missing=False
            ) and conditions.on_class("metric_reader", "prometheus_client")
            reader = PrometheusMetricReader() if use_prometheus else InMemoryMetricRepository()
            registry.register(reader, name="metric_reader", source=SOURCE)
        return VanillaPublicMetrics(reader)

    def trace_repository(self, registry: ServiceRegistry) -> TraceRepository:
        def _create() -> TraceRepository:
            capacity = int(self._config.get("pyactuate.trace.capacity", DEFAULT_CAPACITY))
            return InMemoryTraceRepository(capacity=capacity)

        return registry.register_if_absent(TraceRepository, _create, name="trace_repository", source=SOURCE)
