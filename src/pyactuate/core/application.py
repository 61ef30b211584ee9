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
"""Application bootstrap — load config, set up logging, wire the actuator."""

from __future__ import annotations

import os
import platform
import time
from pathlib import Path
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine

from pyactuate.actuator.auto_configuration import EndpointAutoConfiguration
from pyactuate.actuator.health import DATA_SOURCE_TYPES
from pyactuate.actuator.registry import ActuatorRegistry
from pyactuate.container.registry import ServiceRegistry
from pyactuate.context.conditions import ConditionEvaluationReport
from pyactuate.core.config import Config
from pyactuate.kernel.exceptions import PyActuateException
from pyactuate.logging.port import LoggingPort
from pyactuate.logging.structlog_adapter import StructlogAdapter


class ActuatorApplication:
    """Bootstraps the actuator for an application.

    Startup sequence:
    1. Load configuration from *base_dir* (defaults, files, profile overlays)
    2. Configure logging (from the ``pyactuate.logging`` section)
    3. Register the config and a condition evaluation report
    4. Run :class:`EndpointAutoConfiguration` against the registry
    5. Log "Started {app} in {time}s ({count} endpoints enabled)"

    Beans registered on :attr:`registry` before :meth:`startup` take
    precedence over the auto-configured ones. Any failure aborts startup.
    """

    def __init__(
        self,
        base_dir: str | Path | None = None,
        active_profiles: list[str] | None = None,
        config: Config | None = None,
        logging_port: LoggingPort | None = None,
    ) -> None:
        self._base_dir = Path(base_dir) if base_dir is not None else Path.cwd()
        if config is None:
            config = Config.from_sources(self._base_dir, active_profiles=active_profiles)
        self.config = config
        self._name = str(config.get("pyactuate.app.name", "pyactuate-app"))
        self._version = str(config.get("pyactuate.app.version", "0.1.0"))

        self._logging = logging_port or StructlogAdapter()
        self._logging.configure(self.config)
        self._logger = self._logging.get_logger("pyactuate.core")

        self._registry = ServiceRegistry()
        self._actuator: ActuatorRegistry | None = None
        self._startup_time: float = 0.0
        self._running = False

    @property
    def registry(self) -> ServiceRegistry:
        return self._registry

    @property
    def actuator(self) -> ActuatorRegistry:
        if self._actuator is None:
            raise RuntimeError("Application has not been started")
        return self._actuator

    @property
    def running(self) -> bool:
        return self._running

    @property
    def startup_time_seconds(self) -> float:
        return self._startup_time

    def register(self, instance: Any, name: str = "") -> str:
        """Register an application bean; call before :meth:`startup`."""
        return self._registry.register(instance, name=name, source="application")

    def startup(self) -> ActuatorRegistry:
        start = time.perf_counter()
        self._logger.info(
            "starting_application",
            app=self._name,
            version=self._version,
            python=platform.python_version(),
            pid=os.getpid(),
        )
        profiles = self.config.active_profiles
        if profiles:
            self._logger.info("active_profiles", profiles=profiles)
        else:
            self._logger.info("no_active_profiles", message="No active profiles set, falling back to default")
        for source in self.config.loaded_sources:
            self._logger.info("loaded_config", source=source)

        self._registry.register(self.config, name="config", source="application")
        if not self._registry.contains_type(ConditionEvaluationReport):
            self._registry.register(ConditionEvaluationReport(), name="condition_evaluation_report")

        auto_configuration = EndpointAutoConfiguration(
            self.config,
            base_dir=self._base_dir,
            shutdown_hook=self.shutdown,
        )
        try:
            self._actuator = auto_configuration.configure(self._registry)
        except PyActuateException as exc:
            self._logger.error("application_failed", app=self._name, error=str(exc), code=exc.code)
            raise

        self._startup_time = time.perf_counter() - start
        self._running = True
        self._logger.info(
            "application_started",
            app=self._name,
            startup_time_s=round(self._startup_time, 3),
            endpoints=sorted(self._actuator.get_enabled_endpoints()),
        )
        return self._actuator

    async def shutdown(self) -> None:
        """Release registered data sources and close the registry.

        Invoked by the shutdown endpoint. Every registered SQLAlchemy engine has
        its connection pool disposed before the registry is cleared.
        """
        if not self._running:
            return
        self._logger.info("shutting_down", app=self._name)
        for name, engine in self._registry.beans_of_type(DATA_SOURCE_TYPES).items():
            if isinstance(engine, AsyncEngine):
                await engine.dispose()
            else:
                engine.dispose()
            self._logger.info("disposed_data_source", name=name)
        self._registry.clear()
        self._running = False
        self._logger.info("application_stopped", app=self._name)
