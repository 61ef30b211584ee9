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
"""Tests for the ActuatorApplication bootstrap."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

import pytest
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import create_async_engine

from pyactuate import ActuatorApplication
from pyactuate.actuator.health import HealthStatus
from pyactuate.context.conditions import ConditionEvaluationReport
from pyactuate.core.config import Config
from pyactuate.kernel.exceptions import ResourceReadError


class RecordingLogger:
    def __init__(self, events: list[tuple[str, str, dict[str, Any]]]) -> None:
        self._events = events

    def info(self, event: str, **kw: Any) -> None:
        self._events.append(("info", event, kw))

    def error(self, event: str, **kw: Any) -> None:
        self._events.append(("error", event, kw))


class RecordingLoggingPort:
    def __init__(self) -> None:
        self.events: list[tuple[str, str, dict[str, Any]]] = []
        self.configured_with: Config | None = None

    def configure(self, config: Config) -> None:
        self.configured_with = config

    def get_logger(self, name: str) -> RecordingLogger:
        return RecordingLogger(self.events)

    def set_level(self, name: str, level: str) -> None:
        pass

    def names(self) -> list[str]:
        return [event for _, event, _ in self.events]


class DownIndicator:
    async def health(self) -> HealthStatus:
        return HealthStatus(status="DOWN")


@pytest.fixture
def logging_port() -> RecordingLoggingPort:
    return RecordingLoggingPort()


class TestActuatorApplication:
    def test_loads_config_from_base_dir(self, tmp_path: Path, logging_port):
        (tmp_path / "pyactuate.yaml").write_text("pyactuate:\n  app:\n    name: orders\n")
        app = ActuatorApplication(base_dir=tmp_path, logging_port=logging_port)
        assert app.config.get("pyactuate.app.name") == "orders"
        assert logging_port.configured_with is app.config

    def test_actuator_before_startup_raises(self, tmp_path: Path, logging_port):
        app = ActuatorApplication(base_dir=tmp_path, logging_port=logging_port)
        with pytest.raises(RuntimeError):
            _ = app.actuator

    def test_startup_wires_endpoints(self, tmp_path: Path, logging_port):
        app = ActuatorApplication(base_dir=tmp_path, logging_port=logging_port)
        actuator = app.startup()
        assert app.running
        assert app.actuator is actuator
        assert app.startup_time_seconds >= 0
        enabled = actuator.get_enabled_endpoints()
        assert {"health", "info", "env", "autoconfig"} <= set(enabled)
        assert "shutdown" not in enabled
        assert app.registry.get_by_name("config") is app.config
        assert app.registry.contains_type(ConditionEvaluationReport)

    def test_startup_logs_lifecycle_events(self, tmp_path: Path, logging_port):
        app = ActuatorApplication(base_dir=tmp_path, logging_port=logging_port)
        app.startup()
        names = logging_port.names()
        assert names[0] == "starting_application"
        assert "no_active_profiles" in names
        assert "loaded_config" in names
        assert names[-1] == "application_started"

    def test_active_profiles_logged(self, tmp_path: Path, logging_port):
        app = ActuatorApplication(base_dir=tmp_path, active_profiles=["prod"], logging_port=logging_port)
        app.startup()
        assert ("info", "active_profiles", {"profiles": ["prod"]}) in logging_port.events

    @pytest.mark.asyncio
    async def test_registered_beans_take_precedence(self, tmp_path: Path, logging_port):
        app = ActuatorApplication(base_dir=tmp_path, logging_port=logging_port)
        app.register(DownIndicator())
        actuator = app.startup()
        assert await actuator.get("health").handle() == {"status": "DOWN"}

    @pytest.mark.asyncio
    async def test_info_from_project_files(self, tmp_path: Path, logging_port):
        (tmp_path / "pyactuate.yaml").write_text(
            "pyactuate:\n  git:\n    properties: git.properties\ninfo:\n  app:\n    name: orders\n"
        )
        (tmp_path / "git.properties").write_text("git.branch=main\ngit.commit.id=a1b2c3d4e5\n")
        actuator = ActuatorApplication(base_dir=tmp_path, logging_port=logging_port).startup()
        assert await actuator.get("info").handle() == {
            "app": {"name": "orders"},
            "git": {"branch": "main", "commit": {"id": "a1b2c3d", "time": None}},
        }

    def test_malformed_git_properties_aborts_startup(self, tmp_path: Path, logging_port):
        (tmp_path / "pyactuate.yaml").write_text("pyactuate:\n  git:\n    properties: git.properties\n")
        (tmp_path / "git.properties").write_text("git.branch=\\u00zz\n")
        app = ActuatorApplication(base_dir=tmp_path, logging_port=logging_port)
        with pytest.raises(ResourceReadError):
            app.startup()
        assert not app.running
        level, event, kw = logging_port.events[-1]
        assert (level, event, kw["code"]) == ("error", "application_failed", "RESOURCE_READ")

    @pytest.mark.asyncio
    async def test_shutdown_endpoint_stops_application(self, tmp_path: Path, logging_port):
        (tmp_path / "pyactuate.yaml").write_text(
            "pyactuate:\n  actuator:\n    endpoints:\n      shutdown:\n        enabled: true\n"
        )
        engine = create_engine("sqlite:///:memory:")
        pool = engine.pool
        app = ActuatorApplication(base_dir=tmp_path, logging_port=logging_port)
        app.register(engine, name="orders")
        actuator = app.startup()
        await actuator.get_enabled_endpoints()["shutdown"].handle()
        for _ in range(200):
            if not app.running:
                break
            await asyncio.sleep(0.01)
        assert not app.running
        assert engine.pool is not pool
        assert app.registry.registrations == []
        assert "application_stopped" in logging_port.names()

    @pytest.mark.asyncio
    async def test_shutdown_disposes_every_engine(self, tmp_path: Path, logging_port):
        sync_engine = create_engine("sqlite:///:memory:")
        async_engine = create_async_engine("sqlite+aiosqlite:///:memory:")
        sync_pool, async_pool = sync_engine.pool, async_engine.sync_engine.pool
        app = ActuatorApplication(base_dir=tmp_path, logging_port=logging_port)
        app.register(sync_engine, name="orders")
        app.register(async_engine, name="users")
        app.startup()
        await app.shutdown()
        assert sync_engine.pool is not sync_pool
        assert async_engine.sync_engine.pool is not async_pool
        assert not app.registry.contains("config")
        disposed = [kw["name"] for _, event, kw in logging_port.events if event == "disposed_data_source"]
        assert sorted(disposed) == ["orders", "users"]

    @pytest.mark.asyncio
    async def test_shutdown_before_startup_does_nothing(self, tmp_path: Path, logging_port):
        app = ActuatorApplication(base_dir=tmp_path, logging_port=logging_port)
        app.register(DownIndicator(), name="down")
        await app.shutdown()
        assert app.registry.contains("down")
        assert "application_stopped" not in logging_port.names()

    def test_explicit_config_skips_file_loading(self, tmp_path: Path, logging_port):
        config = Config({"pyactuate": {"app": {"name": "given"}}})
        app = ActuatorApplication(base_dir=tmp_path, config=config, logging_port=logging_port)
        assert app.config is config

