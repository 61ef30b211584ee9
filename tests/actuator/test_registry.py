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
"""Tests for ActuatorRegistry — discovery, per-endpoint enable/disable."""

from __future__ import annotations

from typing import Any

import pytest

from pyactuate.actuator.ports import ActuatorEndpoint
from pyactuate.actuator.registry import ActuatorRegistry
from pyactuate.container.registry import ServiceRegistry
from pyactuate.core.config import Config


# ---------------------------------------------------------------------------
# Test endpoint classes
# ---------------------------------------------------------------------------

class _AlwaysEnabled:
    @property
    def endpoint_id(self) -> str:
        return "test-on"

    @property
    def enabled(self) -> bool:
        return True

    @property
    def sensitive(self) -> bool:
        return False

    async def handle(self, context=None) -> dict[str, Any]:
        return {"status": "ok"}


class _AlwaysDisabled:
    @property
    def endpoint_id(self) -> str:
        return "test-off"

    @property
    def enabled(self) -> bool:
        return False

    @property
    def sensitive(self) -> bool:
        return True

    async def handle(self, context=None) -> dict[str, Any]:
        return {"status": "ok"}


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

class TestActuatorEndpointProtocol:
    def test_valid_endpoint_is_instance(self):
        assert isinstance(_AlwaysEnabled(), ActuatorEndpoint)

    def test_non_endpoint_is_not_instance(self):
        class _NotEndpoint:
            pass

        assert not isinstance(_NotEndpoint(), ActuatorEndpoint)


class TestActuatorRegistry:
    def test_register_and_get(self):
        reg = ActuatorRegistry()
        ep = _AlwaysEnabled()
        reg.register(ep)
        assert reg.get("test-on") is ep
        assert reg.get("missing") is None
        assert reg.get_enabled_endpoints() == {"test-on": ep}

    def test_disabled_endpoint_excluded(self):
        reg = ActuatorRegistry()
        reg.register(_AlwaysDisabled())
        assert reg.get_enabled_endpoints() == {}

    def test_config_disables_endpoint(self):
        config = Config({"pyactuate": {"actuator": {"endpoints": {"test-on": {"enabled": False}}}}})
        reg = ActuatorRegistry(config=config)
        reg.register(_AlwaysEnabled())
        assert "test-on" not in reg.get_enabled_endpoints()

    @pytest.mark.parametrize("value", [True, "true", "yes", "1"])
    def test_config_enables_disabled_endpoint(self, value):
        config = Config({"pyactuate": {"actuator": {"endpoints": {"test-off": {"enabled": value}}}}})
        reg = ActuatorRegistry(config=config)
        reg.register(_AlwaysDisabled())
        assert "test-off" in reg.get_enabled_endpoints()

    def test_config_without_override_uses_endpoint_default(self):
        reg = ActuatorRegistry(config=Config({}))
        reg.register(_AlwaysEnabled())
        reg.register(_AlwaysDisabled())
        assert set(reg.get_enabled_endpoints()) == {"test-on"}


class TestDiscovery:
    def test_discovers_endpoint_beans(self):
        services = ServiceRegistry()
        services.register(_AlwaysEnabled(), name="on")
        services.register(_AlwaysDisabled(), name="off")
        services.register("not an endpoint", name="text")
        reg = ActuatorRegistry()
        reg.discover(services)
        assert reg.get("test-on") is not None
        assert reg.get("test-off") is not None

    def test_discovery_keeps_explicit_registrations(self):
        explicit = _AlwaysEnabled()
        services = ServiceRegistry()
        services.register(_AlwaysEnabled(), name="other")
        reg = ActuatorRegistry()
        reg.register(explicit)
        reg.discover(services)
        assert reg.get("test-on") is explicit
