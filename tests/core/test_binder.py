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
"""Tests for PropertiesBinder."""

from dataclasses import dataclass, field

import pytest

from pyactuate.core.binder import PropertiesBinder


@dataclass
class Pool:
    max_size: int = 10
    enabled: bool = False


@dataclass
class Server:
    host: str = "localhost"
    port: int = 8080
    timeout: float = 1.5
    pool: Pool = field(default_factory=Pool)
    display_name: str | None = field(default=None, metadata={"property": "name"})


@pytest.fixture
def binder() -> PropertiesBinder:
    return PropertiesBinder()


class TestBindTree:
    def test_nests_dotted_keys(self, binder):
        props = {"info.app.name": "orders", "info.app.version": "1.0", "info.team": "core", "other": "x"}
        assert binder.bind_tree(props, "info") == {"app": {"name": "orders", "version": "1.0"}, "team": "core"}

    def test_keeps_first_seen_order(self, binder):
        tree = binder.bind_tree({"info.z": "1", "info.a": "2", "info.m.x": "3"}, "info")
        assert list(tree) == ["z", "a", "m"]

    def test_prefix_must_match_whole_segment(self, binder):
        assert binder.bind_tree({"information.x": "1", "info": "root"}, "info") == {}

    def test_branch_replaces_scalar(self, binder):
        tree = binder.bind_tree({"info.app": "flat", "info.app.name": "orders"}, "info")
        assert tree == {"app": {"name": "orders"}}

    def test_empty_target_takes_everything(self, binder):
        assert binder.bind_tree({"a.b": "1"}, "") == {"a": {"b": "1"}}


class TestBind:
    def test_defaults_without_properties(self, binder):
        assert binder.bind(Server, {}, "server") == Server()

    def test_converts_scalars(self, binder):
        props = {"server.port": "9090", "server.timeout": "2.5", "server.pool.enabled": "true"}
        server = binder.bind(Server, props, "server")
        assert server.port == 9090
        assert server.timeout == 2.5
        assert server.pool.enabled is True
        assert server.pool.max_size == 10

    @pytest.mark.parametrize("key", ["server.pool.max_size", "server.pool.max-size", "server.pool.maxSize"])
    def test_relaxed_names(self, binder, key):
        assert binder.bind(Server, {key: "50"}, "server").pool.max_size == 50

    def test_property_alias(self, binder):
        server = binder.bind(Server, {"server.name": "edge-1", "server.display_name": "ignored"}, "server")
        assert server.display_name == "edge-1"

    def test_unknown_keys_ignored(self, binder):
        assert binder.bind(Server, {"server.unknown": "x", "server.host": "h"}, "server").host == "h"

    def test_non_string_values_pass_through(self, binder):
        assert binder.bind(Server, {"server.port": 7000}, "server").port == 7000

    def test_requires_dataclass(self, binder):
        with pytest.raises(TypeError, match="not a dataclass"):
            binder.bind(dict, {}, "x")
