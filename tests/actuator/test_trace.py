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
"""Tests for InMemoryTraceRepository."""

import pytest

from pyactuate.actuator.trace import InMemoryTraceRepository, TraceRepository


class TestInMemoryTraceRepository:
    def test_satisfies_protocol(self):
        assert isinstance(InMemoryTraceRepository(), TraceRepository)

    def test_newest_first(self):
        repo = InMemoryTraceRepository()
        repo.add({"path": "/a"})
        repo.add({"path": "/b"})
        assert [t.info["path"] for t in repo.find_all()] == ["/b", "/a"]

    def test_oldest_evicted_at_capacity(self):
        repo = InMemoryTraceRepository(capacity=2)
        for path in ("/a", "/b", "/c"):
            repo.add({"path": path})
        assert [t.info["path"] for t in repo.find_all()] == ["/c", "/b"]
        assert repo.capacity == 2

    def test_info_is_copied(self):
        repo = InMemoryTraceRepository()
        info = {"path": "/a"}
        repo.add(info)
        info["path"] = "/changed"
        assert repo.find_all()[0].info["path"] == "/a"

    def test_to_dict(self):
        repo = InMemoryTraceRepository()
        repo.add({"status": 200})
        data = repo.find_all()[0].to_dict()
        assert data["info"] == {"status": 200}
        assert "T" in data["timestamp"]

    def test_clear(self):
        repo = InMemoryTraceRepository()
        repo.add({"x": 1})
        repo.clear()
        assert repo.find_all() == []

    def test_capacity_must_be_positive(self):
        with pytest.raises(ValueError):
            InMemoryTraceRepository(capacity=0)
