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
"""Tests for StructlogAdapter — default LoggingPort implementation."""

import logging

import pytest
import structlog

from pyactuate.core.config import Config
from pyactuate.logging.port import LoggingPort
from pyactuate.logging.structlog_adapter import StructlogAdapter


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


class TestStructlogAdapterConformance:
    def test_implements_logging_port(self):
        assert isinstance(StructlogAdapter(), LoggingPort)


class TestStructlogAdapterConfigure:
    def test_configure_with_defaults(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        assert adapter._root_level == "INFO"
        assert adapter._format == "console"

    def test_configure_reads_root_level(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"pyactuate": {"logging": {"level": {"root": "debug"}}}}))
        assert adapter._root_level == "DEBUG"
        assert logging.getLogger().level == logging.DEBUG

    @pytest.mark.parametrize("fmt", ["json", "logfmt", "console"])
    def test_configure_reads_format(self, fmt):
        adapter = StructlogAdapter()
        adapter.configure(Config({"pyactuate": {"logging": {"format": fmt}}}))
        assert adapter._format == fmt

    def test_unknown_format_falls_back_to_console(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"pyactuate": {"logging": {"format": "xml"}}}))
        assert adapter._format == "console"

    def test_configure_reads_per_module_levels(self):
        adapter = StructlogAdapter()
        config = Config({"pyactuate": {"logging": {"level": {"root": "INFO", "myapp.services": "warn"}}}})
        adapter.configure(config)
        assert adapter._module_levels == {"myapp.services": "WARN"}
        assert logging.getLogger("myapp.services").level == logging.WARNING

    def test_app_name_bound_to_context(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"pyactuate": {"app": {"name": "orders"}}}))
        assert structlog.contextvars.get_contextvars() == {"app": "orders"}


class TestStructlogAdapterGetLogger:
    def test_get_logger_returns_bound_logger(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        logger = adapter.get_logger("myapp.test")
        assert callable(getattr(logger, "info", None))
        assert callable(getattr(logger, "debug", None))

    def test_json_output(self, capsys):
        adapter = StructlogAdapter()
        adapter.configure(Config({"pyactuate": {"logging": {"format": "json"}}}))
        adapter.get_logger("myapp.json").info("order_placed", order_id=7)
        out = capsys.readouterr().out
        assert '"event": "order_placed"' in out
        assert '"order_id": 7' in out


class TestStructlogAdapterSetLevel:
    def test_set_level_updates_module_level(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        adapter.set_level("myapp.services", "DEBUG")
        assert logging.getLogger("myapp.services").level == logging.DEBUG

    @pytest.mark.parametrize(
        ("alias", "expected"),
        [("TRACE", logging.DEBUG), ("FATAL", logging.CRITICAL), ("bogus", logging.INFO)],
    )
    def test_level_aliases(self, alias, expected):
        adapter = StructlogAdapter()
        adapter.set_level("myapp.alias", alias)
        assert logging.getLogger("myapp.alias").level == expected

    def test_root_name_targets_root_logger(self):
        adapter = StructlogAdapter()
        adapter.set_level("ROOT", "ERROR")
        assert logging.getLogger().level == logging.ERROR
        logging.getLogger().setLevel(logging.WARNING)
