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
"""StructlogAdapter — default LoggingPort implementation using structlog."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from pyactuate.core.config import Config

# Spring-style level names accepted in config, mapped onto stdlib levels.
_LEVEL_ALIASES = {"WARN": "WARNING", "TRACE": "DEBUG", "FATAL": "CRITICAL", "OFF": "CRITICAL"}

_FORMATS = ("console", "json", "logfmt")


def _to_level(level: str) -> int:
    name = level.upper()
    name = _LEVEL_ALIASES.get(name, name)
    return getattr(logging, name, logging.INFO)


class StructlogAdapter:
    """Logging adapter backed by structlog.

    Reads ``pyactuate.logging.level.root``, per-logger levels under
    ``pyactuate.logging.level.<logger>``, and ``pyactuate.logging.format``
    (``console``, ``json`` or ``logfmt``). The application name from
    ``pyactuate.app.name`` is bound to every event.
    """

    def __init__(self) -> None:
        self._root_level: str = "INFO"
        self._format: str = "console"
        self._module_levels: dict[str, str] = {}
        self._app_name: str = ""

    def configure(self, config: Config) -> None:
        level_section = dict(config.get_section("pyactuate.logging.level"))
        self._root_level = str(level_section.pop("root", "INFO")).upper()
        self._module_levels = {k: str(v).upper() for k, v in level_section.items()}
        fmt = str(config.get("pyactuate.logging.format", "console")).lower()
        self._format = fmt if fmt in _FORMATS else "console"
        self._app_name = str(config.get("pyactuate.app.name", ""))

        self._setup_structlog()
        for module, level in self._module_levels.items():
            self.set_level(module, level)

    def get_logger(self, name: str) -> Any:
        return structlog.get_logger(name)

    def set_level(self, name: str, level: str) -> None:
        """Set the level of a stdlib logger; ``ROOT`` targets the root logger."""
        target = logging.getLogger() if name.upper() == "ROOT" else logging.getLogger(name)
        target.setLevel(_to_level(level))

    def _setup_structlog(self) -> None:
        processors: list[structlog.types.Processor] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
        ]

        if self._format == "json":
            processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
        elif self._format == "logfmt":
            processors += [structlog.processors.format_exc_info, structlog.processors.LogfmtRenderer()]
        else:
            processors.append(structlog.dev.ConsoleRenderer())

        structlog.configure(
            processors=processors,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        structlog.contextvars.clear_contextvars()
        if self._app_name:
            structlog.contextvars.bind_contextvars(app=self._app_name)

        logging.basicConfig(
            format="%(message)s",
            stream=sys.stdout,
            level=_to_level(self._root_level),
            force=True,
        )
