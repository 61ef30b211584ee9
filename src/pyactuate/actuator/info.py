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
"""Info report — merge ``info.*`` configuration with git build metadata."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, TypeAlias

from pyactuate.actuator.git import GitInfo
from pyactuate.core.binder import PropertiesBinder
from pyactuate.core.config import Config
from pyactuate.core.properties import load_properties
from pyactuate.core.resources import resolve_resource

logger = logging.getLogger(__name__)

INFO_TARGET = "info"
GIT_TARGET = "git"
GIT_PROPERTIES_KEY = "pyactuate.git.properties"
DEFAULT_GIT_PROPERTIES = "classpath:git.properties"

InfoReport: TypeAlias = Mapping[str, Any]


class InfoAggregator:
    """Builds the read-only info report."""

    def __init__(self, binder: PropertiesBinder | None = None) -> None:
        self._binder = binder or PropertiesBinder()

    def build_report(
        self,
        env_properties: Mapping[str, Any],
        git_properties: Mapping[str, str],
    ) -> InfoReport:
        """Merge the two sources.

        ``info.*`` entries of *env_properties* come first as a nested mapping;
        a ``"git"`` entry holding the bound :class:`GitInfo` is appended only
        when the git properties name a branch.
        """
        info: dict[str, Any] = {
            key: _freeze(value) for key, value in self._binder.bind_tree(env_properties, INFO_TARGET).items()
        }
        git_info = self._binder.bind(GitInfo, git_properties, GIT_TARGET)
        if git_info.branch is not None:
            info[GIT_TARGET] = git_info
        else:
            logger.debug("No git branch in build metadata, omitting 'git' from info")
        return MappingProxyType(info)


class InfoProperties:
    """Loads the two info sources from configuration.

    The git properties location comes from ``pyactuate.git.properties``
    (default ``classpath:git.properties``); relative file paths resolve
    against *base_dir*.
    """

    def __init__(self, config: Config, base_dir: str | Path | None = None) -> None:
        self._config = config
        self._base_dir = base_dir

    @property
    def git_properties_location(self) -> str:
        return str(self._config.get(GIT_PROPERTIES_KEY, DEFAULT_GIT_PROPERTIES))

    def env_properties(self) -> dict[str, Any]:
        return self._config.flatten(INFO_TARGET)

    def git_properties(self) -> dict[str, str]:
        """Raises ResourceReadError when the resource exists but is malformed."""
        return load_properties(resolve_resource(self.git_properties_location, self._base_dir))

    def build_report(self, aggregator: InfoAggregator | None = None) -> InfoReport:
        aggregator = aggregator or InfoAggregator()
        return aggregator.build_report(self.env_properties(), self.git_properties())


def report_to_dict(report: InfoReport) -> dict[str, Any]:
    """JSON-friendly copy of *report*."""
    return {key: _plain(value) for key, value in report.items()}


def _plain(value: Any) -> Any:
    if isinstance(value, GitInfo):
        return value.to_dict()
    if isinstance(value, Mapping):
        return {k: _plain(v) for k, v in value.items()}
    return value


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    return value
