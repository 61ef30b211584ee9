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
"""ServiceRegistry — named singletons looked up by name or type."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar, cast

from pyactuate.container.exceptions import NoSuchBeanError, NoUniqueBeanError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


def default_bean_name(cls: type) -> str:
    """``HealthEndpoint`` -> ``health_endpoint``."""
    return _CAMEL_RE.sub("_", cls.__name__).lower()


@dataclass
class Registration:
    """Metadata for a registered singleton."""

    name: str
    instance: Any = field(repr=False)
    source: str = ""

    @property
    def impl_type(self) -> type:
        return type(self.instance)


class ServiceRegistry:
    """Holds already-constructed singletons, keyed by bean name.

    Type lookups use ``isinstance`` so runtime-checkable protocols and
    tuples of types work as lookup keys. Registration order is preserved.
    """

    def __init__(self) -> None:
        self._registrations: dict[str, Registration] = {}

    @property
    def registrations(self) -> list[Registration]:
        return list(self._registrations.values())

    def register(self, instance: Any, name: str = "", source: str = "") -> str:
        """Register *instance* and return the bean name used.

        A later registration under the same name replaces the earlier one.
        """
        bean_name = name or default_bean_name(type(instance))
        if bean_name in self._registrations:
            logger.debug("Overriding bean '%s'", bean_name)
        self._registrations[bean_name] = Registration(name=bean_name, instance=instance, source=source)
        return bean_name

    def register_if_absent(
        self,
        bean_type: type[T],
        factory: Callable[[], T],
        name: str = "",
        source: str = "",
    ) -> T:
        """Return the existing *bean_type* bean, or build one with *factory* and register it."""
        existing = self.get_optional(bean_type)
        if existing is not None:
            return existing
        instance = factory()
        self.register(instance, name=name, source=source)
        return instance

    def contains(self, name: str) -> bool:
        return name in self._registrations

    def contains_type(self, bean_type: type | tuple[type, ...]) -> bool:
        return any(isinstance(reg.instance, bean_type) for reg in self._registrations.values())

    def get(self, bean_type: type[T]) -> T:
        """Return the single bean of *bean_type*."""
        instance = self.get_optional(bean_type)
        if instance is None:
            raise NoSuchBeanError(bean_type=bean_type, suggestions=list(self._registrations))
        return instance

    def get_optional(self, bean_type: type[T]) -> T | None:
        """Return the single bean of *bean_type*, or ``None`` when there is none."""
        matches = self.beans_of_type(bean_type)
        if not matches:
            return None
        if len(matches) > 1:
            raise NoUniqueBeanError(bean_type=bean_type, candidates=list(matches))
        return cast(T, next(iter(matches.values())))

    def get_by_name(self, name: str) -> Any:
        reg = self._registrations.get(name)
        if reg is None:
            raise NoSuchBeanError(bean_name=name, suggestions=list(self._registrations))
        return reg.instance

    def beans_of_type(self, bean_type: type | tuple[type, ...]) -> dict[str, Any]:
        """All beans assignable to *bean_type*, keyed by bean name."""
        return {
            name: reg.instance
            for name, reg in self._registrations.items()
            if isinstance(reg.instance, bean_type)
        }

    def clear(self) -> None:
        """Drop every registration."""
        self._registrations.clear()
