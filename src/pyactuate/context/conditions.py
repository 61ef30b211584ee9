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
"""Startup conditions — explicit checks deciding whether a bean is created.

Each check answers one question against the live :class:`ServiceRegistry`
or :class:`Config` and, when a :class:`ConditionEvaluationReport` is present,
records the outcome under the bean it guarded.
"""

from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pyactuate.container.registry import ServiceRegistry
    from pyactuate.core.config import Config

logger = logging.getLogger(__name__)


def class_present(module_name: str) -> bool:
    """True if *module_name* is importable."""
    try:
        importlib.import_module(module_name)
        return True
    except ImportError:
        return False


@dataclass(frozen=True)
class ConditionOutcome:
    """Result of one condition check."""

    condition: str
    match: bool
    message: str


@dataclass
class ConditionEvaluationReport:
    """Collects condition outcomes per guarded bean, in evaluation order."""

    outcomes: dict[str, list[ConditionOutcome]] = field(default_factory=dict)

    def record(self, bean: str, outcome: ConditionOutcome) -> None:
        self.outcomes.setdefault(bean, []).append(outcome)

    def matched(self) -> dict[str, list[ConditionOutcome]]:
        """Beans whose conditions all matched."""
        return {b: o for b, o in self.outcomes.items() if all(x.match for x in o)}

    def unmatched(self) -> dict[str, list[ConditionOutcome]]:
        """Beans with at least one failed condition."""
        return {b: o for b, o in self.outcomes.items() if not all(x.match for x in o)}

    def to_dict(self) -> dict[str, Any]:
        def _render(outcomes: dict[str, list[ConditionOutcome]]) -> dict[str, Any]:
            return {
                bean: [{"condition": o.condition, "message": o.message} for o in items]
                for bean, items in outcomes.items()
            }

        return {"positiveMatches": _render(self.matched()), "negativeMatches": _render(self.unmatched())}


class Conditions:
    """Condition checks bound to a registry, a config and an optional report."""

    def __init__(
        self,
        registry: ServiceRegistry,
        config: Config | None = None,
        report: ConditionEvaluationReport | None = None,
    ) -> None:
        self._registry = registry
        self._config = config
        self._report = report

    def on_missing_bean(self, bean: str, bean_type: type) -> bool:
        """Match when no bean of *bean_type* is registered yet."""
        existing = self._registry.beans_of_type(bean_type)
        if existing:
            return self._record(
                bean, "OnMissingBean", False, f"found {bean_type.__name__} bean(s) {sorted(existing)}"
            )
        return self._record(bean, "OnMissingBean", True, f"no {bean_type.__name__} bean found")

    def on_bean(self, bean: str, bean_type: type) -> bool:
        """Match when at least one bean of *bean_type* is registered."""
        if self._registry.contains_type(bean_type):
            return self._record(bean, "OnBean", True, f"found {bean_type.__name__} bean")
        return self._record(bean, "OnBean", False, f"no {bean_type.__name__} bean found")

    def on_class(self, bean: str, module_name: str) -> bool:
        """Match when *module_name* can be imported."""
        if class_present(module_name):
            return self._record(bean, "OnClass", True, f"required module '{module_name}' found")
        return self._record(bean, "OnClass", False, f"required module '{module_name}' not found")

    def on_property(self, bean: str, key: str, having_value: str = "true", match_if_missing: bool = True) -> bool:
        """Match when config *key* equals *having_value* (case-insensitive)."""
        value = None if self._config is None else self._config.get(key)
        if value is None:
            return self._record(bean, "OnProperty", match_if_missing, f"'{key}' not set")
        matched = str(value).lower() == having_value.lower()
        return self._record(bean, "OnProperty", matched, f"'{key}' is '{value}'")

    def _record(self, bean: str, condition: str, match: bool, message: str) -> bool:
        logger.debug("%s %s for '%s': %s", condition, "matched" if match else "did not match", bean, message)
        if self._report is not None:
            self._report.record(bean, ConditionOutcome(condition=condition, match=match, message=message))
        return match
