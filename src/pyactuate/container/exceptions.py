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
"""Registry exceptions — lookup failures while wiring beans at startup."""

from __future__ import annotations

from pyactuate.kernel.exceptions import InfrastructureException


def _type_name(bean_type: type | tuple[type, ...]) -> str:
    if isinstance(bean_type, tuple):
        return " | ".join(getattr(t, "__name__", repr(t)) for t in bean_type)
    return getattr(bean_type, "__name__", repr(bean_type))


class BeanCreationException(InfrastructureException):
    """Fatal wiring error — the application cannot start."""

    def __init__(self, bean: str, reason: str) -> None:
        self.bean = bean
        self.reason = reason
        super().__init__(
            message=f"Failed to create bean '{bean}': {reason}",
            code="BEAN_CREATION",
            context={"bean": bean},
        )


class NoSuchBeanError(BeanCreationException):
    """No bean registered for the requested type or name."""

    def __init__(
        self,
        *,
        bean_type: type | tuple[type, ...] | None = None,
        bean_name: str | None = None,
        suggestions: list[str] | None = None,
    ) -> None:
        self.bean_type = bean_type
        self.bean_name = bean_name
        self.suggestions = suggestions or []

        if bean_type is not None:
            headline = f"No bean of type '{_type_name(bean_type)}' is registered"
        else:
            headline = f"No bean named '{bean_name}' is registered"
        if self.suggestions:
            headline += f" (registered: {', '.join(self.suggestions)})"

        super().__init__(bean=bean_name or _type_name(bean_type or object), reason=headline)


class NoUniqueBeanError(BeanCreationException):
    """Several beans match a lookup that expects exactly one."""

    def __init__(self, *, bean_type: type | tuple[type, ...], candidates: list[str]) -> None:
        self.bean_type = bean_type
        self.candidates = candidates
        super().__init__(
            bean=_type_name(bean_type),
            reason=f"expected a single bean of type '{_type_name(bean_type)}' but found {candidates}",
        )
