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
"""ActuatorEndpoint protocol — the shape every management endpoint has."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ActuatorEndpoint(Protocol):
    """A management endpoint identified by ``endpoint_id``.

    Whatever exposes endpoints (HTTP, CLI, admin UI) calls :meth:`handle` and
    serializes the returned dict. Sensitive endpoints reveal configuration or
    internals and should only be exposed to trusted callers.
    """

    @property
    def endpoint_id(self) -> str: ...

    @property
    def enabled(self) -> bool:
        """Default enable state.  Can be overridden via config."""
        ...

    @property
    def sensitive(self) -> bool: ...

    async def handle(self, context: Any = None) -> dict[str, Any]:
        """Return a JSON-serializable dict."""
        ...
