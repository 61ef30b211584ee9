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
"""Base class for the built-in endpoints."""

from __future__ import annotations

from typing import Any


class AbstractEndpoint:
    """Holds the id and default enable/sensitive flags of an endpoint."""

    def __init__(self, endpoint_id: str, *, sensitive: bool = True, enabled: bool = True) -> None:
        self._endpoint_id = endpoint_id
        self._sensitive = sensitive
        self._enabled = enabled

    @property
    def endpoint_id(self) -> str:
        return self._endpoint_id

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def sensitive(self) -> bool:
        return self._sensitive

    async def handle(self, context: Any = None) -> dict[str, Any]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._endpoint_id!r})"
