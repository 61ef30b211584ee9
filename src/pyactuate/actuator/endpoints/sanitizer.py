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
"""Mask values whose keys look like credentials."""

from __future__ import annotations

import re
from typing import Any

MASK = "******"

_DEFAULT_KEYS = ("password", "secret", "key", "token", "credentials")


class Sanitizer:
    """Replaces values of sensitive keys with :data:`MASK`.

    A key is sensitive when it ends with one of *keys_to_sanitize*
    (case-insensitive), so ``db.password`` and ``api_key`` are masked.
    """

    def __init__(self, keys_to_sanitize: tuple[str, ...] = _DEFAULT_KEYS) -> None:
        pattern = "|".join(re.escape(k) for k in keys_to_sanitize)
        self._pattern = re.compile(rf".*({pattern})$", re.IGNORECASE)

    def sanitize(self, key: str, value: Any) -> Any:
        if value is None:
            return None
        return MASK if self._pattern.match(key) else value

    def sanitize_tree(self, data: dict[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, value in data.items():
            if isinstance(value, dict):
                result[key] = self.sanitize_tree(value)
            else:
                result[key] = self.sanitize(str(key), value)
        return result
