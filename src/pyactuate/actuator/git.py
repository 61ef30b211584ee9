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
"""Build metadata bound from ``git.properties``."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

SHORT_ID_LENGTH = 7


@dataclass(frozen=True)
class Commit:
    """The commit a build was made from.

    The full id is kept as bound; :attr:`id` shortens it on every read.
    """

    raw_id: str | None = field(default=None, metadata={"property": "id"})
    time: str | None = None

    @property
    def id(self) -> str:
        """Abbreviated commit id, ``""`` when unknown."""
        if self.raw_id is None:
            return ""
        return self.raw_id[:SHORT_ID_LENGTH]

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "time": self.time}


@dataclass(frozen=True)
class GitInfo:
    """Branch and commit of the running build. All fields optional."""

    branch: str | None = None
    commit: Commit = field(default_factory=Commit)

    def to_dict(self) -> dict[str, Any]:
        return {"branch": self.branch, "commit": self.commit.to_dict()}
