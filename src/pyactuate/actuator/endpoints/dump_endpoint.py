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
"""Dump endpoint — stack of every live thread."""

from __future__ import annotations

import sys
import threading
import traceback
from typing import Any

from pyactuate.actuator.endpoints.base import AbstractEndpoint


class DumpEndpoint(AbstractEndpoint):
    """Exposes a thread dump at ``/actuator/dump``."""

    def __init__(self) -> None:
        super().__init__("dump")

    async def handle(self, context: Any = None) -> dict[str, Any]:
        frames = sys._current_frames()
        threads: list[dict[str, Any]] = []
        for thread in threading.enumerate():
            frame = frames.get(thread.ident) if thread.ident is not None else None
            threads.append({
                "threadName": thread.name,
                "threadId": thread.ident,
                "daemon": thread.daemon,
                "alive": thread.is_alive(),
                "stackTrace": [line.rstrip() for line in traceback.format_stack(frame)] if frame else [],
            })
        return {"threads": threads}
