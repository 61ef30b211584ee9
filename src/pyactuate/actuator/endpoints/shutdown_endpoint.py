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
"""Shutdown endpoint — stop the application on request. Disabled by default."""

from __future__ import annotations

import asyncio
import inspect
import logging
import os
import signal
from collections.abc import Callable
from typing import Any

from pyactuate.actuator.endpoints.base import AbstractEndpoint

logger = logging.getLogger(__name__)

SHUTDOWN_DELAY_SECONDS = 0.5


def _terminate_process() -> None:
    os.kill(os.getpid(), signal.SIGTERM)


class ShutdownEndpoint(AbstractEndpoint):
    """Endpoint at ``/actuator/shutdown``.

    Replies first, then runs *on_shutdown* after *delay* seconds on the running
    event loop so the reply can still be delivered. A coroutine hook is
    scheduled as a task on that loop. Without a hook the process
    sends itself ``SIGTERM``.
    """

    def __init__(
        self,
        on_shutdown: Callable[[], Any] | None = None,
        delay: float = SHUTDOWN_DELAY_SECONDS,
    ) -> None:
        super().__init__("shutdown", enabled=False)
        self._on_shutdown = on_shutdown or _terminate_process
        self._delay = delay
        self._pending: asyncio.Future[Any] | None = None

    async def handle(self, context: Any = None) -> dict[str, Any]:
        logger.info("Shutdown requested, stopping in %.1fs", self._delay)
        asyncio.get_running_loop().call_later(self._delay, self._run_hook)
        return {"message": "Shutting down, bye..."}

    def _run_hook(self) -> None:
        result = self._on_shutdown()
        if inspect.isawaitable(result):
            self._pending = asyncio.ensure_future(result)
