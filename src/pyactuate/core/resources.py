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
"""Resource abstraction — locate files on disk or on the import path.

Locations follow the ``prefix:path`` convention:

- ``classpath:git.properties`` — first match under a ``sys.path`` directory
- ``classpath:myapp.resources/git.properties`` — file inside an importable package
- ``file:/etc/app/git.properties`` or a bare path — filesystem
"""

from __future__ import annotations

import importlib.resources
import sys
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

CLASSPATH_PREFIX = "classpath:"
FILE_PREFIX = "file:"


@runtime_checkable
class Resource(Protocol):
    """A readable resource that may or may not exist."""

    @property
    def description(self) -> str: ...

    def exists(self) -> bool: ...

    def read_bytes(self) -> bytes: ...


class FileSystemResource:
    """Resource backed by a filesystem path."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def description(self) -> str:
        return f"file [{self._path}]"

    def exists(self) -> bool:
        return self._path.is_file()

    def read_bytes(self) -> bytes:
        return self._path.read_bytes()


class ClasspathResource:
    """Resource looked up on the import path.

    A ``package/file`` path whose first segment is an importable package is read
    through :mod:`importlib.resources`; otherwise every ``sys.path`` directory
    is searched and the first match wins.
    """

    def __init__(self, path: str, search_path: list[str] | None = None) -> None:
        self._path = path.lstrip("/")
        self._search_path = search_path

    @property
    def description(self) -> str:
        return f"class path resource [{self._path}]"

    def exists(self) -> bool:
        return self._locate() is not None

    def read_bytes(self) -> bytes:
        located = self._locate()
        if located is None:
            raise FileNotFoundError(self._path)
        return located.read_bytes()

    def _locate(self) -> Any:
        package, _, name = self._path.partition("/")
        if name and all(part.isidentifier() for part in package.split(".")):
            try:
                candidate = importlib.resources.files(package).joinpath(name)
            except (ModuleNotFoundError, TypeError):
                candidate = None
            if candidate is not None and candidate.is_file():
                return candidate

        for entry in self._search_path if self._search_path is not None else sys.path:
            root = Path(entry) if entry else Path.cwd()
            candidate_path = root / self._path
            if candidate_path.is_file():
                return candidate_path
        return None


def resolve_resource(location: str, base_dir: str | Path | None = None) -> Resource:
    """Turn a location string into a :class:`Resource`.

    Relative filesystem paths are resolved against *base_dir* when given.
    """
    if location.startswith(CLASSPATH_PREFIX):
        return ClasspathResource(location[len(CLASSPATH_PREFIX):])
    path = Path(location.removeprefix(FILE_PREFIX))
    if base_dir is not None and not path.is_absolute():
        path = Path(base_dir) / path
    return FileSystemResource(path)
