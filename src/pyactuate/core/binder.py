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
"""PropertiesBinder — bind flat dotted properties to trees and dataclasses."""

from __future__ import annotations

import dataclasses
import logging
import re
import types
import typing
from collections.abc import Mapping
from typing import Any, TypeVar, get_type_hints

logger = logging.getLogger(__name__)

T = TypeVar("T")

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


class PropertiesBinder:
    """Binds ``target.*`` keys of a flat properties mapping.

    Field names match relaxed property names: ``commit_time`` accepts
    ``commit_time``, ``commit-time`` and ``commitTime``. A dataclass field may
    declare its property name explicitly with ``metadata={"property": "id"}``.
    Unknown properties are ignored.
    """

    def bind_tree(self, properties: Mapping[str, Any], target: str) -> dict[str, Any]:
        """Nest every ``target.a.b=v`` entry as ``{"a": {"b": v}}``, keeping input order."""
        prefix = f"{target}." if target else ""
        tree: dict[str, Any] = {}
        for key, value in properties.items():
            if not key.startswith(prefix) or key == prefix:
                continue
            parts = key[len(prefix):].split(".")
            node = tree
            for part in parts[:-1]:
                child = node.get(part)
                if not isinstance(child, dict):
                    if child is not None:
                        logger.debug("Property '%s' replaces scalar value at '%s'", key, part)
                    child = {}
                    node[part] = child
                node = child
            node[parts[-1]] = value
        return tree

    def bind(self, target_cls: type[T], properties: Mapping[str, Any], target: str) -> T:
        """Create a *target_cls* dataclass from ``target.*`` properties.

        Fields without a matching property keep their dataclass defaults.
        """
        if not dataclasses.is_dataclass(target_cls):
            raise TypeError(f"{target_cls.__name__} is not a dataclass")

        hints = get_type_hints(target_cls)
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(target_cls):
            if not field.init:
                continue
            name = field.metadata.get("property", field.name)
            field_type = _unwrap_optional(hints.get(field.name, Any))
            if isinstance(field_type, type) and dataclasses.is_dataclass(field_type):
                for candidate in _relaxed_names(name):
                    nested = f"{target}.{candidate}"
                    if any(key.startswith(nested + ".") for key in properties):
                        kwargs[field.name] = self.bind(field_type, properties, nested)
                        break
                continue
            for candidate in _relaxed_names(name):
                key = f"{target}.{candidate}"
                if key in properties:
                    kwargs[field.name] = _convert(properties[key], field_type)
                    break

        return target_cls(**kwargs)


def _relaxed_names(name: str) -> list[str]:
    snake = _CAMEL_RE.sub("_", name).lower()
    kebab = snake.replace("_", "-")
    parts = snake.split("_")
    camel = parts[0] + "".join(p.capitalize() for p in parts[1:])
    names: list[str] = []
    for candidate in (name, snake, kebab, camel):
        if candidate not in names:
            names.append(candidate)
    return names


def _unwrap_optional(tp: Any) -> Any:
    origin = typing.get_origin(tp)
    if origin is typing.Union or origin is types.UnionType:
        args = [a for a in typing.get_args(tp) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp


def _convert(value: Any, expected_type: Any) -> Any:
    if not isinstance(value, str):
        return value
    if expected_type is bool:
        return value.lower() in ("true", "1", "yes")
    if expected_type is int:
        return int(value)
    if expected_type is float:
        return float(value)
    return value
