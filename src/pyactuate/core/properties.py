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
"""Loader for flat ``key=value`` properties files (``git.properties`` and friends).

The accepted syntax is the ``java.util.Properties`` text format:

- ``#`` and ``!`` start comment lines; blank lines are skipped
- the key ends at the first unescaped ``=``, ``:`` or whitespace
- a line ending in an odd number of backslashes continues on the next line
- ``\\t``, ``\\n``, ``\\r``, ``\\f`` and ``\\uXXXX`` escapes are decoded; any
  other escaped character stands for itself
"""

from __future__ import annotations

import logging

from pyactuate.core.resources import Resource
from pyactuate.kernel.exceptions import ResourceReadError

logger = logging.getLogger(__name__)

_SEPARATORS = "=:"
_WHITESPACE = " \t\f"
_SIMPLE_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


class PropertiesSyntaxError(ValueError):
    """Raised by :func:`parse_properties` for malformed input."""

    def __init__(self, message: str, line: int) -> None:
        super().__init__(f"line {line}: {message}")
        self.line = line


def load_properties(resource: Resource) -> dict[str, str]:
    """Read *resource* into an ordered ``dict``.

    A missing resource yields an empty dict. A resource that exists but cannot
    be read, decoded, or parsed raises :class:`ResourceReadError`.
    """
    if not resource.exists():
        logger.debug("Properties resource %s not found, using empty properties", resource.description)
        return {}

    try:
        text = resource.read_bytes().decode("utf-8")
    except OSError as exc:
        raise ResourceReadError(resource.description, str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise ResourceReadError(resource.description, f"not valid UTF-8 ({exc.reason})") from exc

    try:
        properties = parse_properties(text)
    except PropertiesSyntaxError as exc:
        raise ResourceReadError(resource.description, str(exc)) from exc

    logger.debug("Loaded %d properties from %s", len(properties), resource.description)
    return properties


def parse_properties(text: str) -> dict[str, str]:
    """Parse properties *text*; later duplicate keys replace earlier ones."""
    result: dict[str, str] = {}
    for line_no, logical in _logical_lines(text):
        key, value = _split_entry(logical)
        result[_unescape(key, line_no)] = _unescape(value, line_no)
    return result


def _logical_lines(text: str) -> list[tuple[int, str]]:
    lines = text.splitlines()
    logical: list[tuple[int, str]] = []
    index = 0
    while index < len(lines):
        start = index
        line = lines[index].lstrip(_WHITESPACE)
        index += 1
        if not line or line[0] in "#!":
            continue
        while _continues(line) and index < len(lines):
            line = line[:-1] + lines[index].lstrip(_WHITESPACE)
            index += 1
        if _continues(line):
            # Trailing backslash on the last line is dropped.
            line = line[:-1]
        logical.append((start + 1, line))
    return logical


def _continues(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _split_entry(line: str) -> tuple[str, str]:
    key_end = len(line)
    escaped = False
    for pos, char in enumerate(line):
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char in _SEPARATORS or char in _WHITESPACE:
            key_end = pos
            break

    rest = line[key_end:].lstrip(_WHITESPACE)
    if rest and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)
    return line[:key_end], rest


def _unescape(raw: str, line_no: int) -> str:
    if "\\" not in raw:
        return raw
    out: list[str] = []
    pos = 0
    while pos < len(raw):
        char = raw[pos]
        pos += 1
        if char != "\\" or pos >= len(raw):
            out.append(char)
            continue
        code = raw[pos]
        pos += 1
        if code == "u":
            digits = raw[pos:pos + 4]
            if len(digits) < 4 or any(d not in "0123456789abcdefABCDEF" for d in digits):
                raise PropertiesSyntaxError(f"malformed \\uxxxx encoding '\\u{digits}'", line_no)
            out.append(chr(int(digits, 16)))
            pos += 4
        else:
            out.append(_SIMPLE_ESCAPES.get(code, code))
    return "".join(out)
