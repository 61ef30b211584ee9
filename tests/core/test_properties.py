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
"""Tests for the properties-file parser and loader."""

from pathlib import Path

import pytest

from pyactuate.core.properties import PropertiesSyntaxError, load_properties, parse_properties
from pyactuate.core.resources import FileSystemResource
from pyactuate.kernel.exceptions import ResourceReadError


class TestParseProperties:
    def test_separators(self):
        text = "a=1\nb:2\nc 3\nd = 4\ne\t:\t5\n"
        assert parse_properties(text) == {"a": "1", "b": "2", "c": "3", "d": "4", "e": "5"}

    def test_comments_and_blank_lines(self):
        text = "# comment\n! also a comment\n\n   \nkey=value\n"
        assert parse_properties(text) == {"key": "value"}

    def test_key_without_value(self):
        assert parse_properties("empty\nblank=\n") == {"empty": "", "blank": ""}

    def test_value_keeps_later_separators(self):
        assert parse_properties("url=jdbc:h2:mem=x\n") == {"url": "jdbc:h2:mem=x"}

    def test_order_preserved_and_duplicates_replace(self):
        result = parse_properties("b=1\na=2\nb=3\n")
        assert list(result) == ["b", "a"]
        assert result["b"] == "3"

    def test_line_continuation(self):
        text = "fruits=apple, \\\n    banana, \\\n    pear\n"
        assert parse_properties(text) == {"fruits": "apple, banana, pear"}

    def test_even_backslashes_do_not_continue(self):
        text = "path=c:\\\\\nnext=1\n"
        assert parse_properties(text) == {"path": "c:\\", "next": "1"}

    def test_escapes(self):
        text = "tab=a\\tb\nnl=a\\nb\nuni=caf\\u00e9\nplain=\\q\n"
        assert parse_properties(text) == {"tab": "a\tb", "nl": "a\nb", "uni": "café", "plain": "q"}

    def test_escaped_separator_in_key(self):
        assert parse_properties("a\\=b=c\nx\\ y=z\n") == {"a=b": "c", "x y": "z"}

    def test_git_properties_sample(self):
        text = (
            "#Generated by Git-Commit-Id-Plugin\n"
            "git.branch=main\n"
            "git.commit.id=a1b2c3d4e5f60718293a4b5c6d7e8f9012345678\n"
            "git.commit.id.abbrev=a1b2c3d\n"
            "git.commit.time=2024-05-01T10\\:15\\:30+0000\n"
        )
        result = parse_properties(text)
        assert result["git.branch"] == "main"
        assert result["git.commit.time"] == "2024-05-01T10:15:30+0000"
        assert result["git.commit.id.abbrev"] == "a1b2c3d"

    @pytest.mark.parametrize("value", ["\\u12G4", "\\u00", "\\u"])
    def test_malformed_unicode_escape(self, value):
        with pytest.raises(PropertiesSyntaxError, match="malformed") as exc_info:
            parse_properties(f"ok=1\nbad={value}\n")
        assert exc_info.value.line == 2


class TestLoadProperties:
    def test_missing_file_is_empty(self, tmp_path: Path):
        assert load_properties(FileSystemResource(tmp_path / "nope.properties")) == {}

    def test_reads_file(self, tmp_path: Path):
        path = tmp_path / "app.properties"
        path.write_text("name=orders\n", encoding="utf-8")
        assert load_properties(FileSystemResource(path)) == {"name": "orders"}

    def test_syntax_error_becomes_resource_read_error(self, tmp_path: Path):
        path = tmp_path / "app.properties"
        path.write_text("name=\\uXYZW\n")
        with pytest.raises(ResourceReadError) as exc_info:
            load_properties(FileSystemResource(path))
        assert exc_info.value.resource == f"file [{path}]"
        assert "line 1" in exc_info.value.reason
        assert isinstance(exc_info.value.__cause__, PropertiesSyntaxError)

    def test_invalid_utf8_becomes_resource_read_error(self, tmp_path: Path):
        path = tmp_path / "app.properties"
        path.write_bytes(b"name=\xc3\x28\n")
        with pytest.raises(ResourceReadError, match="UTF-8"):
            load_properties(FileSystemResource(path))

    def test_unreadable_file_becomes_resource_read_error(self):
        class _Broken:
            description = "broken resource"

            def exists(self) -> bool:
                return True

            def read_bytes(self) -> bytes:
                raise PermissionError("denied")

        with pytest.raises(ResourceReadError, match="denied"):
            load_properties(_Broken())
