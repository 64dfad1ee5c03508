# Copyright 2025 CrownOps Engineering
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

"""Tests for ``FileHandler``.

The file handler ignores the requested key and answers with the whole file,
whereas the structured handlers look the key up inside the document.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from cor_args import DefaultHandler, FileHandler

pytestmark = pytest.mark.unit

WriteFile = Callable[[str, str], Path]


def test_file_handler_returns_contents_without_trailing_newline(write_file: WriteFile) -> None:
    path = write_file("value.txt", "test_content\n")

    assert FileHandler(path).handle_request("") == "test_content"


def test_file_handler_strips_only_one_line_terminator(write_file: WriteFile) -> None:
    crlf = write_file("crlf.txt", "windows\r\n")
    blank_lines = write_file("blank.txt", "line one\nline two\n\n")

    assert FileHandler(crlf).handle_request("key") == "windows"
    assert FileHandler(blank_lines).handle_request("key") == "line one\nline two\n"


def test_file_handler_ignores_key(write_file: WriteFile) -> None:
    handler = FileHandler(write_file("value.txt", "debug\n"))

    assert handler.handle_request("a") == handler.handle_request("b") == "debug"


def test_file_handler_accepts_string_paths(write_file: WriteFile) -> None:
    path = write_file("value.txt", "text")

    handler = FileHandler(str(path))

    assert handler.path == path
    assert handler.handle_request("key") == "text"


def test_file_handler_returns_none_for_missing_file(tmp_path: Path) -> None:
    assert FileHandler(tmp_path / "should-not-exist.txt").handle_request("example") is None


def test_file_handler_returns_none_for_directory() -> None:
    assert FileHandler("").handle_request("example") is None


def test_file_handler_treats_empty_file_like_missing_file(write_file: WriteFile) -> None:
    empty = write_file("empty.txt", "")
    newline_only = write_file("newline.txt", "\n")

    assert FileHandler(empty).next(DefaultHandler("fallback")).handle_request("k") == "fallback"
    assert FileHandler(newline_only).handle_request("k") is None


def test_file_handler_returns_none_for_undecodable_file(tmp_path: Path) -> None:
    path = tmp_path / "binary.bin"
    path.write_bytes(b"\xff\xfe\xfa")

    assert FileHandler(path).handle_request("key") is None


def test_file_handler_delegates_when_file_missing(tmp_path: Path) -> None:
    handler = FileHandler(tmp_path / "missing.txt").next(DefaultHandler("DEFAULT_VALUE"))

    assert handler.handle_request("example") == "DEFAULT_VALUE"


def test_file_handler_rereads_file_each_request(tmp_path: Path) -> None:
    path = tmp_path / "value.txt"
    handler = FileHandler(path)

    assert handler.handle_request("key") is None
    _ = path.write_text("created\n", encoding="utf-8")
    assert handler.handle_request("key") == "created"
    _ = path.write_text("changed\n", encoding="utf-8")
    assert handler.handle_request("key") == "changed"


def test_file_handler_keeps_line_terminators_inside_contents(tmp_path: Path) -> None:
    crlf = tmp_path / "crlf.txt"
    crlf.write_bytes(b"a\r\nb\r\n")
    lone_cr = tmp_path / "cr.txt"
    lone_cr.write_bytes(b"a\rb\n")

    assert FileHandler(crlf).handle_request("k") == "a\r\nb"
    assert FileHandler(lone_cr).handle_request("k") == "a\rb"


def test_file_handler_treats_path_rejected_by_os_as_missing() -> None:
    handler = FileHandler("bad\x00name").next(DefaultHandler("fallback"))

    assert handler.handle_request("k") == "fallback"
