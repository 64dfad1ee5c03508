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

"""Structured document handlers (JSON and TOML files).

Each request reads and parses the file from scratch, then looks the key up
inside the parsed document. Unreadable files, documents that fail to parse
and documents without the key are all absent, so the request moves on to the
successor. Lookup is top-level unless ``search_nested`` is enabled, in which
case nested tables and arrays are searched depth-first.
"""

from __future__ import annotations

import json
import os
from abc import abstractmethod
from pathlib import Path
from typing import ClassVar

from cor_args._internal.logging_utils import structured_extra
from cor_args.compat import override, tomllib
from cor_args.core.model_types import LogComponent
from cor_args.json import MISSING, find_value, render_value

from .base import Handler, logger
from .file import read_source_text


class StructuredFileHandler(Handler):
    """Base class for handlers that look keys up inside a parsed file.

    Subclasses provide ``parse_document`` and list the exception types their
    parser raises for malformed input in ``parse_errors``.

    Args:
        path: Document to read.
        encoding: Text encoding of the document.
        search_nested: Search nested tables and arrays when the key is not a
            top-level field.
    """

    component: ClassVar[LogComponent] = LogComponent.STRUCTURED
    parse_errors: ClassVar[tuple[type[Exception], ...]] = (ValueError,)

    def __init__(
        self,
        path: str | os.PathLike[str],
        *,
        encoding: str = "utf-8",
        search_nested: bool = False,
    ) -> None:
        super().__init__()
        self._path = Path(path)
        self._encoding = encoding
        self._search_nested = search_nested

    @property
    def path(self) -> Path:
        return self._path

    @property
    def search_nested(self) -> bool:
        return self._search_nested

    @abstractmethod
    def parse_document(self, text: str) -> object:
        """Parse the file contents into a document.

        Args:
            text: Raw file contents.

        Returns:
            The parsed document.
        """
        ...

    @override
    def resolve(self, key: str) -> str | None:
        text = read_source_text(self, self._path, self._encoding, key)
        if text is None:
            return None
        try:
            document = self.parse_document(text)
        except self.parse_errors as exc:
            logger.debug(
                "%s could not parse %s: %s",
                type(self).__name__,
                self._path,
                exc,
                extra=structured_extra(
                    self.component,
                    handler=type(self).__name__,
                    key=key,
                    path=self._path,
                    found=False,
                    error=type(exc).__name__,
                ),
            )
            return None
        value = find_value(document, key, nested=self._search_nested)
        if value is MISSING:
            logger.debug(
                "%s has no key '%s'",
                self._path,
                key,
                extra=structured_extra(self.component, handler=type(self).__name__, key=key, path=self._path, found=False),
            )
            return None
        return render_value(value)

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({os.fspath(self._path)!r})"


class JSONFileHandler(StructuredFileHandler):
    """Resolve a key from a field of a JSON document."""

    parse_errors: ClassVar[tuple[type[Exception], ...]] = (ValueError, RecursionError)

    @override
    def parse_document(self, text: str) -> object:
        return json.loads(text)


class TOMLFileHandler(StructuredFileHandler):
    """Resolve a key from a field of a TOML document."""

    parse_errors: ClassVar[tuple[type[Exception], ...]] = (tomllib.TOMLDecodeError, RecursionError)

    @override
    def parse_document(self, text: str) -> object:
        return tomllib.loads(text)


__all__ = ["JSONFileHandler", "StructuredFileHandler", "TOMLFileHandler"]
