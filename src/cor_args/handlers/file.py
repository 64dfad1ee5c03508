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

"""Raw file contents handler."""

from __future__ import annotations

import os
from pathlib import Path
from typing import ClassVar

from cor_args._internal.logging_utils import structured_extra
from cor_args.compat import override
from cor_args.core.model_types import LogComponent

from .base import Handler, logger


def read_source_text(handler: Handler, path: Path, encoding: str, key: str) -> str | None:
    """Read ``path`` for ``handler``, returning None when it cannot be read.

    Missing, unreadable and undecodable files are all logged at debug level
    and reported as absent, as are paths the OS rejects outright. Line
    terminators are returned untranslated.
    """
    try:
        with path.open(encoding=encoding, newline="") as stream:
            return stream.read()
    except (OSError, ValueError) as exc:
        logger.debug(
            "%s could not read %s: %s",
            type(handler).__name__,
            path,
            exc,
            extra=structured_extra(
                handler.component,
                handler=type(handler).__name__,
                key=key,
                path=path,
                found=False,
                error=type(exc).__name__,
            ),
        )
        return None


def _strip_line_terminator(content: str) -> str:
    if content.endswith("\r\n"):
        return content[:-2]
    if content.endswith("\n"):
        return content[:-1]
    return content


class FileHandler(Handler):
    """Resolve any key to the whole contents of a text file.

    The key selects nothing: every request returns the same file contents,
    unlike the structured handlers which look the key up inside the
    document. One trailing line terminator is removed. A missing, unreadable
    or empty file has no value and the request moves on to the successor.
    The file is re-read on every request.

    Args:
        path: File to read.
        encoding: Text encoding of the file.
    """

    component: ClassVar[LogComponent] = LogComponent.FILE

    def __init__(self, path: str | os.PathLike[str], *, encoding: str = "utf-8") -> None:
        super().__init__()
        self._path = Path(path)
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    @override
    def resolve(self, key: str) -> str | None:
        content = read_source_text(self, self._path, self._encoding, key)
        if content is None:
            return None
        value = _strip_line_terminator(content)
        if not value:
            logger.debug(
                "%s is empty",
                self._path,
                extra=structured_extra(self.component, handler=type(self).__name__, key=key, path=self._path, found=False),
            )
            return None
        return value

    @override
    def __repr__(self) -> str:
        return f"FileHandler({os.fspath(self._path)!r})"


__all__ = ["FileHandler", "read_source_text"]
