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

"""Parsed command-line argument handler."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, ClassVar, Protocol, cast, runtime_checkable

from cor_args._internal.logging_utils import structured_extra
from cor_args.compat import override
from cor_args.core.model_types import LogComponent

from .base import Handler, logger

if TYPE_CHECKING:
    import argparse


@runtime_checkable
class ArgumentSource(Protocol):
    """Parsed-argument collaborator exposing a named string lookup.

    Implement this to plug a command-line parser other than ``argparse`` into
    an ``ArgHandler``. ``get_one`` returns None when the user did not supply
    the argument.
    """

    def get_one(self, name: str) -> object | None:
        """Return the parsed value of argument ``name``, or None."""
        ...  # pragma: no cover


class ArgHandler(Handler):
    """Resolve a key from arguments the host application already parsed.

    The argument source is borrowed: the handler keeps a reference, never
    re-parses and never copies it, so the caller must keep it alive and
    unchanged for as long as the chain is in use. The key is used verbatim
    as the argument destination name.

    A value is present only when the source holds a ``str`` for the key.
    ``None`` (argparse's marker for an option the user did not pass and that
    has no default) and non-text values are treated as absent; nothing is
    coerced. Whether a parser-declared default counts as supplied is up to
    the parser: declare ``default=None`` or ``argparse.SUPPRESS`` to let
    later handlers answer instead.

    Args:
        args: An ``argparse.Namespace``, a mapping such as ``vars(namespace)``,
            or an ``ArgumentSource``.
    """

    component: ClassVar[LogComponent] = LogComponent.ARG

    def __init__(self, args: argparse.Namespace | Mapping[str, object] | ArgumentSource) -> None:
        super().__init__()
        self._args = args

    @property
    def args(self) -> argparse.Namespace | Mapping[str, object] | ArgumentSource:
        return self._args

    def _lookup(self, key: str) -> object | None:
        source = self._args
        if isinstance(source, ArgumentSource):
            return source.get_one(key)
        if isinstance(source, Mapping):
            return cast("Mapping[str, object]", source).get(key)
        return cast("object | None", getattr(source, key, None))

    @override
    def resolve(self, key: str) -> str | None:
        value = self._lookup(key)
        if isinstance(value, str):
            return value
        reason = "not supplied" if value is None else f"not text ({type(value).__name__})"
        logger.debug(
            "Argument %s is %s",
            key,
            reason,
            extra=structured_extra(self.component, handler=type(self).__name__, key=key, found=False),
        )
        return None

    @override
    def __repr__(self) -> str:
        return f"ArgHandler({type(self._args).__name__})"


__all__ = ["ArgHandler", "ArgumentSource"]
