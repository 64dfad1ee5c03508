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

"""Process environment handler."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, ClassVar

from cor_args._internal.logging_utils import structured_extra
from cor_args.compat import override
from cor_args.core.model_types import LogComponent

from .base import Handler, logger

if TYPE_CHECKING:
    from collections.abc import Mapping

    from cor_args.compat import Self


class EnvHandler(Handler):
    """Resolve a key from an environment variable named ``prefix + key``.

    The environment is read on every request; nothing is cached. Values are
    returned raw, so a variable set to the empty string is still a value.

    Args:
        prefix: Text prepended to the key before lookup. ``None`` and ``""``
            both mean no prefix.
        environ: Mapping to read variables from. Defaults to the live
            ``os.environ``.
    """

    component: ClassVar[LogComponent] = LogComponent.ENV

    def __init__(self, prefix: str | None = None, *, environ: Mapping[str, str] | None = None) -> None:
        super().__init__()
        self._prefix = prefix
        self._environ = environ

    @property
    def prefix(self) -> str | None:
        return self._prefix

    def with_prefix(self, prefix: str | None) -> Self:
        """Set the variable name prefix and return this handler."""
        self._prefix = prefix
        return self

    def variable_name(self, key: str) -> str:
        """Return the environment variable consulted for ``key``."""
        return f"{self._prefix or ''}{key}"

    @override
    def resolve(self, key: str) -> str | None:
        name = self.variable_name(key)
        env = os.environ if self._environ is None else self._environ
        value = env.get(name)
        if value is None:
            logger.debug(
                "Environment variable %s is not set",
                name,
                extra=structured_extra(self.component, handler=type(self).__name__, key=key, lookup=name, found=False),
            )
        return value

    @override
    def __repr__(self) -> str:
        return f"EnvHandler(prefix={self._prefix!r})"


__all__ = ["EnvHandler"]
