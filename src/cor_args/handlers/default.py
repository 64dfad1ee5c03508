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

"""Constant fallback handler."""

from __future__ import annotations

from typing import ClassVar

from cor_args._internal.logging_utils import structured_extra
from cor_args.compat import override
from cor_args.core.model_types import LogComponent

from .base import Handler, logger


class DefaultHandler(Handler):
    """Resolve every key to a fixed value.

    Intended as the last link of a chain: it always answers, so anything
    linked after it is never consulted.
    """

    component: ClassVar[LogComponent] = LogComponent.DEFAULT

    def __init__(self, value: str) -> None:
        super().__init__()
        self._value = value

    @property
    def value(self) -> str:
        return self._value

    @override
    def resolve(self, key: str) -> str | None:
        return self._value

    @override
    def set_next(self, handler: Handler) -> None:
        """Link a successor, warning that it can never be reached."""
        relinked = handler is self.successor
        super().set_next(handler)
        if relinked:
            return
        logger.warning(
            "%r linked after a DefaultHandler is unreachable",
            handler,
            extra=structured_extra(self.component, handler=type(self).__name__),
        )

    @override
    def __repr__(self) -> str:
        return f"DefaultHandler({self._value!r})"


__all__ = ["DefaultHandler"]
