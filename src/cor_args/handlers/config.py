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

"""Pre-loaded configuration handler."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from cor_args._internal.logging_utils import structured_extra
from cor_args.compat import override
from cor_args.core.model_types import LogComponent
from cor_args.json import MISSING, find_value, render_value

from .base import Handler, logger

if TYPE_CHECKING:
    from collections.abc import Mapping


class ConfigHandler(Handler):
    """Resolve a key from a configuration mapping the host already loaded.

    The mapping is borrowed, not copied, so later changes the caller makes
    to it are visible to subsequent requests. Lookup and rendering follow the
    structured file handlers.

    Args:
        config: Loaded configuration, e.g. the result of ``tomllib.load``.
        search_nested: Search nested tables and arrays when the key is not a
            top-level field.
    """

    component: ClassVar[LogComponent] = LogComponent.CONFIG

    def __init__(self, config: Mapping[str, object], *, search_nested: bool = False) -> None:
        super().__init__()
        self._config = config
        self._search_nested = search_nested

    @property
    def config(self) -> Mapping[str, object]:
        return self._config

    @override
    def resolve(self, key: str) -> str | None:
        value = find_value(self._config, key, nested=self._search_nested)
        if value is MISSING:
            logger.debug(
                "Configuration has no key '%s'",
                key,
                extra=structured_extra(self.component, handler=type(self).__name__, key=key, found=False),
            )
            return None
        return render_value(value)

    @override
    def __repr__(self) -> str:
        return f"ConfigHandler(keys={len(self._config)})"


__all__ = ["ConfigHandler"]
