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

"""Common exception hierarchy for cor_args.

Source failures (missing files, malformed documents, unset variables) are
never raised by handlers; they collapse to an absent value so the chain can
continue. The exceptions below cover caller mistakes and the opt-in
``Handler.require`` helper.
"""

from __future__ import annotations

__all__ = [
    "CorArgsError",
    "CorArgsTypeError",
    "CorArgsValidationError",
    "HandlerLinkError",
    "UnresolvedKeyError",
]


class CorArgsError(Exception):
    """Base error for all cor_args exceptions."""


class CorArgsValidationError(CorArgsError, ValueError):
    """Raised when input data fails validation checks."""


class CorArgsTypeError(CorArgsError, TypeError):
    """Raised when input data has an unexpected type."""


class HandlerLinkError(CorArgsValidationError):
    """Raised when linking a successor would share a handler or form a cycle."""


class UnresolvedKeyError(CorArgsError, LookupError):
    """Raised by ``Handler.require`` when no handler in the chain has a value.

    Attributes:
        key: The lookup key that could not be resolved.
    """

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"No handler in the chain resolved key '{key}'")
