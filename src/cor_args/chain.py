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

"""Chain assembly helpers.

Chains are normally built fluently, innermost successor first::

    handler = ArgHandler(args).next(EnvHandler("MYAPP_").next(DefaultHandler("info")))

``build_chain`` does the same from a flat priority-ordered list, which reads
closer to the precedence it encodes::

    handler = build_chain(ArgHandler(args), EnvHandler("MYAPP_"), DefaultHandler("info"))
"""

from __future__ import annotations

import logging
from itertools import pairwise
from typing import TYPE_CHECKING

from cor_args._internal.logging_utils import structured_extra
from cor_args.core.model_types import LogComponent
from cor_args.exceptions import CorArgsValidationError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from cor_args.handlers.base import Handler

logger: logging.Logger = logging.getLogger("cor_args.chain")


def build_chain(*handlers: Handler) -> Handler:
    """Link handlers in priority order and return the head.

    Each handler becomes the successor of the one before it, so the first
    handler is consulted first and the last one is the final fallback.

    Args:
        *handlers: Handlers from highest to lowest precedence.

    Returns:
        The first handler, now heading the chain.

    Raises:
        CorArgsValidationError: If no handlers are given.
        HandlerLinkError: If a handler is repeated or already belongs to
            another chain.
    """
    if not handlers:
        msg = "build_chain requires at least one handler"
        raise CorArgsValidationError(msg)
    for current, successor in pairwise(handlers):
        current.set_next(successor)
    logger.debug(
        "Built chain: %s",
        " -> ".join(describe_chain(handlers[0])),
        extra=structured_extra(LogComponent.CHAIN, handler=type(handlers[0]).__name__),
    )
    return handlers[0]


def iter_chain(head: Handler) -> Iterator[Handler]:
    """Yield each handler of the chain starting at ``head``."""
    return iter(head)


def describe_chain(head: Handler) -> list[str]:
    """Return a readable description of each link, head first."""
    return [repr(handler) for handler in iter_chain(head)]


__all__ = ["build_chain", "describe_chain", "iter_chain"]
