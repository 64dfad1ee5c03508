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

"""Abstract base class for value handlers.

A handler is one link in a Chain of Responsibility that resolves a single
named configuration value. Each handler owns at most one successor; a
request (a lookup key) enters at the head and travels down the chain until
some handler's source has a value for it.

Resolution Contract:
1. resolve() - local lookup against the handler's own source only; returns
   the value as text or None when the source has nothing for the key
2. handle_request() - dispatch: local lookup first, then delegate the same
   key to the successor; None once the chain is exhausted
3. next() / set_next() - attach a successor, transferring ownership of it

Example Implementation:
    class DictHandler(Handler):
        def __init__(self, values: dict[str, str]) -> None:
            super().__init__()
            self._values = values

        def resolve(self, key: str) -> str | None:
            return self._values.get(key)
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from cor_args._internal.logging_utils import structured_extra
from cor_args.core.model_types import LogComponent
from cor_args.exceptions import CorArgsTypeError, HandlerLinkError, UnresolvedKeyError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from cor_args.compat import Self

logger: logging.Logger = logging.getLogger("cor_args.handlers")


class Handler(ABC):
    """Abstract base class for value handlers.

    Subclasses implement ``resolve`` for their source; linking and dispatch
    live here. A handler belongs to at most one chain: once linked as a
    successor it records its owner, and linking it a second time elsewhere is
    rejected, as is any link that would close a cycle.
    """

    component: ClassVar[LogComponent] = LogComponent.CHAIN

    def __init__(self) -> None:
        self._next: Handler | None = None
        self._owner: Handler | None = None

    @property
    def successor(self) -> Handler | None:
        """Handler consulted when this one has no value, if any."""
        return self._next

    @property
    def owner(self) -> Handler | None:
        """Handler this one is linked under, or None for a chain head."""
        return self._owner

    @abstractmethod
    def resolve(self, key: str) -> str | None:
        """Look up ``key`` in this handler's own source.

        Implementations must not consult the successor and must not raise for
        source failures; an unreachable source is simply absent.

        Args:
            key: Name being looked up.

        Returns:
            The value as text, or None when the source has nothing for the key.
        """
        ...

    def handle_request(self, key: str) -> str | None:
        """Resolve ``key`` here or delegate it unchanged down the chain.

        Each link is asked in turn with a loop over the chain, so chain
        length is not bounded by the recursion limit.

        Args:
            key: Name being looked up.

        Returns:
            The first value found along the chain, or None if no handler in
            the chain has one.

        Raises:
            CorArgsTypeError: If ``key`` is not a string.
        """
        if not isinstance(key, str):
            msg = f"Lookup key must be a string, got {type(key).__name__}"
            raise CorArgsTypeError(msg)
        link: Handler = self
        for link in self:
            value = link.resolve(key)
            if value is not None:
                logger.debug(
                    "%s resolved '%s'",
                    type(link).__name__,
                    key,
                    extra=structured_extra(link.component, handler=type(link).__name__, key=key, found=True),
                )
                return value
        logger.debug(
            "%s ended the chain without a value for '%s'",
            type(link).__name__,
            key,
            extra=structured_extra(link.component, handler=type(link).__name__, key=key, found=False),
        )
        return None

    def require(self, key: str) -> str:
        """Resolve ``key`` and raise when the chain is exhausted.

        Args:
            key: Name being looked up.

        Returns:
            The first value found along the chain.

        Raises:
            UnresolvedKeyError: If no handler in the chain has a value.
        """
        value = self.handle_request(key)
        if value is None:
            raise UnresolvedKeyError(key)
        return value

    def set_next(self, handler: Handler) -> None:
        """Attach ``handler`` as the successor, taking ownership of it.

        Re-linking replaces the current successor (last write wins); the
        replaced handler is released and may be linked elsewhere.

        Args:
            handler: Handler to consult when this one has no value.

        Raises:
            CorArgsTypeError: If ``handler`` is not a Handler.
            HandlerLinkError: If ``handler`` is this handler, already belongs
                to another handler, or already leads back to this handler.
        """
        self._check_linkable(handler)
        previous = self._next
        if previous is handler:
            return
        if previous is not None:
            previous._owner = None
            logger.debug(
                "%s replaced successor %r with %r",
                type(self).__name__,
                previous,
                handler,
                extra=structured_extra(LogComponent.CHAIN, handler=type(self).__name__),
            )
        handler._owner = self
        self._next = handler

    def next(self, handler: Handler) -> Self:
        """Fluent form of ``set_next``.

        Args:
            handler: Handler to consult when this one has no value.

        Returns:
            This handler, for further chaining.
        """
        self.set_next(handler)
        return self

    def _check_linkable(self, handler: object) -> None:
        if not isinstance(handler, Handler):
            msg = f"Successor must be a Handler, got {type(handler).__name__}"
            raise CorArgsTypeError(msg)
        if handler is self:
            msg = f"{self!r} cannot be its own successor"
            raise HandlerLinkError(msg)
        if handler._owner is not None and handler._owner is not self:
            msg = f"{handler!r} is already linked under {handler._owner!r}"
            raise HandlerLinkError(msg)
        if any(link is self for link in handler):
            msg = f"Linking {handler!r} under {self!r} would form a cycle"
            raise HandlerLinkError(msg)

    def __iter__(self) -> Iterator[Handler]:
        """Walk the chain starting at this handler."""
        current: Handler | None = self
        while current is not None:
            yield current
            current = current._next

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


__all__ = ["Handler"]
