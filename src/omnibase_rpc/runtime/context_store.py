# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Context Store.

Process-wide, request-scoped carrier for the active ModelRequestContext.
``run(context, body)`` executes ``body`` with ``context`` current for its
whole dynamic extent, including across ``await`` points; ``current()``
reads the context of the currently executing call chain.

Design Pattern:
    Built on ``contextvars.ContextVar``. Every asyncio task runs in its own
    copy of the context, so two invocations dispatched concurrently never
    observe or mutate each other's binding. Nested ``run`` calls shadow the
    outer context and restore it through the ContextVar token on exit,
    whether the body returns or raises.

Thread Safety:
    ContextVar bindings are per thread and per task. No locking is needed.

Example:
    >>> store = ContextStore()
    >>> store.current() is None
    True
    >>> async def body() -> str:
    ...     return store.current().request_id
    >>> await store.run(ModelRequestContext(request_id="r-1", node_id="n"), body)
    'r-1'
"""

from __future__ import annotations

__all__ = ["ContextStore", "RequestContextStore"]

import inspect
from collections.abc import Awaitable, Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Generic, TypeVar

from omnibase_rpc.models import ModelRequestContext

_T = TypeVar("_T")
_C = TypeVar("_C")


class ContextStore(Generic[_C]):
    """Async-correct request context store.

    A store owns one ContextVar. Separate stores (for example one per
    broker binding in a multi-broker process) never see each other's
    contexts.
    """

    def __init__(self, name: str = "omnibase_rpc_request_context") -> None:
        self._var: ContextVar[_C | None] = ContextVar(name, default=None)

    def current(self) -> _C | None:
        """Return the active context, or None outside any ``run``.

        None is a valid state: the caller is a fresh top-level call.
        """
        return self._var.get()

    @contextmanager
    def scope(self, context: _C) -> Iterator[_C]:
        """Bind ``context`` for the extent of the ``with`` block."""
        token = self._var.set(context)
        try:
            yield context
        finally:
            self._var.reset(token)

    async def run(
        self,
        context: _C,
        body: Callable[[], Awaitable[_T] | _T],
    ) -> _T:
        """Run ``body`` with ``context`` current, awaiting it if it returns an awaitable.

        The body's result or exception propagates unchanged.
        """
        with self.scope(context):
            result = body()
            if inspect.isawaitable(result):
                return await result
            return result


# Default store type used across the runtime package.
RequestContextStore = ContextStore[ModelRequestContext]
