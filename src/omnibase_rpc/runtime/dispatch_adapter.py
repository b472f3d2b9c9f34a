# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Dispatch Adapter.

Wraps service members so that, when the Broker Runtime invokes them, each
invocation runs inside its own ModelRequestContext:

- Actions: context copied from the invocation record, with the record itself
  as ``parent_call_handle`` (enabling the CallRouter fast path). The method
  is called with the record's params spread positionally.
- Events: same context scoping; internal (``$``) events emit the raw payload
  as a single argument, domain events spread it positionally.
- Lifecycle hooks: fresh context with an empty request id, the runtime's
  node id and a reference to the binding, so calls made while starting up
  are still context aware.

Error Handling:
    The adapter adds no retry, wrapping, or suppression. Whatever the
    underlying method raises surfaces to the Broker Runtime unchanged.

Thread Safety:
    The adapter is stateless apart from its constructor arguments. Wrapped
    handlers can be invoked concurrently.
"""

from __future__ import annotations

__all__ = ["DispatchAdapter"]

import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from omnibase_rpc.models import ModelRequestContext
from omnibase_rpc.runtime.member_classifier import is_internal_event

if TYPE_CHECKING:
    from omnibase_rpc.protocols import ProtocolInvocationRecord, ProtocolServiceObject
    from omnibase_rpc.runtime.broker_binding import BrokerBinding
    from omnibase_rpc.runtime.context_store import RequestContextStore

logger = logging.getLogger(__name__)

InvocationHandler = Callable[["ProtocolInvocationRecord"], Awaitable[object]]


class DispatchAdapter:
    """Produces context-scoped handlers for actions, events and lifecycle hooks.

    Args:
        context_store: Store the handlers bind their contexts in.
        binding: The runtime binding recorded as ``broker_ref`` and used for
            the node id of lifecycle contexts.
    """

    def __init__(
        self,
        context_store: RequestContextStore,
        binding: BrokerBinding,
    ) -> None:
        self._context_store = context_store
        self._binding = binding

    def _context_for(self, invocation: ProtocolInvocationRecord) -> ModelRequestContext:
        return ModelRequestContext(
            request_id=invocation.request_id or "",
            node_id=invocation.node_id,
            call_id=invocation.call_id,
            parent_call_handle=invocation,
            broker_ref=self._binding,
        )

    def wrap_action(self, method: Callable[..., object]) -> InvocationHandler:
        """Wrap ``method`` as an action handler taking an invocation record."""

        async def action_handler(invocation: ProtocolInvocationRecord) -> object:
            context = self._context_for(invocation)
            params = invocation.params or ()
            return await self._context_store.run(context, lambda: method(*params))

        action_handler.__name__ = getattr(method, "__name__", "action_handler")
        action_handler.__qualname__ = getattr(
            method, "__qualname__", action_handler.__name__
        )
        return action_handler

    def wrap_event(
        self,
        instance: ProtocolServiceObject,
        event_name: str,
    ) -> InvocationHandler:
        """Build a handler that re-emits ``event_name`` on ``instance``."""
        internal = is_internal_event(event_name)

        async def event_handler(invocation: ProtocolInvocationRecord) -> object:
            context = self._context_for(invocation)
            if internal:
                # Internal event payloads are structured, not positional.
                return await self._context_store.run(
                    context, lambda: instance.emit(event_name, invocation.params)
                )
            params = invocation.params or ()
            return await self._context_store.run(
                context, lambda: instance.emit(event_name, *params)
            )

        return event_handler

    def wrap_lifecycle(
        self, method: Callable[[], object]
    ) -> Callable[..., Awaitable[object]]:
        """Wrap a lifecycle hook so it runs inside a fresh lifecycle context.

        Arguments passed by the runtime are ignored; hooks take none.
        """

        async def lifecycle_handler(*_args: object, **_kwargs: object) -> object:
            context = ModelRequestContext(
                request_id="",
                node_id=self._binding.node_id,
                broker_ref=self._binding,
            )
            logger.debug(
                "Running lifecycle hook",
                extra={
                    "hook": getattr(method, "__name__", None),
                    "node_id": context.node_id,
                },
            )
            return await self._context_store.run(context, method)

        lifecycle_handler.__name__ = getattr(method, "__name__", "lifecycle_handler")
        return lifecycle_handler
