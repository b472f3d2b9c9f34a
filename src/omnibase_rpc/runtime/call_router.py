# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Call Router.

Resolves a dotted ``service.action`` name plus arguments into a result,
choosing between two routes:

- Fast path: the current ModelRequestContext has a parent call handle with
  a ``call`` capability (the call is issued from inside a dispatched
  action). The call goes straight through that handle, skipping service
  discovery and keeping the chain's request id.
- Broker path: otherwise the Broker Runtime's direct call primitive is used.

Entry points:
    call(): fails fast with ServiceUnavailableError when the target service
        is not in the runtime's currently available set. The invoke
        primitive is never contacted in that case.
    wait_and_call(): first waits for the target service to become
        discoverable, bounded by ``wait_for_services_timeout_ms``. On timeout
        it raises DependencyUnavailableError without calling. The pending
        wait is cancelled when the timeout fires.

Both are coroutines: failures surface when the result is awaited.
"""

from __future__ import annotations

__all__ = ["CallRouter", "split_service_name"]

import asyncio
import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from omnibase_rpc.errors import (
    DependencyUnavailableError,
    ModelRpcErrorContext,
    ServiceUnavailableError,
)
from omnibase_rpc.models import ModelRequestContext, ModelRpcConfig

if TYPE_CHECKING:
    from omnibase_rpc.protocols import ProtocolBrokerRuntime
    from omnibase_rpc.runtime.context_store import RequestContextStore

logger = logging.getLogger(__name__)


def split_service_name(name: str) -> str:
    """Return the service segment of a dotted name (text before the first ``.``)."""
    return name.split(".", 1)[0]


def _call_args(args: Sequence[object] | None) -> list[object]:
    """Copy positional call arguments; only lists and tuples are accepted."""
    if args is None:
        return []
    if not isinstance(args, (list, tuple)):
        raise TypeError(
            f"Call arguments must be a list or tuple, got {type(args).__name__}"
        )
    return list(args)


class CallRouter:
    """Context-aware router for ``call`` and ``wait_and_call``.

    Args:
        runtime: Broker Runtime used for resolution, availability waits and
            direct calls.
        context_store: Store holding the active request context.
        config: Adapter configuration (availability timeout).
    """

    def __init__(
        self,
        runtime: ProtocolBrokerRuntime,
        context_store: RequestContextStore,
        config: ModelRpcConfig | None = None,
    ) -> None:
        self._runtime = runtime
        self._context_store = context_store
        self._config = config or ModelRpcConfig()

    @property
    def config(self) -> ModelRpcConfig:
        return self._config

    def _error_context(self, operation: str, name: str) -> ModelRpcErrorContext:
        context = self._context_store.current()
        return ModelRpcErrorContext.with_correlation(
            request_id=context.request_id if context is not None else None,
            operation=operation,
            target_name=name,
        )

    def _fast_path_context(self) -> ModelRequestContext | None:
        context = self._context_store.current()
        if context is not None and context.supports_fast_path:
            return context
        return None

    async def _dispatch(self, name: str, args: list[object]) -> object:
        context = self._fast_path_context()
        if context is not None:
            logger.debug(
                "Routing call through parent call handle",
                extra={"target": name, "request_id": context.request_id},
            )
            return await context.parent_call_handle.call(name, args)
        return await self._runtime.invoke(name, args)

    async def call(self, name: str, args: Sequence[object] | None = None) -> object:
        """Call ``name`` assuming its service is already available.

        Raises:
            TypeError: ``args`` is not a list or tuple.
            ServiceUnavailableError: The target service is not in the
                runtime's available set (broker path only).
        """
        call_args = _call_args(args)
        if self._fast_path_context() is not None:
            return await self._dispatch(name, call_args)

        service_name = split_service_name(name)
        services = await self._runtime.resolve_services(only_available=True)
        if not any(service.name == service_name for service in services):
            logger.warning(
                "Call target service not available",
                extra={"target": name, "service": service_name},
            )
            raise ServiceUnavailableError(
                f"Service '{service_name}' is not available",
                context=self._error_context("call", name),
            )
        return await self._runtime.invoke(name, call_args)

    async def wait_and_call(
        self, name: str, args: Sequence[object] | None = None
    ) -> object:
        """Wait for the target service to be discoverable, then call it.

        Raises:
            TypeError: ``args`` is not a list or tuple.
            DependencyUnavailableError: The service did not become available
                within ``wait_for_services_timeout_ms``.
        """
        call_args = _call_args(args)
        service_name = split_service_name(name)
        timeout_ms = self._config.wait_for_services_timeout_ms

        try:
            available = await asyncio.wait_for(
                self._runtime.await_availability(service_name, timeout_ms),
                timeout=self._config.wait_for_services_timeout_seconds,
            )
        except (asyncio.TimeoutError, TimeoutError) as e:
            logger.warning(
                "Timed out waiting for dependent service",
                extra={"target": name, "service": service_name, "timeout_ms": timeout_ms},
            )
            raise DependencyUnavailableError(
                f"Dependent service '{service_name}' not available",
                context=self._error_context("wait_and_call", name),
                timeout_ms=timeout_ms,
            ) from e

        if not available:
            logger.warning(
                "Dependent service not available",
                extra={"target": name, "service": service_name, "timeout_ms": timeout_ms},
            )
            raise DependencyUnavailableError(
                f"Dependent service '{service_name}' not available",
                context=self._error_context("wait_and_call", name),
                timeout_ms=timeout_ms,
            )

        return await self._dispatch(name, call_args)
