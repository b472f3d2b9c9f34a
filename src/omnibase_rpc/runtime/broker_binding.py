# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Broker Binding.

Binds one Broker Runtime to the adapter core. The binding owns the
ContextStore, DispatchAdapter, ServiceDescriptorBuilder and CallRouter for
that runtime, and is what every ModelRequestContext records as its
``broker_ref``. A process may hold several bindings, one per runtime; each
has its own context store.

Start Semantics:
    ``start()`` starts the runtime once. Top-level calls routed through the
    binding wait for that start to complete before dispatching. Calls made
    before ``start()`` was ever requested, and calls made from inside an
    active request context, are routed immediately.
"""

from __future__ import annotations

__all__ = ["BrokerBinding"]

import asyncio
import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from omnibase_rpc.models import ModelRpcConfig
from omnibase_rpc.runtime.call_router import CallRouter
from omnibase_rpc.runtime.context_store import ContextStore, RequestContextStore
from omnibase_rpc.runtime.dispatch_adapter import DispatchAdapter
from omnibase_rpc.runtime.service_descriptor_builder import ServiceDescriptorBuilder

if TYPE_CHECKING:
    from omnibase_rpc.models import ModelBrokerNode
    from omnibase_rpc.protocols import ProtocolBrokerRuntime, ProtocolServiceObject

logger = logging.getLogger(__name__)


class BrokerBinding:
    """Adapter-side binding of a single Broker Runtime.

    Args:
        runtime: The Broker Runtime collaborator.
        config: Adapter configuration. Defaults to ModelRpcConfig().
        context_store: Context store to use. A fresh store is created when
            omitted.

    Example:
        >>> binding = BrokerBinding(InMemoryBrokerRuntime())
        >>> binding.create_service(PingService())
        True
        >>> await binding.start()
        >>> await binding.call("svcA.ping")
        'pong'
    """

    def __init__(
        self,
        runtime: ProtocolBrokerRuntime,
        config: ModelRpcConfig | None = None,
        context_store: RequestContextStore | None = None,
    ) -> None:
        self._runtime = runtime
        self._config = config or ModelRpcConfig()
        self._context_store: RequestContextStore = context_store or ContextStore()
        self._adapter = DispatchAdapter(self._context_store, self)
        self._builder = ServiceDescriptorBuilder(self._adapter)
        self._router = CallRouter(runtime, self._context_store, self._config)
        self._start_task: asyncio.Future[None] | None = None

    @property
    def runtime(self) -> ProtocolBrokerRuntime:
        return self._runtime

    @property
    def node_id(self) -> str:
        return self._runtime.node_id

    @property
    def context_store(self) -> RequestContextStore:
        return self._context_store

    @property
    def config(self) -> ModelRpcConfig:
        return self._config

    async def _wait_started(self) -> None:
        # Calls from inside a dispatched action or lifecycle hook run while
        # the runtime is (still) starting; waiting there would deadlock.
        if self._context_store.current() is not None:
            return
        if self._start_task is not None:
            await asyncio.shield(self._start_task)

    async def call(self, name: str, args: Sequence[object] | None = None) -> object:
        await self._wait_started()
        return await self._router.call(name, args)

    async def wait_and_call(
        self, name: str, args: Sequence[object] | None = None
    ) -> object:
        await self._wait_started()
        return await self._router.wait_and_call(name, args)

    def create_service(
        self,
        instance: ProtocolServiceObject,
        dependencies: Sequence[str] | None = None,
    ) -> bool:
        """Build the instance's descriptor and register it with the runtime.

        Returns:
            True when a descriptor was registered, False when the instance
            had no name or no actionable surface.
        """
        descriptor = self._builder.build(instance, dependencies)
        if descriptor is None:
            return False
        self._runtime.register_descriptor(descriptor)
        logger.info(
            "Registered service with runtime",
            extra={"service": descriptor.name, "node_id": self.node_id},
        )
        return True

    async def destroy_service(self, instance: ProtocolServiceObject) -> None:
        """Unregister the instance from the runtime and release its listeners."""
        name = instance.get_name()
        if not name:
            return
        await self._runtime.unregister_descriptor(name)
        instance.remove_all_listeners()
        logger.info(
            "Unregistered service from runtime",
            extra={"service": name, "node_id": self.node_id},
        )

    async def broadcast(self, event_name: str, *args: object) -> None:
        await self._runtime.broadcast(event_name, list(args))

    async def broadcast_to_services(
        self, services: Sequence[str], event_name: str, *args: object
    ) -> None:
        await self._runtime.broadcast_to_subset(list(services), event_name, list(args))

    async def broadcast_local(self, event_name: str, *args: object) -> None:
        await self._runtime.broadcast_local_only(event_name, list(args))

    async def node_list(self) -> list[ModelBrokerNode]:
        return list(await self._runtime.list_nodes())

    async def start(self) -> None:
        """Start the runtime, once. Concurrent callers share the same start."""
        if self._start_task is None:
            self._start_task = asyncio.ensure_future(self._runtime.start())
            logger.info("Starting broker runtime", extra={"node_id": self.node_id})
        await asyncio.shield(self._start_task)
