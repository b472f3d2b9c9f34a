# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Service Facade.

The outward-facing registration and lifecycle API. The facade owns the set
of locally registered service instances and at most one BrokerBinding.

Per-instance state machine (EnumServiceState):
    UNREGISTERED -> REGISTERED   register_service() without a runtime
    REGISTERED   -> BOUND        runtime attached (now or later)
    BOUND        -> REGISTERED   detach_runtime()
    *            -> DESTROYED    destroy_service()

Usage Errors:
    call, wait_and_call, broadcast*, node_list and start raise
    NoRuntimeAttachedError when no runtime is attached. register_service
    defers binding instead, and destroy_service silently accepts unknown
    instances.

Thread Safety:
    Registry and binding mutations are protected by a threading.Lock.
    Runtime round trips (unregister) happen outside the lock, after the
    instance has been claimed, so each instance is unregistered at most once.
    Dispatch through an attached binding takes no lock.

Example:
    >>> facade = ServiceFacade()
    >>> facade.register_service(PingService())
    >>> facade.attach_runtime(InMemoryBrokerRuntime())
    >>> await facade.start()
    >>> await facade.call("svcA.ping")
    'pong'
"""

from __future__ import annotations

__all__ = ["ServiceFacade"]

import logging
import threading
from collections.abc import Sequence
from typing import TYPE_CHECKING

from omnibase_rpc.enums import EnumServiceState
from omnibase_rpc.errors import (
    InvalidStateError,
    ModelRpcErrorContext,
    NoRuntimeAttachedError,
)
from omnibase_rpc.models import ModelRpcConfig
from omnibase_rpc.runtime.broker_binding import BrokerBinding
from omnibase_rpc.runtime.remote_stub import RemoteStub, make_stub

if TYPE_CHECKING:
    from omnibase_rpc.models import ModelBrokerNode
    from omnibase_rpc.protocols import ProtocolBrokerRuntime, ProtocolServiceObject

logger = logging.getLogger(__name__)


class _ServiceEntry:
    """Registry entry for one owned service instance."""

    __slots__ = ("dependencies", "instance", "state")

    def __init__(
        self,
        instance: ProtocolServiceObject,
        dependencies: tuple[str, ...],
    ) -> None:
        self.instance = instance
        self.dependencies = dependencies
        self.state = EnumServiceState.REGISTERED


class ServiceFacade:
    """Registration, lifecycle and call API over an optional Broker Runtime.

    Args:
        config: Adapter configuration handed to the binding on attach.
    """

    def __init__(self, config: ModelRpcConfig | None = None) -> None:
        self._config = config or ModelRpcConfig()
        # Keyed by id(); entries hold the instance, so ids stay stable.
        self._services: dict[int, _ServiceEntry] = {}
        self._binding: BrokerBinding | None = None
        self._lock = threading.Lock()

    @property
    def binding(self) -> BrokerBinding | None:
        return self._binding

    @property
    def services(self) -> tuple[ProtocolServiceObject, ...]:
        """Tracked instances, in registration order."""
        with self._lock:
            return tuple(entry.instance for entry in self._services.values())

    def state_of(self, instance: ProtocolServiceObject) -> EnumServiceState:
        """Return the registration state of ``instance``.

        Untracked instances report UNREGISTERED, including destroyed ones,
        since destroying drops the instance from tracking.
        """
        with self._lock:
            entry = self._services.get(id(instance))
        return entry.state if entry is not None else EnumServiceState.UNREGISTERED

    def _bind(self, binding: BrokerBinding, entry: _ServiceEntry) -> None:
        if binding.create_service(entry.instance, entry.dependencies):
            entry.state = EnumServiceState.BOUND

    def register_service(
        self,
        instance: ProtocolServiceObject,
        dependencies: Sequence[str] | None = None,
    ) -> None:
        """Register ``instance`` and bind it immediately if a runtime is attached.

        Registering an already tracked instance is a no-op; it is never
        registered with the runtime twice. An instance left REGISTERED by a
        failed bind while a runtime is attached is bound again. If the
        runtime rejects the descriptor of a new instance, the instance is
        not tracked and the error propagates.

        Args:
            instance: Service object to own.
            dependencies: Services that must be available before this
                service's ``started`` hook runs.
        """
        with self._lock:
            key = id(instance)
            entry = self._services.get(key)
            if entry is not None:
                if (
                    entry.state is EnumServiceState.REGISTERED
                    and self._binding is not None
                ):
                    self._bind(self._binding, entry)
                else:
                    logger.debug(
                        "Service already registered",
                        extra={"service": instance.get_name()},
                    )
                    return
            else:
                entry = _ServiceEntry(instance, tuple(dependencies or ()))
                self._services[key] = entry
                instance.set_api(self)
                if self._binding is not None:
                    try:
                        self._bind(self._binding, entry)
                    except Exception:
                        del self._services[key]
                        raise

        logger.debug(
            "Registered service",
            extra={"service": instance.get_name(), "state": entry.state.value},
        )

    def attach_runtime(self, runtime: ProtocolBrokerRuntime) -> BrokerBinding:
        """Attach ``runtime`` and bind every registered instance in registration order.

        An instance whose descriptor the runtime rejects stays REGISTERED
        while the others are still bound; the first such error is raised
        once every instance has been tried. register_service() on a
        REGISTERED instance retries its bind.

        Raises:
            InvalidStateError: A runtime is already attached.
        """
        with self._lock:
            if self._binding is not None:
                raise InvalidStateError(
                    "A runtime is already attached; detach it first",
                    context=ModelRpcErrorContext(operation="attach_runtime"),
                )
            binding = BrokerBinding(runtime, self._config)
            self._binding = binding
            failures: list[tuple[_ServiceEntry, Exception]] = []
            for entry in self._services.values():
                if entry.state is not EnumServiceState.REGISTERED:
                    continue
                try:
                    self._bind(binding, entry)
                except Exception as e:
                    failures.append((entry, e))

        if failures:
            logger.warning(
                "Attached broker runtime with unbound services",
                extra={
                    "node_id": binding.node_id,
                    "failed": [entry.instance.get_name() for entry, _ in failures],
                },
            )
            raise failures[0][1]

        logger.info(
            "Attached broker runtime",
            extra={"node_id": binding.node_id, "services": len(self._services)},
        )
        return binding

    async def detach_runtime(self) -> None:
        """Unregister all bound instances and drop the runtime binding.

        Instances stay tracked in the REGISTERED state and are bound again by
        the next attach_runtime(). A no-op when no runtime is attached.
        """
        with self._lock:
            binding = self._binding
            if binding is None:
                return
            self._binding = None
            bound = [
                entry
                for entry in self._services.values()
                if entry.state is EnumServiceState.BOUND
            ]
            for entry in bound:
                entry.state = EnumServiceState.REGISTERED

        for entry in bound:
            name = entry.instance.get_name()
            if name:
                await binding.runtime.unregister_descriptor(name)
        logger.info("Detached broker runtime", extra={"node_id": binding.node_id})

    async def destroy_service(self, instance: ProtocolServiceObject) -> None:
        """Stop owning ``instance``.

        A no-op for instances that are not tracked. Bound instances are
        unregistered from the runtime exactly once and their listeners are
        cleared. If the runtime fails to unregister, the instance is tracked
        again and the error propagates.
        """
        with self._lock:
            entry = self._services.pop(id(instance), None)
            if entry is None:
                return
            binding = self._binding if entry.state is EnumServiceState.BOUND else None
            previous_state = entry.state

        if binding is not None:
            try:
                await binding.destroy_service(instance)
            except Exception:
                with self._lock:
                    self._services.setdefault(id(instance), entry)
                    entry.state = previous_state
                raise

        entry.state = EnumServiceState.DESTROYED
        logger.debug("Destroyed service", extra={"service": instance.get_name()})

    def _require_binding(self, operation: str) -> BrokerBinding:
        binding = self._binding
        if binding is None:
            raise NoRuntimeAttachedError(
                f"No runtime attached for {operation}",
                context=ModelRpcErrorContext(operation=operation),
            )
        return binding

    async def call(self, name: str, args: Sequence[object] | None = None) -> object:
        """Call ``name`` on a service that is expected to be available."""
        return await self._require_binding("call").call(name, args)

    async def wait_and_call(
        self, name: str, args: Sequence[object] | None = None
    ) -> object:
        """Wait for the target service to be available, then call ``name``."""
        return await self._require_binding("wait_and_call").wait_and_call(name, args)

    async def broadcast(self, event_name: str, *args: object) -> None:
        await self._require_binding("broadcast").broadcast(event_name, *args)

    async def broadcast_to_services(
        self, services: Sequence[str], event_name: str, *args: object
    ) -> None:
        await self._require_binding("broadcast_to_services").broadcast_to_services(
            services, event_name, *args
        )

    async def broadcast_local(self, event_name: str, *args: object) -> None:
        await self._require_binding("broadcast_local").broadcast_local(
            event_name, *args
        )

    async def node_list(self) -> list[ModelBrokerNode]:
        return await self._require_binding("node_list").node_list()

    async def start(self) -> None:
        await self._require_binding("start").start()

    async def check_health(self) -> bool:
        """Return True when the runtime answers a node listing, False otherwise."""
        try:
            await self.node_list()
        except Exception:
            logger.exception("Service not healthy")
            return False
        return True

    def stub(self, namespace: str, wait_for_availability: bool = False) -> RemoteStub:
        """Create a RemoteStub for ``namespace`` routed through this facade."""
        return make_stub(self, namespace, wait_for_availability)
