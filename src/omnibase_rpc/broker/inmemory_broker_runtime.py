# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""In-Memory Broker Runtime implementation for local development and testing.

Implements ProtocolBrokerRuntime inside a single process. Designed for local
development and tests where a real broker (registry, transport, load
balancing) is not needed.

Features:
    - Descriptor registry keyed by service name
    - Service start sequence: created hook, dependency wait, started hook,
      then the service becomes available
    - Availability waits backed by one asyncio.Event per service name
    - Invocation handles with same-chain ``call`` (fast path) that keep the
      caller's request id
    - Event broadcast to matching handlers; handler failures are logged and
      do not stop delivery to other services
    - Invocation history for debugging and tests

Usage:
    ```python
    from omnibase_rpc.broker import InMemoryBrokerRuntime
    from omnibase_rpc.runtime import ServiceFacade

    facade = ServiceFacade()
    facade.register_service(PingService())
    facade.attach_runtime(InMemoryBrokerRuntime(node_id="node-1"))
    await facade.start()

    assert await facade.call("svcA.ping") == "pong"
    ```

Protocol Compatibility:
    This class implements ProtocolBrokerRuntime using duck typing (no
    explicit inheritance required).
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Sequence
from typing import Any
from uuid import uuid4

from pydantic import PrivateAttr

from omnibase_rpc.enums import EnumLifecycleHook
from omnibase_rpc.errors import (
    ActionNotFoundError,
    DependencyUnavailableError,
    ModelRpcErrorContext,
    ServiceUnavailableError,
)
from omnibase_rpc.models import (
    DEFAULT_WAIT_FOR_SERVICES_TIMEOUT_MS,
    ModelBrokerNode,
    ModelInvocationRecord,
    ModelInvocationTrace,
    ModelServiceDescriptor,
    ModelServiceInfo,
)

logger = logging.getLogger(__name__)


class LocalInvocation(ModelInvocationRecord):
    """Invocation record handed to handlers by InMemoryBrokerRuntime.

    ``call`` dispatches a nested call directly through the runtime,
    carrying this invocation's request id.
    """

    _runtime: Any = PrivateAttr()

    async def call(self, name: str, args: Sequence[object]) -> object:
        return await self._runtime._dispatch(
            name, args, request_id=self.request_id, fast_path=True
        )


class InMemoryBrokerRuntime:
    """In-memory Broker Runtime for local development and testing.

    Attributes:
        node_id: Id of the single node this runtime represents.

    Example:
        ```python
        runtime = InMemoryBrokerRuntime(node_id="test-node")
        runtime.register_descriptor(descriptor)
        await runtime.start()
        result = await runtime.invoke("svcA.ping", [])
        await runtime.stop()
        ```
    """

    def __init__(
        self,
        node_id: str = "local",
        dependency_timeout_ms: int = DEFAULT_WAIT_FOR_SERVICES_TIMEOUT_MS,
        max_history: int = 1000,
    ) -> None:
        """Initialize the in-memory runtime.

        Args:
            node_id: Node identifier reported to contexts and node listings.
            dependency_timeout_ms: How long a starting service waits for each
                of its declared dependencies.
            max_history: Maximum number of invocation traces to retain.
        """
        self._node_id = node_id
        self._dependency_timeout_ms = dependency_timeout_ms
        self._max_history = max_history

        # Service name -> descriptor
        self._descriptors: dict[str, ModelServiceDescriptor] = {}

        # Service name -> availability flag, set once the service has started
        self._availability: dict[str, asyncio.Event] = {}

        # Service name -> number of pending await_availability() calls
        self._waiters: dict[str, int] = {}

        # Services registered after start(), starting in the background
        self._pending_starts: set[asyncio.Task[None]] = set()

        # Invocation history (circular buffer behavior)
        self._history: list[ModelInvocationTrace] = []

        self._lock = asyncio.Lock()
        self._started = False

    @property
    def node_id(self) -> str:
        return self._node_id

    def _availability_event(self, service_name: str) -> asyncio.Event:
        event = self._availability.get(service_name)
        if event is None:
            event = asyncio.Event()
            self._availability[service_name] = event
        return event

    def _is_available(self, service_name: str) -> bool:
        event = self._availability.get(service_name)
        return event is not None and event.is_set()

    # =========================================================================
    # Registration
    # =========================================================================

    def register_descriptor(self, descriptor: ModelServiceDescriptor) -> None:
        """Register a service descriptor.

        Before start() the service waits for the start sequence. After
        start() it is started in the background, which requires a running
        event loop.
        """
        if descriptor.name in self._descriptors:
            logger.warning(
                "Replacing registered service",
                extra={"service": descriptor.name, "node_id": self._node_id},
            )
        self._descriptors[descriptor.name] = descriptor
        logger.debug(
            "Service descriptor registered",
            extra={"service": descriptor.name, "node_id": self._node_id},
        )

        if self._started:
            task = asyncio.get_running_loop().create_task(
                self._start_service(descriptor)
            )
            self._pending_starts.add(task)
            task.add_done_callback(self._on_pending_start_done)

    def _on_pending_start_done(self, task: asyncio.Task[None]) -> None:
        self._pending_starts.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error(
                "Background service start failed",
                exc_info=task.exception(),
                extra={"node_id": self._node_id},
            )

    async def unregister_descriptor(self, name: str) -> None:
        """Remove a service, running its ``stopped`` hook if the runtime is started."""
        async with self._lock:
            descriptor = self._descriptors.pop(name, None)
            event = self._availability.get(name)
            if event is not None:
                event.clear()

        if descriptor is None:
            return

        stopped = descriptor.get_lifecycle_hook(EnumLifecycleHook.STOPPED)
        if self._started and stopped is not None:
            await stopped()
        logger.debug(
            "Service descriptor unregistered",
            extra={"service": name, "node_id": self._node_id},
        )

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def _start_service(self, descriptor: ModelServiceDescriptor) -> None:
        created = descriptor.get_lifecycle_hook(EnumLifecycleHook.CREATED)
        if created is not None:
            await created()

        for dependency in descriptor.dependencies:
            if not await self.await_availability(
                dependency, self._dependency_timeout_ms
            ):
                raise DependencyUnavailableError(
                    f"Service '{descriptor.name}' dependency '{dependency}' not available",
                    context=ModelRpcErrorContext.with_correlation(
                        operation="start_service",
                        target_name=descriptor.name,
                    ),
                    dependency=dependency,
                    timeout_ms=self._dependency_timeout_ms,
                )

        started = descriptor.get_lifecycle_hook(EnumLifecycleHook.STARTED)
        if started is not None:
            await started()

        # A service unregistered while starting must not become available.
        if self._descriptors.get(descriptor.name) is descriptor:
            self._availability_event(descriptor.name).set()
            logger.debug(
                "Service available",
                extra={"service": descriptor.name, "node_id": self._node_id},
            )

    async def start(self) -> None:
        """Start the runtime and every registered service.

        Services start concurrently so that dependency waits between them
        resolve regardless of registration order. Repeated calls are no-ops.
        """
        async with self._lock:
            if self._started:
                return
            self._started = True
            descriptors = list(self._descriptors.values())

        await asyncio.gather(*(self._start_service(d) for d in descriptors))
        logger.info(
            "InMemoryBrokerRuntime started",
            extra={"node_id": self._node_id, "services": len(descriptors)},
        )

    async def stop(self) -> None:
        """Stop every service (``stopped`` hooks) and mark the runtime stopped."""
        async with self._lock:
            if not self._started:
                return
            self._started = False
            descriptors = list(self._descriptors.values())
            pending = list(self._pending_starts)
            for event in self._availability.values():
                event.clear()

        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)

        for descriptor in descriptors:
            stopped = descriptor.get_lifecycle_hook(EnumLifecycleHook.STOPPED)
            if stopped is not None:
                await stopped()
        logger.info("InMemoryBrokerRuntime stopped", extra={"node_id": self._node_id})

    # =========================================================================
    # Discovery and calls
    # =========================================================================

    async def resolve_services(
        self, *, only_available: bool = True
    ) -> list[ModelServiceInfo]:
        async with self._lock:
            names = list(self._descriptors)
        return [
            ModelServiceInfo(
                name=name,
                node_id=self._node_id,
                available=self._is_available(name),
            )
            for name in names
            if not only_available or self._is_available(name)
        ]

    async def await_availability(self, service_name: str, timeout_ms: int) -> bool:
        event = self._availability_event(service_name)
        if event.is_set():
            return True
        self._waiters[service_name] = self._waiters.get(service_name, 0) + 1
        try:
            await asyncio.wait_for(event.wait(), timeout=timeout_ms / 1000)
        except (asyncio.TimeoutError, TimeoutError):
            return False
        finally:
            self._release_waiter(service_name, event)
        return True

    def _release_waiter(self, service_name: str, event: asyncio.Event) -> None:
        remaining = self._waiters[service_name] - 1
        if remaining:
            self._waiters[service_name] = remaining
            return
        del self._waiters[service_name]
        # Names that never registered do not keep an event once nobody waits.
        if (
            not event.is_set()
            and service_name not in self._descriptors
            and self._availability.get(service_name) is event
        ):
            del self._availability[service_name]

    async def invoke(self, name: str, args: Sequence[object]) -> object:
        """Call ``name`` as a new top-level request with a fresh request id."""
        return await self._dispatch(name, args, request_id=str(uuid4()), fast_path=False)

    async def _dispatch(
        self,
        name: str,
        args: Sequence[object],
        *,
        request_id: str | None,
        fast_path: bool,
    ) -> object:
        service_name, _, action_name = name.partition(".")
        descriptor = self._descriptors.get(service_name)
        if descriptor is None:
            raise ServiceUnavailableError(
                f"Service '{service_name}' is not registered",
                context=ModelRpcErrorContext.with_correlation(
                    request_id=request_id,
                    operation="invoke",
                    target_name=name,
                ),
            )
        handler = descriptor.get_action(action_name)
        if handler is None:
            raise ActionNotFoundError(
                f"Action '{name}' not found",
                context=ModelRpcErrorContext.with_correlation(
                    request_id=request_id,
                    operation="invoke",
                    target_name=name,
                ),
            )

        invocation = self._new_invocation(list(args), request_id)
        self._record(
            ModelInvocationTrace(
                name=name,
                call_id=invocation.call_id,
                request_id=request_id,
                node_id=self._node_id,
                fast_path=fast_path,
            )
        )
        return await handler(invocation)

    def _new_invocation(
        self, params: object, request_id: str | None
    ) -> LocalInvocation:
        invocation = LocalInvocation(
            node_id=self._node_id,
            request_id=request_id,
            params=params,
        )
        invocation._runtime = self
        return invocation

    def _record(self, trace: ModelInvocationTrace) -> None:
        self._history.append(trace)
        if len(self._history) > self._max_history:
            self._history.pop(0)

    # =========================================================================
    # Events
    # =========================================================================

    async def _deliver(
        self,
        descriptors: Sequence[ModelServiceDescriptor],
        event_name: str,
        payload: object,
    ) -> None:
        request_id = str(uuid4())
        for descriptor in descriptors:
            handler = descriptor.events.get(event_name)
            if handler is None:
                continue
            try:
                result = handler(self._new_invocation(payload, request_id))
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                # Log but don't fail other subscribers
                logger.exception(
                    "Event handler failed",
                    extra={
                        "event": event_name,
                        "service": descriptor.name,
                        "error": str(e),
                        "request_id": request_id,
                    },
                )

    async def broadcast(self, event_name: str, args: object) -> None:
        async with self._lock:
            descriptors = list(self._descriptors.values())
        await self._deliver(descriptors, event_name, args)

    async def broadcast_to_subset(
        self,
        service_names: Sequence[str],
        event_name: str,
        args: object,
    ) -> None:
        async with self._lock:
            descriptors = [
                self._descriptors[name]
                for name in service_names
                if name in self._descriptors
            ]
        await self._deliver(descriptors, event_name, args)

    async def broadcast_local_only(self, event_name: str, args: object) -> None:
        # Single node: every service is local.
        await self.broadcast(event_name, args)

    async def emit_node_signal(
        self,
        event_name: str,
        node: ModelBrokerNode | None = None,
    ) -> None:
        """Publish a ``$node.*`` runtime signal with a structured payload."""
        node = node or ModelBrokerNode(node_id=self._node_id, local=True)
        await self.broadcast(event_name, {"node": node.model_dump(mode="json")})

    async def list_nodes(self) -> list[ModelBrokerNode]:
        async with self._lock:
            services = tuple(self._descriptors)
        return [
            ModelBrokerNode(
                node_id=self._node_id,
                available=self._started,
                local=True,
                services=services,
            )
        ]

    # =========================================================================
    # Debugging/Observability Methods
    # =========================================================================

    async def health_check(self) -> dict[str, object]:
        """Check runtime health.

        Returns:
            Dictionary with health status information:
                - healthy: Whether the runtime is started
                - node_id: Node identifier
                - service_count: Registered services
                - available_count: Services currently available
                - history_size: Current invocation history size
        """
        async with self._lock:
            service_count = len(self._descriptors)
            available_count = sum(
                1 for name in self._descriptors if self._is_available(name)
            )
            history_size = len(self._history)

        return {
            "healthy": self._started,
            "started": self._started,
            "node_id": self._node_id,
            "service_count": service_count,
            "available_count": available_count,
            "history_size": history_size,
        }

    def get_invocation_history(
        self,
        limit: int = 100,
        name: str | None = None,
    ) -> list[ModelInvocationTrace]:
        """Get recent invocation traces (most recent last), optionally filtered by name."""
        history = self._history[-limit:]
        if name:
            history = [trace for trace in history if trace.name == name]
        return list(history)

    def clear_invocation_history(self) -> None:
        """Clear invocation history. Useful for test isolation."""
        self._history.clear()
        logger.debug("Invocation history cleared")


__all__: list[str] = ["InMemoryBrokerRuntime", "LocalInvocation"]
