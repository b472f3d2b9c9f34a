# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Broker Runtime Protocol.

This module defines the narrow interface the adapter core consumes from the
external Broker Runtime collaborator. Service discovery, transport,
serialization, load balancing, and fault tolerance all live behind this
boundary.

Thread Safety:
    Implementations MUST be coroutine-safe. The adapter calls ``invoke`` and
    ``resolve_services`` concurrently from independent invocations.

Note:
    Method bodies in this Protocol use ``...`` (Ellipsis) rather than
    ``raise NotImplementedError()``, the standard convention for
    ``typing.Protocol`` classes per PEP 544.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from omnibase_rpc.models import (
        ModelBrokerNode,
        ModelServiceDescriptor,
        ModelServiceInfo,
    )


@runtime_checkable
class ProtocolBrokerRuntime(Protocol):
    """Minimum Broker Runtime surface required by the adapter.

    Example:
        >>> from omnibase_rpc.broker import InMemoryBrokerRuntime
        >>> runtime: ProtocolBrokerRuntime = InMemoryBrokerRuntime()
        >>> assert isinstance(runtime, ProtocolBrokerRuntime)
    """

    @property
    def node_id(self) -> str:
        """Return the id of the node this runtime instance runs on."""
        ...

    async def resolve_services(
        self, *, only_available: bool = True
    ) -> Sequence[ModelServiceInfo]:
        """Return the services currently known to the runtime.

        Args:
            only_available: Restrict the result to services that can
                currently accept calls.
        """
        ...

    async def invoke(self, name: str, args: Sequence[object]) -> object:
        """Direct call primitive for a dotted ``service.action`` name."""
        ...

    async def await_availability(self, service_name: str, timeout_ms: int) -> bool:
        """Wait until ``service_name`` is discoverable.

        Returns:
            True when the service became available, False on timeout.
        """
        ...

    def register_descriptor(self, descriptor: ModelServiceDescriptor) -> None:
        """Register a service descriptor with the runtime."""
        ...

    async def unregister_descriptor(self, name: str) -> None:
        """Remove a previously registered service by name."""
        ...

    async def broadcast(self, event_name: str, args: Sequence[object]) -> None:
        """Broadcast an event to every subscribed service on every node."""
        ...

    async def broadcast_to_subset(
        self,
        service_names: Sequence[str],
        event_name: str,
        args: Sequence[object],
    ) -> None:
        """Broadcast an event to the named services only."""
        ...

    async def broadcast_local_only(
        self, event_name: str, args: Sequence[object]
    ) -> None:
        """Broadcast an event to services on the local node only."""
        ...

    async def list_nodes(self) -> Sequence[ModelBrokerNode]:
        """Return descriptors of the nodes known to the runtime."""
        ...

    async def start(self) -> None:
        """Start the runtime. Must complete before any dispatch is attempted."""
        ...


__all__ = ["ProtocolBrokerRuntime"]
