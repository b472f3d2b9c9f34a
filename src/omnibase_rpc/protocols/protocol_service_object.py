# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Service object and remote caller protocols."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from omnibase_rpc.models import ModelEventSubscription


@runtime_checkable
class ProtocolServiceObject(Protocol):
    """Surface the adapter needs from a service object.

    ServiceBase provides a ready implementation; any object with these
    methods can be registered.
    """

    def get_name(self) -> str | None:
        """Return the service name, or None when the service has no name."""
        ...

    def get_events(self) -> Sequence[ModelEventSubscription]:
        """Return the events this object declares interest in."""
        ...

    async def emit(self, event_name: str, *args: object) -> bool:
        """Deliver an event to the object's own listeners."""
        ...

    def remove_all_listeners(self, event_name: str | None = None) -> None:
        """Release event subscriptions."""
        ...

    def set_api(self, api: object) -> None:
        """Receive the facade that registered this object."""
        ...


@runtime_checkable
class ProtocolRemoteCaller(Protocol):
    """Anything that can route dotted ``service.action`` calls (facade or binding)."""

    async def call(self, name: str, args: Sequence[object] | None = None) -> object:
        ...

    async def wait_and_call(
        self, name: str, args: Sequence[object] | None = None
    ) -> object:
        ...


__all__ = ["ProtocolRemoteCaller", "ProtocolServiceObject"]
