# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Base class for service objects exposed through the adapter.

Subclasses set ``name`` and define their actions as public methods on the
subclass itself. Methods inherited from ServiceBase are never exposed.

Example:
    .. code-block:: python

        class BillingService(ServiceBase):
            name = "billing"

            def __init__(self) -> None:
                super().__init__()
                self.on("$node.connected", self._node_connected)
                self.on("order.placed", self._order_placed)

            async def started(self) -> None:
                ...

            async def charge(self, order_id: str, amount: int) -> dict[str, object]:
                return {"order_id": order_id, "charged": amount}
"""

from __future__ import annotations

__all__ = ["ServiceBase"]

import inspect
import logging
from collections import defaultdict
from collections.abc import Callable
from typing import ClassVar

from omnibase_rpc.models import ModelEventSubscription

logger = logging.getLogger(__name__)

Listener = Callable[..., object]


class ServiceBase:
    """Event-emitting service object.

    Events the service listens to (via ``on``) are reported by
    ``get_events()`` and subscribed with the runtime when the service is
    bound, so listeners should be added before registration.
    """

    name: ClassVar[str | None] = None

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = defaultdict(list)
        self._api: object | None = None

    def get_name(self) -> str | None:
        return self.name

    @property
    def api(self) -> object | None:
        """The facade this service was registered with, if any."""
        return self._api

    def set_api(self, api: object) -> None:
        self._api = api

    def on(self, event_name: str, listener: Listener) -> None:
        self._listeners[event_name].append(listener)

    def off(self, event_name: str, listener: Listener) -> None:
        listeners = self._listeners.get(event_name)
        if listeners and listener in listeners:
            listeners.remove(listener)

    def get_events(self) -> list[ModelEventSubscription]:
        return [
            ModelEventSubscription(event_name=event_name)
            for event_name, listeners in self._listeners.items()
            if listeners
        ]

    async def emit(self, event_name: str, *args: object) -> bool:
        """Call every listener of ``event_name`` in order, awaiting coroutine listeners.

        Listener errors propagate to the caller.

        Returns:
            True if the event had listeners.
        """
        listeners = list(self._listeners.get(event_name, ()))
        for listener in listeners:
            result = listener(*args)
            if inspect.isawaitable(result):
                await result
        return bool(listeners)

    def remove_all_listeners(self, event_name: str | None = None) -> None:
        if event_name is None:
            self._listeners.clear()
        else:
            self._listeners.pop(event_name, None)
        logger.debug(
            "Removed listeners",
            extra={"service": self.get_name(), "event": event_name},
        )
