# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Remote Stub Factory.

``make_stub(caller, "billing")`` returns an object on which any attribute
``p`` is an async callable performing ``caller.call("billing.p", args)``
(or ``caller.wait_and_call`` when ``wait_for_availability`` is set).

The callable for a name is generated on first access and cached on the
stub. Underscore names are never actions, so they keep Python's normal
attribute behaviour and copying or introspection tools do not turn into
remote calls.

Example:
    >>> billing = make_stub(facade, "billing")
    >>> await billing.charge("order-1", 42)   # facade.call("billing.charge", ["order-1", 42])
"""

from __future__ import annotations

__all__ = ["RemoteStub", "make_stub"]

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from omnibase_rpc.protocols import ProtocolRemoteCaller


class RemoteStub:
    """Catch-all proxy mapping attribute access to remote calls."""

    __slots__ = ("_caller", "_namespace", "_wait_for_availability", "_methods")

    def __init__(
        self,
        caller: ProtocolRemoteCaller,
        namespace: str,
        wait_for_availability: bool = False,
    ) -> None:
        self._caller = caller
        self._namespace = namespace
        self._wait_for_availability = wait_for_availability
        self._methods: dict[str, Callable[..., Awaitable[object]]] = {}

    def __getattr__(self, name: str) -> Callable[..., Awaitable[object]]:
        if name.startswith("_"):
            raise AttributeError(name)
        method = self._methods.get(name)
        if method is None:
            method = self._make_method(name)
            self._methods[name] = method
        return method

    def _make_method(self, name: str) -> Callable[..., Awaitable[object]]:
        target = f"{self._namespace}.{name}"
        route = (
            self._caller.wait_and_call
            if self._wait_for_availability
            else self._caller.call
        )

        async def remote_method(*args: object) -> object:
            return await route(target, list(args))

        remote_method.__name__ = name
        remote_method.__qualname__ = target
        return remote_method

    def __dir__(self) -> list[str]:
        return []

    def __repr__(self) -> str:
        mode = "wait" if self._wait_for_availability else "call"
        return f"<RemoteStub {self._namespace!r} ({mode})>"


def make_stub(
    caller: ProtocolRemoteCaller,
    namespace: str,
    wait_for_availability: bool = False,
) -> RemoteStub:
    """Create a RemoteStub for ``namespace`` routed through ``caller``."""
    return RemoteStub(caller, namespace, wait_for_availability)
