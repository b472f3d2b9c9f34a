# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Invocation record and invocation handle protocols.

A Broker Runtime hands every dispatched action or event handler an
invocation record. When that record also exposes ``call``, the adapter can
route nested calls made from inside the action back through it (the fast
path) instead of re-running service discovery.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class ProtocolInvocationRecord(Protocol):
    """Incoming invocation record.

    Attributes:
        call_id: Unique id of this invocation.
        node_id: Id of the node the call originated from.
        request_id: Request id of the call chain, if any.
        params: Positional argument list, or a structured payload for
            internal events.
    """

    call_id: str
    node_id: str
    request_id: str | None
    params: object


@runtime_checkable
class ProtocolInvocationHandle(ProtocolInvocationRecord, Protocol):
    """Invocation record with same-chain call capability."""

    async def call(self, name: str, args: Sequence[object]) -> object:
        """Call ``name`` within the same request chain."""
        ...


__all__ = ["ProtocolInvocationHandle", "ProtocolInvocationRecord"]
