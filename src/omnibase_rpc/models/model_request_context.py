# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Request context model.

A ModelRequestContext represents one in-flight call chain. A new instance is
created for every dispatched action, event, or lifecycle invocation and is
bound through the ContextStore for exactly that invocation's extent.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ModelRequestContext(BaseModel):
    """Per-call-chain execution context.

    Attributes:
        request_id: Opaque id of the originating external call. Stable across
            nested calls of the same chain; empty for lifecycle contexts.
        node_id: Id of the node executing the current frame.
        call_id: Id of the invocation that opened this context, when known.
        parent_call_handle: The raw invocation record of the direct remote
            caller. Present only when the context was entered through the
            runtime's own dispatch.
        broker_ref: The runtime binding servicing this context.

    Example:
        >>> ctx = ModelRequestContext(request_id="r-1", node_id="node-a")
        >>> ctx.supports_fast_path
        False
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    request_id: str = Field(
        default="",
        description="Opaque request id, stable across nested calls; empty for lifecycle hooks",
    )
    node_id: str = Field(
        ...,
        description="Node executing the current frame",
    )
    call_id: str | None = Field(
        default=None,
        description="Id of the invocation that opened this context",
    )
    parent_call_handle: Any | None = Field(
        default=None,
        repr=False,
        description="Invocation record of the direct remote caller",
    )
    broker_ref: Any | None = Field(
        default=None,
        repr=False,
        description="Runtime binding servicing this context",
    )

    @property
    def supports_fast_path(self) -> bool:
        """True when the parent call handle can issue same-chain calls."""
        return callable(getattr(self.parent_call_handle, "call", None))


__all__ = ["ModelRequestContext"]
