# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""RPC Error Context Configuration Model.

This module defines the configuration model for adapter error context,
encapsulating common structured fields to reduce __init__ parameter count
while keeping them strongly typed.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class ModelRpcErrorContext(BaseModel):
    """Configuration model for adapter error context.

    Attributes:
        operation: Operation being performed (call, wait_and_call, destroy, etc.)
        target_name: Target action or service name (e.g. "billing.charge")
        request_id: Request id of the call chain the error belongs to
        correlation_id: Error correlation ID for tracking

    Example:
        >>> context = ModelRpcErrorContext(
        ...     operation="call",
        ...     target_name="billing.charge",
        ...     request_id="req-1",
        ...     correlation_id=uuid4(),
        ... )
        >>> raise ServiceUnavailableError("Service not available", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: str | None = Field(
        default=None,
        description="Operation being performed (call, wait_and_call, destroy, etc.)",
    )
    target_name: str | None = Field(
        default=None,
        description="Target action or service name",
    )
    request_id: str | None = Field(
        default=None,
        description="Request id of the call chain, for matching errors across nested hops",
    )
    correlation_id: UUID | None = Field(
        default=None,
        description="Error correlation ID for tracking",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: UUID | None = None,
        **kwargs: str | None,
    ) -> ModelRpcErrorContext:
        """Build a context, generating a correlation id when none is supplied.

        Request ids are opaque strings; an empty id (lifecycle contexts) is
        dropped.
        """
        if not kwargs.get("request_id"):
            kwargs.pop("request_id", None)
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__ = ["ModelRpcErrorContext"]
