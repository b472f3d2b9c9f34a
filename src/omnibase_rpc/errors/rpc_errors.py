# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Adapter-Specific Error Classes.

This module defines the errors the adapter core introduces at its own
boundary checks. All error classes extend from ModelOnexError (from
omnibase_core). Errors raised by user service methods are never wrapped:
they propagate to the Broker Runtime's error path unchanged.

Error Hierarchy:
    ModelOnexError (from omnibase_core)
    └── RuntimeAdapterError (base adapter error)
        ├── ServiceUnavailableError
        ├── DependencyUnavailableError
        ├── NoRuntimeAttachedError
        ├── InvalidStateError
        ├── RpcConfigurationError
        └── ActionNotFoundError

All errors:
    - Extend ModelOnexError from omnibase_core
    - Use EnumCoreErrorCode for error classification
    - Support proper error chaining with `raise ... from e`
    - Include structured context for debugging
    - Accept ModelRpcErrorContext for bundled context parameters
"""

from __future__ import annotations

from omnibase_core.enums.enum_core_error_code import EnumCoreErrorCode
from omnibase_core.models.errors.model_onex_error import ModelOnexError

from omnibase_rpc.errors.model_rpc_error_context import ModelRpcErrorContext


class RuntimeAdapterError(ModelOnexError):
    """Base error class for adapter errors.

    Structured Fields (via ModelRpcErrorContext):
        operation: Operation being performed
        target_name: Target action or service name
        request_id: Request id of the failing call chain
        correlation_id: Error correlation ID for tracking

    Example:
        >>> context = ModelRpcErrorContext(
        ...     operation="call",
        ...     target_name="billing.charge",
        ... )
        >>> raise RuntimeAdapterError("Operation failed", context=context)

        # Or with extra context:
        >>> raise RuntimeAdapterError(
        ...     "Operation failed",
        ...     context=context,
        ...     timeout_ms=50,
        ... )
    """

    def __init__(
        self,
        message: str,
        error_code: EnumCoreErrorCode | None = None,
        context: ModelRpcErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize RuntimeAdapterError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to OPERATION_FAILED)
            context: Bundled error context (operation, target_name, request_id)
            **extra_context: Additional context information
        """
        structured_context: dict[str, object] = dict(extra_context)

        correlation_id = None
        if context is not None:
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.target_name is not None:
                structured_context["target_name"] = context.target_name
            if context.request_id is not None:
                structured_context["request_id"] = context.request_id
            correlation_id = context.correlation_id

        super().__init__(
            message=message,
            error_code=error_code or EnumCoreErrorCode.OPERATION_FAILED,
            correlation_id=correlation_id,
            **structured_context,
        )


class ServiceUnavailableError(RuntimeAdapterError):
    """Raised by ``call`` when the target service is not currently resolvable.

    The direct call primitive is never contacted when this error is raised.
    Not retried by the adapter.

    Example:
        >>> raise ServiceUnavailableError(
        ...     "Service 'billing' is not available",
        ...     context=ModelRpcErrorContext(operation="call", target_name="billing.charge"),
        ... )
    """

    def __init__(
        self,
        message: str,
        context: ModelRpcErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.SERVICE_UNAVAILABLE,
            context=context,
            **extra_context,
        )


class DependencyUnavailableError(RuntimeAdapterError):
    """Raised by ``wait_and_call`` when the target did not become available in time.

    No call is issued. Callers may retry at a higher level.

    Example:
        >>> raise DependencyUnavailableError(
        ...     "Dependent service 'billing' not available",
        ...     context=ModelRpcErrorContext(operation="wait_and_call"),
        ...     timeout_ms=10000,
        ... )
    """

    def __init__(
        self,
        message: str,
        context: ModelRpcErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.DEPENDENCY_UNAVAILABLE,
            context=context,
            **extra_context,
        )


class NoRuntimeAttachedError(RuntimeAdapterError):
    """Raised when a dispatch operation is attempted before a runtime is attached.

    This is a programming error in the calling code path, classified as
    INVALID_STATE.
    """

    def __init__(
        self,
        message: str,
        context: ModelRpcErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.INVALID_STATE,
            context=context,
            **extra_context,
        )


class InvalidStateError(RuntimeAdapterError):
    """Raised when an operation is not valid in the current state (e.g. double attach)."""

    def __init__(
        self,
        message: str,
        context: ModelRpcErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.INVALID_STATE,
            context=context,
            **extra_context,
        )


class RpcConfigurationError(RuntimeAdapterError):
    """Raised when adapter configuration cannot be loaded or validated.

    Used for missing config files, YAML syntax errors, non-mapping content,
    and schema validation failures.
    """

    def __init__(
        self,
        message: str,
        context: ModelRpcErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.INVALID_CONFIGURATION,
            context=context,
            **extra_context,
        )


class ActionNotFoundError(RuntimeAdapterError):
    """Raised by a runtime when a dotted action name resolves to no registered action."""

    def __init__(
        self,
        message: str,
        context: ModelRpcErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumCoreErrorCode.ITEM_NOT_REGISTERED,
            context=context,
            **extra_context,
        )


__all__ = [
    "ActionNotFoundError",
    "DependencyUnavailableError",
    "InvalidStateError",
    "NoRuntimeAttachedError",
    "RpcConfigurationError",
    "RuntimeAdapterError",
    "ServiceUnavailableError",
]
