# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""omnibase_rpc Errors Module.

Error classes introduced by the adapter core at its boundary checks.
Errors raised by service methods are never wrapped and are not part of
this module.

Exports:
    ModelRpcErrorContext: Configuration model for bundled error context
    RuntimeAdapterError: Base adapter error class
    ServiceUnavailableError: call() target not currently resolvable
    DependencyUnavailableError: wait_and_call() timed out waiting for the target
    NoRuntimeAttachedError: Dispatch attempted before a runtime is attached
    InvalidStateError: Operation not valid in the current facade state
    RpcConfigurationError: Configuration loading/validation errors
    ActionNotFoundError: Runtime could not resolve a dotted action name

Request ID Propagation:
    Errors raised inside a dispatched call chain carry the chain's request id
    in their context (``error.model.context["request_id"]``), so a failure
    can be matched with the request that caused it across nested hops. Every
    error also gets a UUID correlation_id via
    ModelRpcErrorContext.with_correlation().

    Example::

        from omnibase_rpc.errors import ModelRpcErrorContext, ServiceUnavailableError

        context = ModelRpcErrorContext.with_correlation(
            request_id=request_context.request_id if request_context else None,
            operation="call",
            target_name="billing.charge",
        )
        raise ServiceUnavailableError("Service 'billing' is not available", context=context)
"""

from omnibase_rpc.errors.model_rpc_error_context import ModelRpcErrorContext
from omnibase_rpc.errors.rpc_errors import (
    ActionNotFoundError,
    DependencyUnavailableError,
    InvalidStateError,
    NoRuntimeAttachedError,
    RpcConfigurationError,
    RuntimeAdapterError,
    ServiceUnavailableError,
)

__all__: list[str] = [
    "ActionNotFoundError",
    "DependencyUnavailableError",
    "InvalidStateError",
    "ModelRpcErrorContext",
    "NoRuntimeAttachedError",
    "RpcConfigurationError",
    "RuntimeAdapterError",
    "ServiceUnavailableError",
]
