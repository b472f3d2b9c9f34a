# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for the adapter error hierarchy and ModelRpcErrorContext."""

from __future__ import annotations

from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError

from omnibase_core.enums.enum_core_error_code import EnumCoreErrorCode
from omnibase_core.models.errors.model_onex_error import ModelOnexError

from omnibase_rpc.errors import (
    ActionNotFoundError,
    DependencyUnavailableError,
    InvalidStateError,
    ModelRpcErrorContext,
    NoRuntimeAttachedError,
    RpcConfigurationError,
    RuntimeAdapterError,
    ServiceUnavailableError,
)


class TestModelRpcErrorContext:
    """Tests for ModelRpcErrorContext."""

    def test_defaults_are_empty(self) -> None:
        context = ModelRpcErrorContext()
        assert context.operation is None
        assert context.target_name is None
        assert context.request_id is None
        assert context.correlation_id is None

    def test_with_correlation_generates_id(self) -> None:
        context = ModelRpcErrorContext.with_correlation(operation="call")
        assert isinstance(context.correlation_id, UUID)
        assert context.operation == "call"

    def test_with_correlation_keeps_given_id(self) -> None:
        correlation_id = uuid4()
        context = ModelRpcErrorContext.with_correlation(
            correlation_id=correlation_id, request_id="req-1"
        )
        assert context.correlation_id == correlation_id
        assert context.request_id == "req-1"

    def test_empty_request_id_is_dropped(self) -> None:
        context = ModelRpcErrorContext.with_correlation(request_id="")
        assert context.request_id is None
        assert context.correlation_id is not None

    def test_is_frozen_and_strict(self) -> None:
        context = ModelRpcErrorContext(operation="call")
        with pytest.raises(ValidationError):
            context.operation = "other"  # type: ignore[misc]
        with pytest.raises(ValidationError):
            ModelRpcErrorContext(unknown="x")  # type: ignore[call-arg]


class TestRuntimeAdapterError:
    """Tests for the base error."""

    def test_is_onex_error(self) -> None:
        error = RuntimeAdapterError("plain")
        assert isinstance(error, ModelOnexError)
        assert isinstance(error, Exception)

    def test_structured_fields(self) -> None:
        correlation_id = uuid4()
        context = ModelRpcErrorContext(
            operation="call",
            target_name="billing.charge",
            request_id="req-1",
            correlation_id=correlation_id,
        )
        error = RuntimeAdapterError("Operation failed", context=context, timeout_ms=50)

        assert "Operation failed" in str(error)
        assert error.message == "Operation failed"
        assert error.model.error_code == EnumCoreErrorCode.OPERATION_FAILED
        assert error.model.correlation_id == correlation_id
        assert error.model.context["operation"] == "call"
        assert error.model.context["target_name"] == "billing.charge"
        assert error.model.context["request_id"] == "req-1"
        assert error.model.context["timeout_ms"] == 50

    def test_without_context(self) -> None:
        error = RuntimeAdapterError("plain")
        # ModelOnexError always assigns a correlation id.
        assert isinstance(error.correlation_id, UUID)
        assert error.model.context == {}

    def test_error_chaining(self) -> None:
        cause = ValueError("root cause")
        try:
            try:
                raise cause
            except ValueError as e:
                raise RuntimeAdapterError("wrapped") from e
        except RuntimeAdapterError as error:
            assert error.__cause__ is cause


class TestErrorSubclasses:
    """Tests for error codes and hierarchy of the specific errors."""

    @pytest.mark.parametrize(
        ("error_cls", "code"),
        [
            (ServiceUnavailableError, EnumCoreErrorCode.SERVICE_UNAVAILABLE),
            (DependencyUnavailableError, EnumCoreErrorCode.DEPENDENCY_UNAVAILABLE),
            (NoRuntimeAttachedError, EnumCoreErrorCode.INVALID_STATE),
            (InvalidStateError, EnumCoreErrorCode.INVALID_STATE),
            (RpcConfigurationError, EnumCoreErrorCode.INVALID_CONFIGURATION),
            (ActionNotFoundError, EnumCoreErrorCode.ITEM_NOT_REGISTERED),
        ],
    )
    def test_error_code(
        self, error_cls: type[RuntimeAdapterError], code: EnumCoreErrorCode
    ) -> None:
        error = error_cls("failed", context=ModelRpcErrorContext(operation="op"))

        assert isinstance(error, RuntimeAdapterError)
        assert error.model.error_code == code
        assert error.model.context["operation"] == "op"

    def test_extra_context_is_kept(self) -> None:
        error = DependencyUnavailableError("not available", timeout_ms=10_000)
        assert error.model.context == {"timeout_ms": 10_000}
