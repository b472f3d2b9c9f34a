# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for omnibase_rpc tests."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncGenerator
from unittest.mock import MagicMock

import pytest
import pytest_asyncio

from omnibase_rpc.broker import InMemoryBrokerRuntime
from omnibase_rpc.models import ModelRpcConfig
from omnibase_rpc.runtime import ServiceFacade
from tests.helpers.rpc_services import make_mock_runtime

# =============================================================================
# Duck Typing Conformance Helpers
# =============================================================================


def assert_has_methods(
    obj: object,
    required_methods: list[str],
    *,
    protocol_name: str | None = None,
) -> None:
    """Assert that an object has all required methods (duck typing conformance).

    Args:
        obj: The object to check for method presence.
        required_methods: List of method names that must be present and callable.
        protocol_name: Optional protocol name for clearer error messages.

    Raises:
        AssertionError: If any required method is missing or not callable.

    Example:
        >>> assert_has_methods(
        ...     runtime,
        ...     ["register_descriptor", "resolve_services"],
        ...     protocol_name="ProtocolBrokerRuntime",
        ... )
    """
    name = protocol_name or obj.__class__.__name__
    for method_name in required_methods:
        assert hasattr(obj, method_name), f"{name} must have '{method_name}' method"
        assert callable(
            getattr(obj, method_name)
        ), f"{name}.{method_name} must be callable"


def assert_has_async_methods(
    obj: object,
    required_methods: list[str],
    *,
    protocol_name: str | None = None,
) -> None:
    """Assert that an object has all required async methods.

    Extended duck typing verification that also checks that methods are
    coroutine functions (async).

    Raises:
        AssertionError: If any method is missing, not callable, or not async.
    """
    name = protocol_name or obj.__class__.__name__
    for method_name in required_methods:
        assert hasattr(obj, method_name), f"{name} must have '{method_name}' method"
        method = getattr(obj, method_name)
        assert callable(method), f"{name}.{method_name} must be callable"
        assert asyncio.iscoroutinefunction(
            method
        ), f"{name}.{method_name} must be async (coroutine function)"


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def mock_runtime() -> MagicMock:
    """Broker Runtime double where ``svcA`` is the only available service."""
    return make_mock_runtime(available={"svcA"})


@pytest.fixture
def fast_config() -> ModelRpcConfig:
    """Adapter configuration with a short availability timeout."""
    return ModelRpcConfig(wait_for_services_timeout_ms=50)


@pytest_asyncio.fixture
async def inmemory_runtime() -> AsyncGenerator[InMemoryBrokerRuntime, None]:
    """In-memory runtime, stopped after the test."""
    runtime = InMemoryBrokerRuntime(node_id="test-node", dependency_timeout_ms=200)
    yield runtime
    await runtime.stop()


@pytest.fixture
def facade(fast_config: ModelRpcConfig) -> ServiceFacade:
    """Service facade with no runtime attached."""
    return ServiceFacade(config=fast_config)
