# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for ServiceDescriptorBuilder."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from omnibase_rpc.enums import EnumLifecycleHook
from omnibase_rpc.models import ModelInvocationRecord
from omnibase_rpc.runtime import (
    ContextStore,
    DispatchAdapter,
    ServiceDescriptorBuilder,
)
from omnibase_rpc.services import ServiceBase
from tests.helpers.rpc_services import LifecycleRecorderService, PingService


@pytest.fixture
def builder() -> ServiceDescriptorBuilder:
    """Builder wired to a real adapter and a binding double."""
    binding = MagicMock()
    binding.node_id = "node-a"
    return ServiceDescriptorBuilder(DispatchAdapter(ContextStore(), binding))


class TestBuildDescriptor:
    """Tests for the produced descriptor shape."""

    def test_actions_are_collected(self, builder: ServiceDescriptorBuilder) -> None:
        descriptor = builder.build(PingService())

        assert descriptor is not None
        assert descriptor.name == "svcA"
        assert set(descriptor.actions) == {"ping"}
        assert descriptor.events == {}
        assert descriptor.lifecycle == {}
        assert descriptor.dependencies == ()

    def test_lifecycle_signals_and_events_are_split(
        self, builder: ServiceDescriptorBuilder
    ) -> None:
        service = LifecycleRecorderService()
        descriptor = builder.build(service)

        assert descriptor is not None
        assert set(descriptor.actions) == {"status"}
        assert set(descriptor.lifecycle) == {
            EnumLifecycleHook.CREATED,
            EnumLifecycleHook.STARTED,
            EnumLifecycleHook.STOPPED,
        }
        assert set(descriptor.events) == {"order.placed", "$node.connected"}

    def test_runtime_signal_is_bound_directly(
        self, builder: ServiceDescriptorBuilder
    ) -> None:
        service = LifecycleRecorderService()
        descriptor = builder.build(service)

        assert descriptor is not None
        assert descriptor.events["$node.connected"] == service.onNodeConnected

    def test_unknown_runtime_signal_is_skipped(
        self, builder: ServiceDescriptorBuilder
    ) -> None:
        class Watcher(ServiceBase):
            name = "watcher"

            def onClusterResized(self) -> None:  # noqa: N802
                pass

            def ping(self) -> str:
                return "pong"

        descriptor = builder.build(Watcher())

        assert descriptor is not None
        assert descriptor.events == {}
        assert set(descriptor.actions) == {"ping"}

    def test_snake_case_on_prefix_is_an_action(
        self, builder: ServiceDescriptorBuilder
    ) -> None:
        class Shop(ServiceBase):
            name = "shop"

            async def on_refund(self, order_id: str) -> str:
                return f"refunded {order_id}"

            def on_node_connected(self, payload: object) -> None:
                pass

        shop = Shop()
        descriptor = builder.build(shop)

        assert descriptor is not None
        assert set(descriptor.actions) == {"on_refund"}
        assert descriptor.events == {"$node.connected": shop.on_node_connected}

    def test_dependencies_are_deduplicated_in_order(
        self, builder: ServiceDescriptorBuilder
    ) -> None:
        descriptor = builder.build(PingService(), ["auth", "billing", "auth"])

        assert descriptor is not None
        assert descriptor.dependencies == ("auth", "billing")

    def test_simple_namespace_service(self, builder: ServiceDescriptorBuilder) -> None:
        instance = SimpleNamespace(
            get_name=lambda: "ns",
            get_events=lambda: [],
            ping=lambda: "pong",
        )
        descriptor = builder.build(instance)

        assert descriptor is not None
        assert set(descriptor.actions) == {"ping"}

    @pytest.mark.asyncio
    async def test_wrapped_action_calls_the_instance(
        self, builder: ServiceDescriptorBuilder
    ) -> None:
        descriptor = builder.build(PingService())
        assert descriptor is not None

        handler = descriptor.get_action("ping")
        assert handler is not None
        result = await handler(ModelInvocationRecord(node_id="node-a", params=[]))
        assert result == "pong"


class TestBuildNoOp:
    """Tests for inputs that produce no descriptor."""

    def test_missing_name_returns_none(self, builder: ServiceDescriptorBuilder) -> None:
        class Anonymous(ServiceBase):
            def ping(self) -> str:
                return "pong"

        assert builder.build(Anonymous()) is None

    def test_empty_surface_returns_none(self, builder: ServiceDescriptorBuilder) -> None:
        class Empty(ServiceBase):
            name = "empty"

        assert builder.build(Empty()) is None

    def test_lifecycle_only_service_returns_none(
        self, builder: ServiceDescriptorBuilder
    ) -> None:
        class HooksOnly(ServiceBase):
            name = "hooks"

            async def started(self) -> None:
                pass

        assert builder.build(HooksOnly()) is None

    def test_events_only_service_is_built(
        self, builder: ServiceDescriptorBuilder
    ) -> None:
        class Listener(ServiceBase):
            name = "listener"

        service = Listener()
        service.on("order.placed", lambda *_: None)

        descriptor = builder.build(service)

        assert descriptor is not None
        assert descriptor.actions == {}
        assert set(descriptor.events) == {"order.placed"}
