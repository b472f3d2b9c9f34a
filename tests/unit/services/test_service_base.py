# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for ServiceBase event emitter behaviour."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from omnibase_rpc.services import ServiceBase


class Billing(ServiceBase):
    name = "billing"


@pytest.fixture
def service() -> Billing:
    """Service under test."""
    return Billing()


class TestServiceBaseListeners:
    """Tests for on/off/get_events/remove_all_listeners."""

    def test_name_and_api(self, service: Billing) -> None:
        api = object()
        assert service.get_name() == "billing"
        assert service.api is None

        service.set_api(api)
        assert service.api is api

    def test_get_events_lists_events_with_listeners(self, service: Billing) -> None:
        listener = MagicMock()
        service.on("order.placed", listener)
        service.on("$node.connected", listener)

        assert [s.event_name for s in service.get_events()] == [
            "order.placed",
            "$node.connected",
        ]

        service.off("order.placed", listener)
        assert [s.event_name for s in service.get_events()] == ["$node.connected"]

    def test_off_unknown_listener_is_noop(self, service: Billing) -> None:
        service.off("order.placed", MagicMock())
        assert service.get_events() == []

    def test_remove_all_listeners(self, service: Billing) -> None:
        service.on("a", MagicMock())
        service.on("b", MagicMock())

        service.remove_all_listeners("a")
        assert [s.event_name for s in service.get_events()] == ["b"]

        service.remove_all_listeners()
        assert service.get_events() == []


class TestServiceBaseEmit:
    """Tests for emit()."""

    @pytest.mark.asyncio
    async def test_emit_calls_listeners_in_order(self, service: Billing) -> None:
        calls: list[tuple[str, tuple[object, ...]]] = []
        service.on("order.placed", lambda *args: calls.append(("sync", args)))

        async def async_listener(*args: object) -> None:
            calls.append(("async", args))

        service.on("order.placed", async_listener)

        assert await service.emit("order.placed", "o-1", 42) is True
        assert calls == [("sync", ("o-1", 42)), ("async", ("o-1", 42))]

    @pytest.mark.asyncio
    async def test_emit_without_listeners_returns_false(self, service: Billing) -> None:
        assert await service.emit("nobody.listens") is False

    @pytest.mark.asyncio
    async def test_listener_errors_propagate(self, service: Billing) -> None:
        later = AsyncMock()
        service.on("order.placed", MagicMock(side_effect=ValueError("bad order")))
        service.on("order.placed", later)

        with pytest.raises(ValueError, match="bad order"):
            await service.emit("order.placed")

        later.assert_not_awaited()
