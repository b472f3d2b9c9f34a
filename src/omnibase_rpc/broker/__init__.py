# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Broker Runtime implementations for omnibase_rpc.

This module provides a Broker Runtime for local testing and development.
InMemoryBrokerRuntime runs every registered service inside one process,
without requiring an external broker, registry or transport.

Exports:
    InMemoryBrokerRuntime: In-memory Broker Runtime for local testing and development
    LocalInvocation: Invocation record handed to handlers by InMemoryBrokerRuntime
"""

from __future__ import annotations

from omnibase_rpc.broker.inmemory_broker_runtime import (
    InMemoryBrokerRuntime,
    LocalInvocation,
)

__all__: list[str] = [
    "InMemoryBrokerRuntime",
    "LocalInvocation",
]
