# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Test helpers for omnibase_rpc tests.

Available Utilities:
    Services:
        - PingService: ``svcA`` with a single ``ping`` action
        - RelayService: ``svcB`` relaying to ``svcA.ping`` through its facade
        - ContextProbeService: Records the request context seen by each call
        - LifecycleRecorderService: Records lifecycle hooks and runtime signals
    Runtimes:
        - make_mock_runtime: MagicMock/AsyncMock Broker Runtime
"""

from tests.helpers.rpc_services import (
    ContextProbeService,
    LifecycleRecorderService,
    PingService,
    RelayService,
    make_mock_runtime,
)

__all__ = [
    "ContextProbeService",
    "LifecycleRecorderService",
    "PingService",
    "RelayService",
    "make_mock_runtime",
]
