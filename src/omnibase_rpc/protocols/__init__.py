# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""omnibase_rpc Protocols Module.

Structural interfaces at the adapter's boundaries.

Exports:
    ProtocolBrokerRuntime: External Broker Runtime collaborator
    ProtocolInvocationRecord: Record handed to dispatched handlers
    ProtocolInvocationHandle: Invocation record with same-chain call capability
    ProtocolRemoteCaller: Router of dotted service.action calls
    ProtocolServiceObject: Service object surface consumed by the adapter
"""

from omnibase_rpc.protocols.protocol_broker_runtime import ProtocolBrokerRuntime
from omnibase_rpc.protocols.protocol_invocation import (
    ProtocolInvocationHandle,
    ProtocolInvocationRecord,
)
from omnibase_rpc.protocols.protocol_service_object import (
    ProtocolRemoteCaller,
    ProtocolServiceObject,
)

__all__: list[str] = [
    "ProtocolBrokerRuntime",
    "ProtocolInvocationHandle",
    "ProtocolInvocationRecord",
    "ProtocolRemoteCaller",
    "ProtocolServiceObject",
]
