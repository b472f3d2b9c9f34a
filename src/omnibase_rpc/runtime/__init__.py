# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""omnibase_rpc Runtime Module.

Adapter core: context propagation, descriptor building, dispatch wrapping,
call routing, remote stubs and the service facade.

Exports:
    BrokerBinding: Adapter-side binding of one Broker Runtime
    CallRouter: Context-aware call / wait_and_call routing
    ContextStore: Async-correct request context store
    DispatchAdapter: Context-scoped wrapping of actions, events and hooks
    RemoteStub: Catch-all proxy mapping attributes to remote calls
    ServiceDescriptorBuilder: Builds ModelServiceDescriptor from service objects
    ServiceFacade: Registration, lifecycle and call API
    classify_member: Ordered member classification function
    configure_logging: Environment-driven logging setup
    load_rpc_config: YAML + environment configuration loader
    make_stub: RemoteStub factory
"""

from omnibase_rpc.runtime.broker_binding import BrokerBinding
from omnibase_rpc.runtime.call_router import CallRouter, split_service_name
from omnibase_rpc.runtime.context_store import ContextStore, RequestContextStore
from omnibase_rpc.runtime.dispatch_adapter import DispatchAdapter
from omnibase_rpc.runtime.logging_config import configure_logging
from omnibase_rpc.runtime.member_classifier import (
    RUNTIME_SIGNAL_EVENTS,
    classify_member,
    is_internal_event,
    list_service_members,
)
from omnibase_rpc.runtime.remote_stub import RemoteStub, make_stub
from omnibase_rpc.runtime.rpc_config_loader import load_rpc_config
from omnibase_rpc.runtime.service_descriptor_builder import ServiceDescriptorBuilder
from omnibase_rpc.runtime.service_facade import ServiceFacade

__all__: list[str] = [
    "RUNTIME_SIGNAL_EVENTS",
    "BrokerBinding",
    "CallRouter",
    "ContextStore",
    "DispatchAdapter",
    "RemoteStub",
    "RequestContextStore",
    "ServiceDescriptorBuilder",
    "ServiceFacade",
    "classify_member",
    "configure_logging",
    "is_internal_event",
    "list_service_members",
    "load_rpc_config",
    "make_stub",
    "split_service_name",
]
