# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ONEX RPC Adapter - Service objects over a pluggable Broker Runtime.

This package exposes plain service objects (named objects with methods and
event listeners) as callable network services through a Broker Runtime,
including:

- Service facade: registration, lifecycle and call API
- Request context propagation across nested calls
- Event dispatch for domain events and ``$node.*`` runtime signals
- Remote stubs mapping attribute access to remote calls
- An in-memory Broker Runtime for local development and tests

Key Components:
    - ServiceFacade: Entry point applications register services with
    - BrokerBinding: Adapter core bound to one Broker Runtime
    - ProtocolBrokerRuntime: Collaborator contract for broker implementations
    - RuntimeAdapterError hierarchy with ModelRpcErrorContext
"""

__all__: list[str] = []
