# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""omnibase_rpc Models Module.

Exports:
    ModelBrokerNode: Node descriptor returned by list_nodes
    ModelEventSubscription: Event a service object declares interest in
    ModelInvocationRecord: Incoming invocation record handed to handlers
    ModelInvocationTrace: Runtime history entry for a dispatched call
    ModelMemberClassification: Tagged classification of a service member
    ModelRequestContext: Per-call-chain execution context
    ModelRpcConfig: Adapter configuration
    ModelServiceDescriptor: Declarative service schema
    ModelServiceInfo: Entry of resolve_services
"""

from omnibase_rpc.models.model_event_subscription import (
    INTERNAL_EVENT_PREFIX,
    ModelEventSubscription,
)
from omnibase_rpc.models.model_invocation_record import (
    ModelInvocationRecord,
    ModelInvocationTrace,
)
from omnibase_rpc.models.model_member_classification import (
    ModelMemberClassification,
)
from omnibase_rpc.models.model_request_context import ModelRequestContext
from omnibase_rpc.models.model_rpc_config import (
    DEFAULT_WAIT_FOR_SERVICES_TIMEOUT_MS,
    ModelRpcConfig,
)
from omnibase_rpc.models.model_service_descriptor import ModelServiceDescriptor
from omnibase_rpc.models.model_service_info import ModelBrokerNode, ModelServiceInfo

__all__: list[str] = [
    "DEFAULT_WAIT_FOR_SERVICES_TIMEOUT_MS",
    "INTERNAL_EVENT_PREFIX",
    "ModelBrokerNode",
    "ModelEventSubscription",
    "ModelInvocationRecord",
    "ModelInvocationTrace",
    "ModelMemberClassification",
    "ModelRequestContext",
    "ModelRpcConfig",
    "ModelServiceDescriptor",
    "ModelServiceInfo",
]
