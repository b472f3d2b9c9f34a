# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""omnibase_rpc Enumerations Module.

Error classification uses EnumCoreErrorCode from omnibase_core; this
module only holds the adapter's own vocabularies.

Exports:
    EnumLifecycleHook: Reserved lifecycle hook names (created, started, stopped)
    EnumMemberKind: Dispatch category of a service member (ACTION, EVENT, RUNTIME_SIGNAL, LIFECYCLE)
    EnumServiceState: Registration state of a facade-owned service instance
"""

from omnibase_rpc.enums.enum_lifecycle_hook import EnumLifecycleHook
from omnibase_rpc.enums.enum_member_kind import EnumMemberKind
from omnibase_rpc.enums.enum_service_state import EnumServiceState

__all__: list[str] = [
    "EnumLifecycleHook",
    "EnumMemberKind",
    "EnumServiceState",
]
