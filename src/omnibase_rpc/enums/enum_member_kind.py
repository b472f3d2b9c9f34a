# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Member kind enumeration for service member classification."""

from enum import Enum


class EnumMemberKind(str, Enum):
    """Dispatch category assigned to a service member at descriptor build time.

    Values:
        ACTION: Remotely callable unit of work.
        EVENT: Handler for a subscribed domain or internal event.
        RUNTIME_SIGNAL: Handler for a runtime node signal (``$node.*``),
            bound without context wrapping.
        LIFECYCLE: One of the reserved lifecycle hooks.
    """

    ACTION = "action"
    EVENT = "event"
    RUNTIME_SIGNAL = "runtime_signal"
    LIFECYCLE = "lifecycle"
