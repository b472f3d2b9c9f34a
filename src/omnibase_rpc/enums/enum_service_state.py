# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Registration state enumeration for services owned by the ServiceFacade."""

from enum import Enum


class EnumServiceState(str, Enum):
    """Registration state of a service instance.

    Transitions:
        UNREGISTERED -> REGISTERED: register_service() without a runtime
        REGISTERED -> BOUND: runtime attached (or already attached)
        BOUND -> REGISTERED: detach_runtime()
        REGISTERED/BOUND -> DESTROYED: destroy_service()
    """

    UNREGISTERED = "unregistered"
    REGISTERED = "registered"
    BOUND = "bound"
    DESTROYED = "destroyed"
