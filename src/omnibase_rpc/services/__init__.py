# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""omnibase_rpc Services Module.

Exports:
    ServiceBase: Event-emitting base class for service objects
"""

from omnibase_rpc.services.service_base import ServiceBase

__all__: list[str] = ["ServiceBase"]
