# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Lifecycle hook enumeration."""

from enum import Enum


class EnumLifecycleHook(str, Enum):
    """Reserved lifecycle hook names. A member with one of these names is never an action."""

    CREATED = "created"
    STARTED = "started"
    STOPPED = "stopped"
