# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Service member classification.

Maps a service member name to exactly one dispatch category. The checks run
in a fixed order and the first match wins:

1. LIFECYCLE: ``created``, ``started``, ``stopped``
2. RUNTIME_SIGNAL: ``on`` + uppercase letter (``onNodeConnected``), plus the
   snake case spellings of the known signals (``on_node_connected``)
3. ACTION: everything else

Classification happens once, when a descriptor is built, never per call.
"""

from __future__ import annotations

__all__ = [
    "RUNTIME_SIGNAL_EVENTS",
    "classify_member",
    "is_internal_event",
    "list_service_members",
]

import re
from types import SimpleNamespace

from omnibase_rpc.enums import EnumLifecycleHook, EnumMemberKind
from omnibase_rpc.models import INTERNAL_EVENT_PREFIX, ModelMemberClassification

# Member name -> runtime signal event name.
RUNTIME_SIGNAL_EVENTS: dict[str, str] = {
    "onNodeConnected": "$node.connected",
    "onNodeUpdated": "$node.updated",
    "onNodeDisconnected": "$node.disconnected",
    "on_node_connected": "$node.connected",
    "on_node_updated": "$node.updated",
    "on_node_disconnected": "$node.disconnected",
}

_LIFECYCLE_HOOKS: dict[str, EnumLifecycleHook] = {
    hook.value: hook for hook in EnumLifecycleHook
}

_RUNTIME_SIGNAL_PATTERN = re.compile(r"^on[A-Z]")

# Never exposed: the constructor label and the service object surface itself.
_RESERVED_MEMBER_NAMES = frozenset(
    {
        "constructor",
        "emit",
        "get_events",
        "get_name",
        "remove_all_listeners",
        "set_api",
    }
)


def classify_member(member_name: str) -> ModelMemberClassification:
    """Classify a member name into its dispatch category.

    Args:
        member_name: Name of a callable member of a service object.

    Returns:
        ModelMemberClassification tagged with the member's kind. For
        RUNTIME_SIGNAL members ``event_name`` is the mapped ``$node.*``
        event, or None when the name matches the pattern but no known signal.

    Example:
        >>> classify_member("started").kind
        <EnumMemberKind.LIFECYCLE: 'lifecycle'>
        >>> classify_member("onNodeConnected").event_name
        '$node.connected'
        >>> classify_member("on_refund").kind
        <EnumMemberKind.ACTION: 'action'>
        >>> classify_member("charge").kind
        <EnumMemberKind.ACTION: 'action'>
    """
    hook = _LIFECYCLE_HOOKS.get(member_name)
    if hook is not None:
        return ModelMemberClassification(
            member_name=member_name,
            kind=EnumMemberKind.LIFECYCLE,
            lifecycle_hook=hook,
        )

    if member_name in RUNTIME_SIGNAL_EVENTS or _RUNTIME_SIGNAL_PATTERN.match(
        member_name
    ):
        return ModelMemberClassification(
            member_name=member_name,
            kind=EnumMemberKind.RUNTIME_SIGNAL,
            event_name=RUNTIME_SIGNAL_EVENTS.get(member_name),
        )

    return ModelMemberClassification(
        member_name=member_name,
        kind=EnumMemberKind.ACTION,
    )


def is_internal_event(event_name: str) -> bool:
    """Return True for internal (system) events, identified by the literal ``$`` prefix."""
    return event_name.startswith(INTERNAL_EVENT_PREFIX)


def list_service_members(instance: object) -> list[str]:
    """List the callable members a service object exposes, in definition order.

    Only members defined on the concrete class are considered, so methods
    inherited from ServiceBase (or any other base) are never exposed. For
    ``types.SimpleNamespace`` objects the instance's own attributes are used
    instead. Private names (leading underscore, which includes ``__init__``)
    and the service object surface (``get_name``, ``emit``, ...) are skipped.
    """
    if type(instance) is SimpleNamespace:
        candidates = vars(instance)
    else:
        candidates = vars(type(instance))

    members: list[str] = []
    for name, member in candidates.items():
        if name.startswith("_") or name in _RESERVED_MEMBER_NAMES:
            continue
        if isinstance(member, (staticmethod, classmethod)):
            member = member.__func__
        if isinstance(member, type) or not callable(member):
            continue
        members.append(name)
    return members
