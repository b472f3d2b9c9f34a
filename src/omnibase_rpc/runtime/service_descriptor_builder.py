# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Service Descriptor Builder.

Inspects a service object and produces the declarative ModelServiceDescriptor
the Broker Runtime registers. Returns None (a no-op signal) when the object
has no name or no actionable surface.

Algorithm:
    1. Enumerate the object's own callable members.
    2. Add a context-scoped event handler for every subscription reported by
       ``get_events()``.
    3. Bind runtime signal members (``onNodeConnected`` / ``on_node_connected``)
       directly as ``$node.*`` event handlers.
    4. Wrap ``created`` / ``started`` / ``stopped`` as lifecycle hooks.
    5. Wrap every remaining member as an action.

    Member categories come from classify_member(), which checks lifecycle
    names first, so a name cannot be both a lifecycle hook and a signal.
"""

from __future__ import annotations

__all__ = ["ServiceDescriptorBuilder"]

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from omnibase_rpc.enums import EnumLifecycleHook, EnumMemberKind
from omnibase_rpc.models import ModelServiceDescriptor
from omnibase_rpc.runtime.member_classifier import (
    classify_member,
    list_service_members,
)

if TYPE_CHECKING:
    from omnibase_rpc.protocols import ProtocolServiceObject
    from omnibase_rpc.runtime.dispatch_adapter import DispatchAdapter

logger = logging.getLogger(__name__)


class ServiceDescriptorBuilder:
    """Builds service descriptors, wrapping members through a DispatchAdapter."""

    def __init__(self, adapter: DispatchAdapter) -> None:
        self._adapter = adapter

    def build(
        self,
        instance: ProtocolServiceObject,
        dependencies: Sequence[str] | None = None,
    ) -> ModelServiceDescriptor | None:
        """Build the descriptor for ``instance``.

        Args:
            instance: Service object to describe.
            dependencies: Names of services that must be available before the
                ``started`` hook runs. Order is kept, duplicates dropped.

        Returns:
            The descriptor, or None when the object has no name or neither
            actions nor events.
        """
        name = instance.get_name()
        if not name:
            logger.warning(
                "Skipping service without a name",
                extra={"service_type": type(instance).__name__},
            )
            return None

        members = list_service_members(instance)
        subscriptions = list(instance.get_events() or ())
        if not subscriptions and not members:
            logger.debug("Skipping service with empty surface", extra={"service": name})
            return None

        events: dict[str, Callable[..., Any]] = {
            subscription.event_name: self._adapter.wrap_event(
                instance, subscription.event_name
            )
            for subscription in subscriptions
        }
        actions: dict[str, Callable[..., Any]] = {}
        lifecycle: dict[EnumLifecycleHook, Callable[..., Any]] = {}

        for member_name in members:
            classification = classify_member(member_name)
            method = getattr(instance, member_name)

            if classification.kind is EnumMemberKind.LIFECYCLE:
                assert classification.lifecycle_hook is not None
                lifecycle[classification.lifecycle_hook] = (
                    self._adapter.wrap_lifecycle(method)
                )
            elif classification.kind is EnumMemberKind.RUNTIME_SIGNAL:
                if classification.event_name is None:
                    logger.warning(
                        "Ignoring handler for unknown runtime signal",
                        extra={"service": name, "member": member_name},
                    )
                    continue
                events[classification.event_name] = method
            else:
                actions[member_name] = self._adapter.wrap_action(method)

        if not actions and not events:
            logger.debug(
                "Skipping service with neither actions nor events",
                extra={"service": name},
            )
            return None

        descriptor = ModelServiceDescriptor(
            name=name,
            actions=actions,
            events=events,
            lifecycle=lifecycle,
            dependencies=dependencies or (),
        )
        logger.debug(
            "Built service descriptor",
            extra={
                "service": name,
                "actions": sorted(actions),
                "events": sorted(events),
                "lifecycle": sorted(hook.value for hook in lifecycle),
                "dependencies": list(descriptor.dependencies),
            },
        )
        return descriptor
