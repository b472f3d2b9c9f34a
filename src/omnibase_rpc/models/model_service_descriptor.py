# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Service descriptor model.

The declarative shape derived from a service object by the
ServiceDescriptorBuilder and handed to the Broker Runtime for registration.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from omnibase_rpc.enums import EnumLifecycleHook


class ModelServiceDescriptor(BaseModel):
    """Declarative service schema: ``{name, actions, events, lifecycle, dependencies}``.

    Invariants:
        - ``name`` is non-empty.
        - At least one action or event is present (an inert descriptor has
          nothing to register).
        - No lifecycle hook name is also an action name.

    Attributes:
        name: Service name, the leading segment of dotted action names.
        actions: Action name -> wrapped async handler taking an invocation record.
        events: Event name -> handler. Wrapped for subscribed events, bound
            directly for runtime signals.
        lifecycle: Hook -> wrapped async hook.
        dependencies: Ordered, de-duplicated names of services that must be
            available before the ``started`` hook runs.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1)
    actions: dict[str, Callable[..., Any]] = Field(default_factory=dict)
    events: dict[str, Callable[..., Any]] = Field(default_factory=dict)
    lifecycle: dict[EnumLifecycleHook, Callable[..., Any]] = Field(
        default_factory=dict
    )
    dependencies: tuple[str, ...] = ()

    @field_validator("dependencies", mode="before")
    @classmethod
    def _dedupe_dependencies(cls, value: object) -> object:
        if value is None:
            return ()
        if isinstance(value, str):
            return (value,)
        return tuple(dict.fromkeys(value))  # type: ignore[call-overload]

    @model_validator(mode="after")
    def _check_invariants(self) -> ModelServiceDescriptor:
        if not self.actions and not self.events:
            raise ValueError(
                f"Service descriptor '{self.name}' has neither actions nor events"
            )
        clashes = {hook.value for hook in self.lifecycle} & set(self.actions)
        if clashes:
            raise ValueError(
                f"Lifecycle hook names cannot be actions: {sorted(clashes)}"
            )
        return self

    def get_action(self, action_name: str) -> Callable[..., Any] | None:
        return self.actions.get(action_name)

    def get_lifecycle_hook(
        self, hook: EnumLifecycleHook
    ) -> Callable[..., Any] | None:
        return self.lifecycle.get(hook)


__all__ = ["ModelServiceDescriptor"]
