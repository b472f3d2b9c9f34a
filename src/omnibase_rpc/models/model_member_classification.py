# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tagged classification of a single service member."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from omnibase_rpc.enums import EnumLifecycleHook, EnumMemberKind


class ModelMemberClassification(BaseModel):
    """Result of classifying one member name.

    Attributes:
        member_name: The member name as found on the service object.
        kind: Dispatch category.
        event_name: Runtime signal event name for RUNTIME_SIGNAL members.
            None when the member looks like a signal handler but matches no
            known signal.
        lifecycle_hook: Hook for LIFECYCLE members.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    member_name: str = Field(..., min_length=1)
    kind: EnumMemberKind
    event_name: str | None = None
    lifecycle_hook: EnumLifecycleHook | None = None

    @model_validator(mode="after")
    def _check_variant_fields(self) -> ModelMemberClassification:
        if self.kind is EnumMemberKind.LIFECYCLE and self.lifecycle_hook is None:
            raise ValueError("LIFECYCLE classification requires lifecycle_hook")
        if self.kind is not EnumMemberKind.LIFECYCLE and self.lifecycle_hook is not None:
            raise ValueError("lifecycle_hook is only valid for LIFECYCLE members")
        return self


__all__ = ["ModelMemberClassification"]
