# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Event subscription model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

INTERNAL_EVENT_PREFIX = "$"


class ModelEventSubscription(BaseModel):
    """An event a service object declares interest in.

    Event names starting with ``$`` are internal (system) events whose
    payload is forwarded as a single structured argument. This is a literal
    prefix check: a domain event named with the same prefix is treated as
    internal too.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    event_name: str = Field(..., min_length=1)

    @property
    def is_internal(self) -> bool:
        return self.event_name.startswith(INTERNAL_EVENT_PREFIX)


__all__ = ["INTERNAL_EVENT_PREFIX", "ModelEventSubscription"]
