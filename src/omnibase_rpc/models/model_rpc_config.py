# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Adapter configuration model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_WAIT_FOR_SERVICES_TIMEOUT_MS = 10_000


class ModelRpcConfig(BaseModel):
    """Configuration consumed by the adapter core.

    Attributes:
        wait_for_services_timeout_ms: How long ``wait_and_call`` waits for the
            target service to become discoverable before failing.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    wait_for_services_timeout_ms: int = Field(
        default=DEFAULT_WAIT_FOR_SERVICES_TIMEOUT_MS,
        gt=0,
        description="Availability wait timeout for wait_and_call, in milliseconds",
    )

    @property
    def wait_for_services_timeout_seconds(self) -> float:
        return self.wait_for_services_timeout_ms / 1000


__all__ = ["DEFAULT_WAIT_FOR_SERVICES_TIMEOUT_MS", "ModelRpcConfig"]
