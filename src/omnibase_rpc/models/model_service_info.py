# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Service info and broker node models returned by the Broker Runtime."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelServiceInfo(BaseModel):
    """One entry of ``resolve_services``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1)
    node_id: str | None = None
    available: bool = True


class ModelBrokerNode(BaseModel):
    """Node descriptor returned by ``list_nodes``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    node_id: str = Field(..., min_length=1)
    available: bool = True
    local: bool = False
    services: tuple[str, ...] = ()


__all__ = ["ModelBrokerNode", "ModelServiceInfo"]
