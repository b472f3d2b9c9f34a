# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Invocation record model.

Shape of the record a Broker Runtime hands to a dispatched action or event
handler. Runtimes may pass their own objects instead, as long as they expose
the same attributes (see ProtocolInvocationRecord).
"""

from __future__ import annotations

from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class ModelInvocationRecord(BaseModel):
    """Incoming invocation record.

    Attributes:
        call_id: Unique id of this invocation.
        node_id: Id of the node the call originated from.
        request_id: Request id of the call chain, if any.
        params: Raw parameters. A list of positional arguments for actions
            and domain events; a structured payload for internal events.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    call_id: str = Field(default_factory=lambda: str(uuid4()))
    node_id: str
    request_id: str | None = None
    params: Any = Field(default_factory=list)


class ModelInvocationTrace(BaseModel):
    """History entry recorded by a runtime for each dispatched action call.

    Attributes:
        name: Dotted ``service.action`` name that was dispatched.
        call_id: Id of the invocation created for the call.
        request_id: Request id the invocation carried.
        node_id: Node the invocation ran on.
        fast_path: True when the call came through a parent invocation
            handle rather than a fresh broker-level invoke.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    call_id: str
    request_id: str | None = None
    node_id: str
    fast_path: bool = False


__all__ = ["ModelInvocationRecord", "ModelInvocationTrace"]
