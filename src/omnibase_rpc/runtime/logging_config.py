# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Logging setup for processes hosting omnibase_rpc services."""

from __future__ import annotations

__all__ = ["configure_logging"]

import logging
import os
import sys

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def configure_logging() -> None:
    """Configure logging with the level taken from the environment.

    Environment Variables:
        ONEX_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            Default: INFO

    Structured Logging Extras:
        Adapter log calls attach structured extras for observability:
        - service: Service name
        - target: Dotted action name of a call
        - request_id: Request id of the call chain
        - node_id: Node the binding runs on

    Example:
        >>> configure_logging()
        >>> logger.info("Service registered", extra={"service": "billing"})
    """
    log_level = os.getenv("ONEX_LOG_LEVEL", "INFO").upper()

    if log_level not in VALID_LOG_LEVELS:
        print(
            f"Warning: Invalid ONEX_LOG_LEVEL '{log_level}', using INFO. "
            f"Valid levels: {', '.join(sorted(VALID_LOG_LEVELS))}",
            file=sys.stderr,
        )
        log_level = "INFO"

    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
