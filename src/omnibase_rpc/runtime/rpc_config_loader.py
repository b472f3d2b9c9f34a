# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Adapter Configuration Loader.

Builds a ModelRpcConfig from an optional YAML file and the process
environment. Environment values win over file values.

Config File Structure:

    ```yaml
    wait_for_services_timeout_ms: 10000
    ```

Environment Variables:
    WAIT_FOR_SERVICES_TIMEOUT: Availability wait for wait_and_call, in
        milliseconds. Values that are not positive integers are ignored with
        a warning and the default (10000) is used.

Security:
    - Uses yaml.safe_load() to prevent arbitrary code execution
"""

from __future__ import annotations

__all__ = ["ENV_WAIT_FOR_SERVICES_TIMEOUT", "load_rpc_config"]

import logging
import os
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import ValidationError

from omnibase_rpc.errors import ModelRpcErrorContext, RpcConfigurationError
from omnibase_rpc.models import DEFAULT_WAIT_FOR_SERVICES_TIMEOUT_MS, ModelRpcConfig

logger = logging.getLogger(__name__)

ENV_WAIT_FOR_SERVICES_TIMEOUT = "WAIT_FOR_SERVICES_TIMEOUT"

# Maximum config file size (1 MB)
MAX_CONFIG_SIZE_BYTES = 1024 * 1024


def _load_config_file(path: Path) -> dict[str, object]:
    context = ModelRpcErrorContext.with_correlation(
        operation="load_rpc_config",
        target_name=str(path),
    )

    if not path.exists():
        raise RpcConfigurationError(f"Config file not found: {path}", context=context)

    file_size = path.stat().st_size
    if file_size > MAX_CONFIG_SIZE_BYTES:
        raise RpcConfigurationError(
            f"Config file too large: {file_size} bytes (max {MAX_CONFIG_SIZE_BYTES})",
            context=context,
        )

    try:
        with path.open() as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise RpcConfigurationError(
            f"Invalid YAML in config: {e}", context=context
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RpcConfigurationError(
            f"Config must be a mapping, got {type(data).__name__}",
            context=context,
        )
    return data


def _timeout_from_env(environ: Mapping[str, str]) -> int | None:
    raw = environ.get(ENV_WAIT_FOR_SERVICES_TIMEOUT)
    if raw is None or raw.strip() == "":
        return None
    try:
        value = int(raw.strip())
    except ValueError:
        value = 0
    if value <= 0:
        logger.warning(
            "Invalid %s value, using default",
            ENV_WAIT_FOR_SERVICES_TIMEOUT,
            extra={"value": raw, "default_ms": DEFAULT_WAIT_FOR_SERVICES_TIMEOUT_MS},
        )
        return DEFAULT_WAIT_FOR_SERVICES_TIMEOUT_MS
    return value


def load_rpc_config(
    path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> ModelRpcConfig:
    """Load adapter configuration.

    Args:
        path: Optional YAML config file.
        environ: Environment mapping; defaults to ``os.environ``.

    Returns:
        Validated ModelRpcConfig.

    Raises:
        RpcConfigurationError: If the file is missing, too large, not valid
            YAML, not a mapping, or fails validation.

    Example:
        >>> load_rpc_config(environ={"WAIT_FOR_SERVICES_TIMEOUT": "2500"})
        ModelRpcConfig(wait_for_services_timeout_ms=2500)
    """
    env = os.environ if environ is None else environ
    data: dict[str, object] = {}
    if path is not None:
        data.update(_load_config_file(Path(path)))

    timeout = _timeout_from_env(env)
    if timeout is not None:
        data["wait_for_services_timeout_ms"] = timeout

    try:
        config = ModelRpcConfig.model_validate(data)
    except ValidationError as e:
        raise RpcConfigurationError(
            f"Invalid adapter configuration: {e}",
            context=ModelRpcErrorContext.with_correlation(
                operation="load_rpc_config",
                target_name=str(path) if path is not None else None,
            ),
        ) from e

    logger.debug(
        "Loaded adapter configuration",
        extra={
            "config_path": str(path) if path is not None else None,
            "wait_for_services_timeout_ms": config.wait_for_services_timeout_ms,
        },
    )
    return config
