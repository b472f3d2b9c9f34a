# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for configure_logging()."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from omnibase_rpc.runtime import configure_logging


class TestConfigureLogging:
    """Tests for environment-driven logging setup."""

    @pytest.mark.parametrize(
        ("env_value", "expected"),
        [
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("ERROR", logging.ERROR),
        ],
    )
    def test_level_from_environment(self, env_value: str, expected: int) -> None:
        with (
            patch.dict("os.environ", {"ONEX_LOG_LEVEL": env_value}),
            patch("logging.basicConfig") as basic_config,
        ):
            configure_logging()

        assert basic_config.call_args.kwargs["level"] == expected

    def test_defaults_to_info(self) -> None:
        with (
            patch.dict("os.environ", {}, clear=True),
            patch("logging.basicConfig") as basic_config,
        ):
            configure_logging()

        assert basic_config.call_args.kwargs["level"] == logging.INFO

    def test_invalid_level_warns_and_uses_info(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with (
            patch.dict("os.environ", {"ONEX_LOG_LEVEL": "LOUD"}),
            patch("logging.basicConfig") as basic_config,
        ):
            configure_logging()

        assert basic_config.call_args.kwargs["level"] == logging.INFO
        assert "Invalid ONEX_LOG_LEVEL 'LOUD'" in capsys.readouterr().err
