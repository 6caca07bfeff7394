#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for environment-driven vpm configuration."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from vpm.config import VpmRuntimeConfig, parse_log_level
from vpm.config.defaults import DEFAULT_LOG_LEVEL, DEFAULT_TEMP_DIR
from vpm.config.runtime import parse_optional_path


class TestParsers:
    """Test configuration value parsers."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("debug", "DEBUG"), (" Info ", "INFO"), ("TRACE", "TRACE"), ("warning", "WARNING")],
    )
    def test_parse_log_level(self, value: str, expected: str) -> None:
        """Test log level normalization."""
        assert parse_log_level(value) == expected

    def test_parse_log_level_invalid(self) -> None:
        """Test that unknown levels are rejected."""
        with pytest.raises(ValueError, match="Invalid log level"):
            parse_log_level("loud")

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(None, None), ("", None), ("  ", None), ("C:/vvvv/vvvv.exe", "C:/vvvv/vvvv.exe")],
    )
    def test_parse_optional_path(self, value: str | None, expected: str | None) -> None:
        """Test that blank paths count as unset."""
        assert parse_optional_path(value) == expected


class TestVpmRuntimeConfig:
    """Test VpmRuntimeConfig."""

    def test_defaults(self) -> None:
        """Test default values with a clean environment."""
        config = VpmRuntimeConfig.from_env()

        assert config.log_level == DEFAULT_LOG_LEVEL
        assert config.quiet is False
        assert config.temp_dir == DEFAULT_TEMP_DIR
        assert config.vvvv_exe is None

    @patch.dict(
        os.environ,
        {
            "VPM_LOG_LEVEL": "debug",
            "VPM_QUIET": "yes",
            "VPM_TEMP_DIR": "/tmp/vpm-test",
            "VPM_VVVV_EXE": "/opt/vvvv/vvvv.exe",
        },
    )
    def test_from_env(self) -> None:
        """Test every setting read from the environment."""
        config = VpmRuntimeConfig.from_env()

        assert config.log_level == "DEBUG"
        assert config.quiet is True
        assert config.temp_dir == "/tmp/vpm-test"
        assert config.vvvv_exe == "/opt/vvvv/vvvv.exe"

    @patch.dict(os.environ, {"VPM_QUIET": "off"})
    def test_quiet_false_from_env(self) -> None:
        """Test that falsey strings leave prompts enabled."""
        assert VpmRuntimeConfig.from_env().quiet is False

    def test_invalid_log_level(self) -> None:
        """Test that an invalid level fails construction."""
        with pytest.raises(ValueError):
            VpmRuntimeConfig(log_level="loud")


# 🌶️📦🔚
