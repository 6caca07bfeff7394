#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""vpm runtime configuration for CLI startup."""

from __future__ import annotations

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig
from provide.foundation.parsers import parse_bool_extended

from vpm.config.defaults import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_SETUP_LOG_LEVEL,
    DEFAULT_TEMP_DIR,
)

VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def parse_log_level(value: str) -> str:
    """Validate and normalize log levels."""
    normalized = value.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}")
    return normalized


def parse_optional_path(value: str | None) -> str | None:
    """Treat empty strings as unset."""
    if value is None:
        return None
    value = value.strip()
    return value or None


@define
class VpmRuntimeConfig(RuntimeConfig):
    """vpm runtime configuration for CLI startup.

    Resolved once by the CLI and handed to library calls explicitly.
    """

    log_level: str = field(
        default=DEFAULT_LOG_LEVEL,
        env_var="VPM_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for vpm operations (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)"},
    )

    setup_log_level: str = field(
        default=DEFAULT_SETUP_LOG_LEVEL,
        env_var="VPM_SETUP_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for Foundation setup messages during initialization"},
    )

    quiet: bool = field(
        default=False,
        env_var="VPM_QUIET",
        converter=parse_bool_extended,
        metadata={"help": "Skip confirmation prompts and assume yes"},
    )

    temp_dir: str = field(
        default=DEFAULT_TEMP_DIR,
        env_var="VPM_TEMP_DIR",
        metadata={"help": "Scratch directory removed by cleanup"},
    )

    vvvv_exe: str | None = field(
        default=None,
        env_var="VPM_VVVV_EXE",
        converter=parse_optional_path,
        metadata={"help": "Path to the vvvv.exe whose packs directory is the install target"},
    )


# 🌶️📦🔚
