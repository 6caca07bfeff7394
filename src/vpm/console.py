#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Console helpers shared by CLI commands."""

from __future__ import annotations

from typing import Any

from provide.foundation.logger import get_logger


class CommandLogger:
    """Structured logger for a CLI command, looked up again on every call.

    Command modules create these at import time, before the CLI group has
    configured Foundation. Binding a logger that early would freeze the
    auto-initialized log level into it.
    """

    def __init__(self, name: str) -> None:
        self.name = name

    def __getattr__(self, method: str) -> Any:
        return getattr(get_logger(self.name), method)


def get_command_logger(command: str) -> CommandLogger:
    """Return a structured logger named after a CLI command."""
    return CommandLogger(f"vpm.commands.{command}")


# 🌶️📦🔚
