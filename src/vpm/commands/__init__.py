#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the vpm CLI."""

from __future__ import annotations

from vpm.commands.arch import arch_command
from vpm.commands.clone import clone_command
from vpm.commands.files import clean_command, copy_command
from vpm.commands.manifest import validate_command
from vpm.commands.packs import check_command

__all__ = [
    "arch_command",
    "check_command",
    "clean_command",
    "clone_command",
    "copy_command",
    "validate_command",
]

# 🌶️📦🔚
