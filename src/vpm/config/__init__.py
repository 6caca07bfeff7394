#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""vpm configuration built on the Provide Foundation config stack."""

from __future__ import annotations

from vpm.config.runtime import VpmRuntimeConfig, parse_log_level

__all__ = [
    "VpmRuntimeConfig",
    "parse_log_level",
]

# 🌶️📦🔚
