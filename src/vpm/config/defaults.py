#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for vpm configuration."""

from __future__ import annotations

from pathlib import Path
import tempfile

# =================================
# Logging defaults
# =================================
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_SETUP_LOG_LEVEL = "WARNING"

# =================================
# Path defaults
# =================================
TEMP_DIR_NAME = "vpm"
DEFAULT_TEMP_DIR = str(Path(tempfile.gettempdir()) / TEMP_DIR_NAME)
PACKS_DIR_NAME = "packs"

# =================================
# Manifest defaults
# =================================
MANIFEST_DTD_RESOURCE = "vpack.dtd"
MANIFEST_ERROR_PREFIX = ".vpack validation error: "

# =================================
# Prompt defaults
# =================================
PROMPT_SUFFIX = " (Yay or Nay)"
CONTINUE_QUESTION = "Do you still want to continue?"

# 🌶️📦🔚
