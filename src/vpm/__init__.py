#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""vpm support library: executable sniffing, pack files, manifests and prompts."""

from __future__ import annotations

from provide.foundation.utils import get_version

from vpm.exceptions import (
    CloneError,
    DtdLoadError,
    InstallationCancelled,
    MalformedHeaderError,
    ManifestValidationError,
    VpmError,
)
from vpm.fileops import CopyProgress, cleanup, copy_directory
from vpm.machine import MachineType, get_machine_type, machine_type_from_bytes
from vpm.manifest import ManifestValidation, load_manifest, manifest_aliases, validate_manifest
from vpm.packs import find_existing_pack, installed_pack_names, is_alias_existing, packs_dir_for
from vpm.prompts import confirm_continue, interpret_answer, prompt_yes_no

__version__ = get_version("vpm", caller_file=__file__)

__all__ = [
    "CloneError",
    "CopyProgress",
    "DtdLoadError",
    "InstallationCancelled",
    "MachineType",
    "MalformedHeaderError",
    "ManifestValidation",
    "ManifestValidationError",
    "VpmError",
    "__version__",
    "cleanup",
    "confirm_continue",
    "copy_directory",
    "find_existing_pack",
    "get_machine_type",
    "installed_pack_names",
    "interpret_answer",
    "is_alias_existing",
    "load_manifest",
    "machine_type_from_bytes",
    "manifest_aliases",
    "packs_dir_for",
    "prompt_yes_no",
    "validate_manifest",
]

# 🌶️📦🔚
