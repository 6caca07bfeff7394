#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Lookup of packs already installed next to a vvvv executable."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from provide.foundation import logger

from vpm.config.defaults import PACKS_DIR_NAME


def packs_dir_for(vvvv_exe: str | Path) -> Path:
    """Return the packs directory that sits beside vvvv.exe."""
    return Path(vvvv_exe).parent / PACKS_DIR_NAME


def installed_pack_names(packs_dir: str | Path) -> list[str]:
    """List the directory names under packs_dir; empty if it does not exist."""
    root = Path(packs_dir)
    if not root.is_dir():
        logger.debug("Packs directory missing", packs_dir=str(root))
        return []
    return sorted(entry.name for entry in root.iterdir() if entry.is_dir())


def is_alias_existing(name: str, packs_dir: str | Path) -> bool:
    """Check whether a pack directory called name exists, ignoring case."""
    wanted = name.casefold()
    return any(existing.casefold() == wanted for existing in installed_pack_names(packs_dir))


def find_existing_pack(name: str, aliases: Iterable[str], packs_dir: str | Path) -> str | None:
    """
    Find an installed pack by name or by any of its aliases.

    Args:
        name: Canonical pack name
        aliases: Alternative names the pack may be installed under
        packs_dir: Directory holding installed packs

    Returns:
        The name that matched (name first, then aliases in order), or None
    """
    if is_alias_existing(name, packs_dir):
        return name

    for alias in aliases:
        if is_alias_existing(alias, packs_dir):
            logger.debug("Pack found under alias", name=name, alias=alias)
            return alias

    return None


# 🌶️📦🔚
