#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Manifest validation command for the vpm CLI."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout

from vpm.console import get_command_logger
from vpm.exceptions import DtdLoadError
from vpm.manifest import manifest_aliases, validate_manifest

# Get structured logger for this command
log = get_command_logger("validate")


@click.command("validate")
@click.argument(
    "manifest_file",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
)
@click.option(
    "--dtd",
    "dtd_path",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    help="Validate against this DTD instead of the bundled one",
)
def validate_command(manifest_file: str, dtd_path: str | None) -> None:
    """Validate a .vpack manifest against its DTD."""
    log.debug("Validating manifest", manifest=manifest_file, dtd=dtd_path)
    try:
        result = validate_manifest(Path(manifest_file), dtd_path)
    except DtdLoadError as e:
        log.error("DTD could not be loaded", dtd=dtd_path, error=str(e))
        perr(f"❌ {e}")
        raise click.Abort() from e

    if not result.valid:
        log.error("Manifest validation failed", manifest=manifest_file, errors=len(result.errors))
        perr(f"❌ {Path(manifest_file).name} is not a valid .vpack manifest:")
        for error in result.errors:
            perr(f"   {error}")
        raise click.Abort()

    names = manifest_aliases(result.document)
    pout(f"✅ {Path(manifest_file).name} is valid")
    if names:
        pout(f"Pack: {names[0]}")
    if len(names) > 1:
        pout(f"Aliases: {', '.join(names[1:])}")


# 🌶️📦🔚
