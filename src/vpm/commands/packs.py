#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Installed-pack check command for the vpm CLI."""

from __future__ import annotations

import click
from provide.foundation.console import perr, pout

from vpm.config import VpmRuntimeConfig
from vpm.console import get_command_logger
from vpm.exceptions import InstallationCancelled, ManifestValidationError
from vpm.manifest import load_manifest, manifest_aliases
from vpm.packs import find_existing_pack, packs_dir_for
from vpm.prompts import confirm_continue

# Get structured logger for this command
log = get_command_logger("check")


def _names_from_manifest(manifest_file: str) -> list[str]:
    try:
        document = load_manifest(manifest_file)
    except ManifestValidationError as e:
        log.error("Manifest validation failed", manifest=manifest_file, error=str(e))
        perr(f"❌ {e}")
        raise click.Abort() from e
    return manifest_aliases(document)


@click.command("check")
@click.argument("name", required=False)
@click.option("--alias", "-a", "aliases", multiple=True, help="Alternative pack name (repeatable)")
@click.option(
    "--manifest",
    "manifest_file",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    help="Take the pack name and aliases from a .vpack manifest",
)
@click.option(
    "--vvvv-exe",
    type=click.Path(dir_okay=False),
    help="vvvv.exe whose packs directory is searched (default: VPM_VVVV_EXE)",
)
@click.pass_context
def check_command(
    ctx: click.Context,
    name: str | None,
    aliases: tuple[str, ...],
    manifest_file: str | None,
    vvvv_exe: str | None,
) -> None:
    """Check whether a pack is already installed before installing it.

    When it is, asks whether to continue anyway (skipped with --quiet).
    """
    config: VpmRuntimeConfig = ctx.obj["config"]

    names = list(aliases)
    if manifest_file:
        names.extend(_names_from_manifest(manifest_file))
    if name:
        names.insert(0, name)
    if not names:
        raise click.UsageError("Give a pack NAME or --manifest")

    exe = vvvv_exe or config.vvvv_exe
    if not exe:
        raise click.UsageError("No vvvv.exe given; use --vvvv-exe or set VPM_VVVV_EXE")

    packs_dir = packs_dir_for(exe)
    log.debug("Checking installed packs", names=names, packs_dir=str(packs_dir))

    matched = find_existing_pack(names[0], names[1:], packs_dir)
    if matched is None:
        pout(f"✅ {names[0]} is not installed in '{packs_dir}'")
        return

    if matched == names[0]:
        pout(f"⚠️  {names[0]} is already installed in '{packs_dir}'")
    else:
        pout(f"⚠️  {names[0]} is already installed as '{matched}' in '{packs_dir}'")

    try:
        confirm_continue(config.quiet, config.temp_dir)
    except InstallationCancelled:
        pout("Aborted.")
        return

    pout("Continuing.")


# 🌶️📦🔚
