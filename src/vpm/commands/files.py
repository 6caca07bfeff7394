#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""File commands for the vpm CLI."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout

from vpm.config import VpmRuntimeConfig
from vpm.console import get_command_logger
from vpm.fileops import CopyProgress, cleanup, copy_directory
from vpm.prompts import prompt_yes_no

# Get structured logger for file commands
log = get_command_logger("files")


def _show_copy_progress(event: CopyProgress) -> None:
    label = "Copying" if event.kind == "file" else "Entering"
    pout(f"  {label} {event.source.name}", dim=True)


@click.command("copy")
@click.argument(
    "source",
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
)
@click.argument("destination", type=click.Path(file_okay=False, resolve_path=True))
@click.option("--match", "-m", multiple=True, help="Only copy entries matching this glob (repeatable)")
@click.option("--ignore", "-i", multiple=True, help="Skip entries matching this glob (repeatable)")
@click.option("--silent", "-s", is_flag=True, help="Do not list copied items")
def copy_command(
    source: str,
    destination: str,
    match: tuple[str, ...],
    ignore: tuple[str, ...],
    silent: bool,
) -> None:
    """Copy a directory tree, filtered by glob patterns."""
    log.debug("Copy command started", source=source, destination=destination, match=match, ignore=ignore)
    pout(f"📁 Copying '{source}' to '{destination}'...")

    counts = {"file": 0, "directory": 0}

    def on_progress(event: CopyProgress) -> None:
        counts[event.kind] += 1
        if not silent:
            _show_copy_progress(event)

    try:
        copy_directory(
            Path(source),
            Path(destination),
            ignore=list(ignore) or None,
            match=list(match) or None,
            progress=on_progress,
        )
    except (OSError, ValueError) as e:
        log.error("Copy failed", error=str(e), source=source)
        perr(f"❌ Copy failed: {e}")
        raise click.Abort() from e

    log.info("Copy completed", files=counts["file"], directories=counts["directory"])
    pout(f"✅ Copied {counts['file']} files in {counts['directory']} subdirectories")


@click.command("clean")
@click.option(
    "--yes",
    "-y",
    is_flag=True,
    help="Skip confirmation prompt",
)
@click.pass_context
def clean_command(ctx: click.Context, yes: bool) -> None:
    """Remove the vpm temporary directory."""
    config: VpmRuntimeConfig = ctx.obj["config"]
    temp_dir = Path(config.temp_dir)
    log.debug("Clean command started", temp_dir=str(temp_dir), yes=yes, quiet=config.quiet)

    if not temp_dir.exists():
        pout("Nothing to clean.")
        return

    if not (yes or config.quiet) and not prompt_yes_no(f"Remove '{temp_dir}'?"):
        pout("Aborted.")
        return

    cleanup(temp_dir)
    pout(f"✅ Removed '{temp_dir}'")


# 🌶️📦🔚
