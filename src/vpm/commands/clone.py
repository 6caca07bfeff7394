#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Clone command for the vpm CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from provide.foundation.console import perr, pout

from vpm.console import get_command_logger
from vpm.exceptions import CloneError

if TYPE_CHECKING:
    from vpm.clone import CloneProgress

# Get structured logger for this command
log = get_command_logger("clone")


def _transfer_suffix(event: CloneProgress) -> str:
    if event.bytes_received is not None:
        return f" ({event.bytes_received // 1024} kb)"
    if event.message:
        return f" ({event.message})"
    return ""


def render_clone_progress(event: CloneProgress) -> None:
    """Render clone progress on a single, rewritten console line."""
    if event.stage == "started":
        pout(f"Cloning: {event.repository}")
    elif event.stage == "completed":
        pout("")
        pout(f"Done: {event.repository}")
    elif event.stage == "receiving":
        total = event.total if event.total is not None else "?"
        pout(f"\rReceiving: {event.current} / {total}{_transfer_suffix(event)}", nl=False)
    elif event.stage == "checking_out":
        total = event.total if event.total is not None else "?"
        pout(f"\rChecking out: {event.current} / {total}", nl=False)


@click.command("clone")
@click.argument("repository")
@click.argument("destination", type=click.Path(file_okay=False, resolve_path=True))
@click.option("--submodules", is_flag=True, help="Clone submodules recursively")
@click.option("--branch", "-b", default="", help="Branch to check out")
def clone_command(repository: str, destination: str, submodules: bool, branch: str) -> None:
    """Clone a pack's git repository."""
    from vpm.clone import clone_repository

    log.debug("Clone command started", repository=repository, destination=destination, branch=branch)

    try:
        clone_repository(
            repository,
            destination,
            submodules=submodules,
            branch=branch or None,
            progress=render_clone_progress,
        )
    except CloneError as e:
        log.error("Clone failed", error=str(e), repository=repository)
        perr(f"❌ Clone failed: {e}")
        raise click.Abort() from e

    pout(f"✅ Cloned into '{destination}'")


# 🌶️📦🔚
