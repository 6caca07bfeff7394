#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Architecture detection command for the vpm CLI."""

from __future__ import annotations

from typing import Any

import click
from provide.foundation.console import perr, pout
from provide.foundation.serialization import json_dumps

from vpm.console import get_command_logger
from vpm.exceptions import MalformedHeaderError
from vpm.machine import get_machine_type

# Get structured logger for this command
log = get_command_logger("arch")


def _describe(path: str) -> dict[str, Any]:
    """Sniff one file and return a result record."""
    try:
        machine = get_machine_type(path)
    except (OSError, MalformedHeaderError) as e:
        log.warning("Could not read machine type", file=path, error=str(e))
        return {"file": path, "success": False, "error": str(e)}

    return {
        "file": path,
        "success": True,
        "machine": machine.label,
        "code": f"0x{int(machine):04x}",
        "known": machine.is_known,
    }


def _format_machine(result: dict[str, Any]) -> str:
    # Unknown labels already carry the code
    if result["known"]:
        return f"{result['machine']} ({result['code']})"
    return str(result["machine"])


@click.command("arch")
@click.argument("files", nargs=-1, required=True, type=click.Path(dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Output results as JSON")
@click.pass_context
def arch_command(ctx: click.Context, files: tuple[str, ...], as_json: bool) -> None:
    """Show the target CPU architecture of native executables."""
    log.debug("Arch command started", files=len(files), json=as_json)
    results = [_describe(path) for path in files]

    if as_json:
        pout(json_dumps(results, indent=2))
    else:
        for result in results:
            if result["success"]:
                pout(f"{result['file']}: {_format_machine(result)}")
            else:
                perr(f"❌ {result['file']}: {result['error']}")

    if not all(r["success"] for r in results):
        ctx.exit(1)


# 🌶️📦🔚
