#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""vpm command-line interface entrypoint."""

from __future__ import annotations

import os
import sys

from attrs import evolve
import click
from provide.foundation import CLIContext, TelemetryConfig, get_hub
from provide.foundation.utils import get_version

# Import all commands at module level
from vpm.commands.arch import arch_command
from vpm.commands.clone import clone_command
from vpm.commands.files import clean_command, copy_command
from vpm.commands.manifest import validate_command
from vpm.commands.packs import check_command
from vpm.config import VpmRuntimeConfig

# Set up Windows Unicode support early
if sys.platform == "win32":
    # Ensure UTF-8 encoding for Windows console
    if not os.environ.get("PYTHONIOENCODING"):
        os.environ["PYTHONIOENCODING"] = "utf-8"
    if not os.environ.get("PYTHONUTF8"):
        os.environ["PYTHONUTF8"] = "1"

__version__ = get_version("vpm", caller_file=__file__)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="vpm",
    message="%(prog)s version %(version)s",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Assume yes for every confirmation (also VPM_QUIET)",
)
@click.pass_context
def cli(ctx: click.Context, quiet: bool) -> None:
    """vvvv pack manager utilities.

    Configure via environment variables:
    - VPM_LOG_LEVEL: Set log level for vpm (trace, debug, info, warning, error)
    - VPM_SETUP_LOG_LEVEL: Control Foundation's initialization logs
    - VPM_QUIET: Skip confirmation prompts
    - VPM_TEMP_DIR: Scratch directory removed by `vpm clean`
    - VPM_VVVV_EXE: vvvv.exe whose packs directory is the install target
    """
    ctx.ensure_object(dict)

    # Load vpm configuration from environment
    vpm_config = VpmRuntimeConfig.from_env()
    if quiet:
        vpm_config = evolve(vpm_config, quiet=True)

    # Initialize Foundation with proper configuration
    cli_ctx = CLIContext.from_env()

    # Get base telemetry config from environment
    base_telemetry = TelemetryConfig.from_env()

    # Merge with vpm-specific settings
    telemetry_config = evolve(
        base_telemetry,
        service_name="vpm",
        logging=evolve(
            base_telemetry.logging,
            default_level=vpm_config.log_level,  # type: ignore[arg-type]
            foundation_setup_log_level=vpm_config.setup_log_level,  # type: ignore[arg-type]
        ),
    )

    # Any earlier log call auto-initializes Foundation; without force the
    # explicit config is only stored and its log level is never applied
    hub = get_hub()
    hub.initialize_foundation(telemetry_config, force=True)

    ctx.obj["config"] = vpm_config
    ctx.obj["cli_context"] = cli_ctx
    ctx.obj["log"] = cli_ctx.logger


cli.add_command(arch_command, name="arch")
cli.add_command(validate_command, name="validate")
cli.add_command(copy_command, name="copy")
cli.add_command(clone_command, name="clone")
cli.add_command(check_command, name="check")
cli.add_command(clean_command, name="clean")

main = cli

if __name__ == "__main__":
    cli()

# 🌶️📦🔚
