#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""vifsign command-line interface entrypoint."""

from __future__ import annotations

import os
from pathlib import Path
import sys

from attrs import evolve
import click
from provide.foundation import CLIContext, TelemetryConfig, get_hub
from provide.foundation.console import perr, pout
from provide.foundation.utils import get_version

from vifsign.config import VifRuntimeConfig
from vifsign.config.defaults import EXIT_OK
from vifsign.console import get_command_logger, wait_for_key
from vifsign.exceptions import VifSignError
from vifsign.pipeline import prepare_vif

# Set up Windows Unicode support early
if sys.platform == "win32" and not os.environ.get("PYTHONIOENCODING"):
    os.environ["PYTHONIOENCODING"] = "utf-8"

__version__ = get_version("vifsign", caller_file=__file__)

log = get_command_logger("sign")


def _init_foundation(runtime_config: VifRuntimeConfig) -> CLIContext:
    """Initialize Foundation logging with vifsign's settings merged in."""
    cli_ctx = CLIContext.from_env()
    base_telemetry = TelemetryConfig.from_env()
    telemetry_config = evolve(
        base_telemetry,
        service_name="vifsign",
        logging=evolve(
            base_telemetry.logging,
            default_level=runtime_config.log_level,  # type: ignore[arg-type]
        ),
    )
    get_hub().initialize_foundation(telemetry_config)
    return cli_ctx


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="vifsign",
    message="%(prog)s version %(version)s",
)
@click.argument("vif_file", type=click.Path(path_type=Path))
@click.argument("private_key", type=click.Path(path_type=Path))
@click.option(
    "--pause/--no-pause",
    default=None,
    help="Wait for a key press before exiting (default: VIFSIGN_PAUSE or off).",
)
@click.option(
    "--work-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Root directory for the per-run staging directory (default: VIFSIGN_WORK_DIR or system temp).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    vif_file: Path,
    private_key: Path,
    pause: bool | None,
    work_dir: Path | None,
) -> None:
    """Sign a plugin Version Information File and gzip it for distribution.

    VIF_FILE is the Version Information File to sign. PRIVATE_KEY is the RSA
    private key, as .NET RSAKeyValue XML, PEM or DER. The result is written
    next to VIF_FILE with a .gz suffix; an existing file is never overwritten.

    Configure via environment variables:
    - VIFSIGN_LOG_LEVEL: Log level (trace, debug, info, warning, error)
    - VIFSIGN_WORK_DIR: Root for staging directories
    - VIFSIGN_PAUSE: Wait for a key press before exiting (1/0)
    """
    runtime_config = VifRuntimeConfig.from_env()
    ctx.ensure_object(dict)
    ctx.obj["cli_context"] = _init_foundation(runtime_config)

    should_pause = runtime_config.pause if pause is None else pause
    work_root = work_dir if work_dir is not None else runtime_config.work_root()

    log.debug(
        "Starting VIF preparation",
        vif=str(vif_file),
        private_key=str(private_key),
        work_root=str(work_root) if work_root else None,
    )

    exit_code = EXIT_OK
    try:
        result = prepare_vif(vif_file, private_key, work_root=work_root, progress=pout)
        pout(f"✅ Operation complete. The prepared VIF can be found at '{result.output_path}'.")
    except VifSignError as e:
        log.error("VIF preparation failed", error=str(e), error_type=type(e).__name__, vif=str(vif_file))
        perr(f"❌ {e}")
        exit_code = e.exit_code

    if should_pause:
        wait_for_key()
    ctx.exit(exit_code)


main = cli

if __name__ == "__main__":
    cli()

# 🔏📦🔚
