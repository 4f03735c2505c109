"""
MPM Installer — CLI entrypoint.

Usage:
    python -m mpm_installer.main --help
    python -m mpm_installer.main install
    python -m mpm_installer.main catalog list --release R2023a
"""

from __future__ import annotations

import os
from pathlib import Path

import click

from mpm_installer import __version__
from mpm_installer.core.observability.logging_config import resolve_level, setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="mpm-installer")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to mpm-installer.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """MPM Installer — install MATLAB products through the MathWorks Package Manager."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get("MPM_LOG_FILE"),
        log_file_level=os.environ.get("MPM_LOG_FILE_LEVEL"),
    )
    if debug:
        click.secho("Debug mode enabled.", bg="blue", err=True)


# ── Register sub-commands from mpm_installer/ui/cli/ ─────────────

from mpm_installer.ui.cli.catalog import catalog  # noqa: E402
from mpm_installer.ui.cli.install import install  # noqa: E402

cli.add_command(install)
cli.add_command(catalog)


if __name__ == "__main__":
    cli()
