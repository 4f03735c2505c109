"""
CLI command for the interactive install session.

Thin wrapper: prompts come from ``prompts``, all work is done by
``mpm_installer.core.services.mpm_install``.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from mpm_installer.core.models.platform import Platform
from mpm_installer.core.models.settings import InstallerSettings
from mpm_installer.core.services.mpm_install.data.platforms import PLATFORM_SPECS, PlatformSpec
from mpm_installer.core.services.mpm_install.detection.host import (
    default_download_dir,
    detect_platform,
    find_existing_mpm,
)
from mpm_installer.core.services.mpm_install.orchestration.orchestrator import (
    InstallPlan,
    install_products,
    mpm_binary_path,
    prepare_mpm,
)
from mpm_installer.core.services.mpm_install.resolver.catalog_resolution import (
    resolve_platform_catalog,
)
from mpm_installer.ui.cli import prompts
from mpm_installer.ui.cli.signals import handle_interrupts, say_goodbye

logger = logging.getLogger(__name__)


def _load_settings(ctx: click.Context) -> InstallerSettings:
    """Load mpm-installer.yml, exiting with a red error if it is invalid."""
    from mpm_installer.core.config.loader import ConfigError, load_settings

    try:
        return load_settings(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)


def _acquire_mpm(spec: PlatformSpec, settings: InstallerSettings, *, dry_run: bool) -> Path:
    """Prompt for a download directory until MPM is ready to run there."""
    default_dir = settings.download_dir or default_download_dir(spec.platform)

    while True:
        download_dir = prompts.prompt_download_dir(default_dir)

        if dry_run:
            click.secho("[dry-run] Skipping MPM download.", fg="yellow")
            return mpm_binary_path(download_dir, spec)

        download, extract = True, True
        existing = find_existing_mpm(download_dir, spec)
        if existing["downloaded"] and not prompts.prompt_overwrite_mpm():
            click.echo("Skipping download.")
            download = False
            if existing["extracted"]:
                extract = False
                if spec.needs_extraction:
                    click.echo("Skipping extraction.")

        if download:
            click.echo("Beginning download of MPM. Please wait.")
        result = prepare_mpm(
            download_dir,
            spec,
            base_url=settings.mpm_base_url,
            timeout=settings.download_timeout,
            download=download,
            extract=extract,
        )
        if not result["ok"]:
            click.secho(f"Failed to prepare MPM ({result['stage']}): {result['error']}", fg="red")
            if result["stage"] == "chmod":
                click.echo(
                    "Either select a different directory, run this program with needed "
                    "privileges, or make modifications to MPM outside of this program."
                )
            continue

        if result["downloaded"]:
            click.echo("MPM downloaded successfully.")
        if result["extracted"]:
            click.echo("MPM extracted successfully.")
        return Path(result["mpm_path"])


@click.command("install")
@click.option(
    "--platform",
    "platform_name",
    type=click.Choice([p.value for p in Platform]),
    default=None,
    help="Target platform (default: detect the running system).",
)
@click.option("--dry-run", is_flag=True, help="Show the MPM command without downloading or running it.")
@click.option(
    "--allow-unlisted",
    is_flag=True,
    help="Pass explicitly named products to MPM even if the catalog does not list them.",
)
@click.pass_context
def install(ctx: click.Context, platform_name: str | None, dry_run: bool, allow_unlisted: bool) -> None:
    """Download MPM and install MATLAB products interactively."""
    settings = _load_settings(ctx)

    platform = Platform(platform_name) if platform_name else detect_platform()
    if platform is None:
        click.secho("Your operating system is unrecognized. Exiting.", fg="red")
        sys.exit(1)
    spec = PLATFORM_SPECS[platform]
    logger.debug("Platform: %s, MPM URL: %s", platform, spec.mpm_url(settings.mpm_base_url))

    if platform.is_macos:
        click.secho(
            "MPM currently requires gatekeeper to be disabled on macOS. "
            "Please disable it before running this program, if you haven't already.",
            bg="red",
        )

    with handle_interrupts():
        try:
            plan = _plan_session(spec, settings, dry_run=dry_run, allow_unlisted=allow_unlisted)
            logger.debug("Install plan: %s", plan.to_dict())
            result = install_products(plan, dry_run=dry_run)
        except (click.Abort, KeyboardInterrupt):
            say_goodbye()
            sys.exit(0)

    if result["dry_run"]:
        click.secho("\n⚡ [dry-run] MPM command:", fg="cyan", bold=True)
        click.echo("   " + " ".join(result["command"]))
        if plan.license_file:
            click.echo(f"   License: {plan.license_file} → {plan.install_path}/licenses/")
        return

    license_result = result["license"]
    if license_result and not license_result["ok"]:
        click.secho(license_result["error"], fg="red")

    if not result["ok"]:
        click.secho(
            "Error executing MPM. See the error above for more information. "
            f"({result['mpm']['error']})",
            fg="red",
        )
        sys.exit(1)

    click.secho(f"✅ {plan.release} installed to {plan.install_path}", fg="green", bold=True)


def _plan_session(
    spec: PlatformSpec,
    settings: InstallerSettings,
    *,
    dry_run: bool,
    allow_unlisted: bool,
) -> InstallPlan:
    """Walk the user through every prompt and return the resulting plan."""
    mpm_path = _acquire_mpm(spec, settings, dry_run=dry_run)
    logger.debug("MPM path: %s", mpm_path)

    release = prompts.prompt_release(spec, settings.release)
    catalog = resolve_platform_catalog(spec.platform, release)

    products = prompts.prompt_products(
        catalog,
        release,
        preferred=settings.products,
        allow_unlisted=allow_unlisted or settings.allow_unlisted_products,
    )
    logger.debug("Products to install: %s", products)

    install_path = prompts.prompt_install_path(
        settings.install_path or spec.default_install_path(release),
    )
    license_file = prompts.prompt_license_file(settings.license_file)

    return InstallPlan(
        platform=spec.platform,
        release=release,
        mpm_path=mpm_path,
        install_path=install_path,
        products=products,
        license_file=license_file,
    )
