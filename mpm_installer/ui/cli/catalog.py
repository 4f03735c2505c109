"""
CLI commands for the product catalog.

Thin wrappers over ``mpm_installer.core.services.mpm_install.resolver``.
"""

from __future__ import annotations

import json
import sys

import click

from mpm_installer.core.models.platform import Platform
from mpm_installer.core.models.release import Release
from mpm_installer.core.services.mpm_install.data.platforms import PLATFORM_SPECS, PlatformSpec


def _resolve_platform(platform_name: str | None) -> PlatformSpec:
    """Spec for the named platform, or for the running system."""
    from mpm_installer.core.services.mpm_install.detection.host import detect_platform

    platform = Platform(platform_name) if platform_name else detect_platform()
    if platform is None:
        click.secho("❌ Unrecognized operating system; pass --platform.", fg="red")
        sys.exit(1)
    return PLATFORM_SPECS[platform]


def _resolve_release(spec: PlatformSpec, label: str | None) -> Release:
    """Parse ``--release`` (default: newest supported), exiting on bad input."""
    from mpm_installer.core.services.mpm_install.resolver.release_selection import choose_release

    chosen = choose_release(label or "", spec)
    if not chosen["ok"]:
        click.secho(f"❌ {chosen['error']}", fg="red")
        sys.exit(1)
    return chosen["release"]


_platform_option = click.option(
    "--platform",
    "platform_name",
    type=click.Choice([p.value for p in Platform]),
    default=None,
    help="Target platform (default: detect the running system).",
)
_release_option = click.option(
    "--release", "release_label", default=None, help="Release, e.g. R2023a (default: newest).",
)
_json_option = click.option(
    "--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.",
)


@click.group()
def catalog() -> None:
    """Catalog — installable products per platform and release."""


@catalog.command("list")
@_platform_option
@_release_option
@_json_option
def list_products(platform_name: str | None, release_label: str | None, as_json: bool) -> None:
    """List the products MPM can install for a release."""
    from mpm_installer.core.services.mpm_install.resolver.catalog_resolution import (
        resolve_platform_catalog,
    )

    spec = _resolve_platform(platform_name)
    release = _resolve_release(spec, release_label)
    products = sorted(resolve_platform_catalog(spec.platform, release))

    if as_json:
        click.echo(json.dumps({
            "platform": str(spec.platform),
            "release": release.label,
            "count": len(products),
            "products": products,
        }, indent=2))
        return

    click.secho(
        f"📦 {release} on {spec.platform.display_name}: {len(products)} products",
        fg="cyan", bold=True,
    )
    for product in products:
        click.echo(f"   • {product}")


@catalog.command("releases")
@_platform_option
@_json_option
def releases(platform_name: str | None, as_json: bool) -> None:
    """List the releases MPM can install on a platform."""
    spec = _resolve_platform(platform_name)
    labels = [r.label for r in spec.supported_releases()]

    if as_json:
        click.echo(json.dumps({"platform": str(spec.platform), "releases": labels}, indent=2))
        return

    click.secho(f"📅 Releases for {spec.platform.display_name}:", fg="cyan", bold=True)
    for label in labels:
        click.echo(f"   • {label}")


@catalog.command("check")
@_json_option
def check(as_json: bool) -> None:
    """Verify every platform has a well-formed, non-empty catalog."""
    from mpm_installer.core.services.mpm_install.resolver.catalog_schema import check_catalogs

    errors = check_catalogs()

    if as_json:
        click.echo(json.dumps({"valid": not errors, "errors": errors}, indent=2))
        sys.exit(1 if errors else 0)

    if not errors:
        click.secho("✅ All product catalogs are valid", fg="green", bold=True)
        return

    click.secho("❌ Catalog errors:", fg="red", bold=True)
    for platform, errs in sorted(errors.items()):
        for err in errs:
            click.echo(f"   • {platform}: {err}")
    sys.exit(1)


@catalog.command("validate")
@click.argument("products", nargs=-1, required=True)
@_platform_option
@_release_option
@_json_option
def validate(
    products: tuple[str, ...],
    platform_name: str | None,
    release_label: str | None,
    as_json: bool,
) -> None:
    """Check a product selection against the catalog.

    Examples:

        mpm-installer catalog validate MATLAB Simulink --release R2020a

        mpm-installer catalog validate parallel_products --platform linux
    """
    from mpm_installer.core.services.mpm_install.domain.selection import (
        expand_shorthands,
        validate_selection,
    )
    from mpm_installer.core.services.mpm_install.resolver.catalog_resolution import (
        resolve_platform_catalog,
    )

    spec = _resolve_platform(platform_name)
    release = _resolve_release(spec, release_label)
    expanded = expand_shorthands(products)
    missing = sorted(validate_selection(expanded, resolve_platform_catalog(spec.platform, release)))

    if as_json:
        click.echo(json.dumps({
            "platform": str(spec.platform),
            "release": release.label,
            "products": expanded,
            "missing": missing,
            "valid": not missing,
        }, indent=2))
        sys.exit(1 if missing else 0)

    if missing:
        click.secho(f"❌ Not available in {release}:", fg="red", bold=True)
        for product in missing:
            click.echo(f"   • {product}")
        sys.exit(1)

    click.secho(f"✅ {len(expanded)} products available in {release}", fg="green")
