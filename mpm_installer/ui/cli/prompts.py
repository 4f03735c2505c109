"""
Interactive prompts for the install session.

Each prompt loops until it gets a usable answer.  Validation lives in
the mpm_install service; these functions only ask, report problems in
red, and ask again.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Collection
from pathlib import Path

import click

from mpm_installer.core.models.release import Release
from mpm_installer.core.services.mpm_install.data.platforms import PlatformSpec
from mpm_installer.core.services.mpm_install.domain.selection import (
    expand_shorthands,
    shorthands_touching,
    split_products,
    validate_selection,
)
from mpm_installer.core.services.mpm_install.execution.license_copy import (
    check_license_file,
)
from mpm_installer.core.services.mpm_install.resolver.release_selection import (
    choose_release,
    default_release,
)

logger = logging.getLogger(__name__)

_EXIT_WORDS = frozenset({"exit", "quit"})
_ALL_PRODUCTS = "all"


def ask(text: str, default: str = "") -> str:
    """Prompt on its own line with a ``> `` cursor and return the trimmed answer."""
    return click.prompt(
        text, default=default, show_default=False, prompt_suffix="\n> ",
    ).strip()


def ask_yes_no(text: str) -> bool:
    """Ask until the answer is ``y`` or ``n``."""
    while True:
        reply = ask(text).lower()
        if reply == "y":
            return True
        if reply == "n":
            return False
        click.secho("Invalid choice. Please enter either 'y' or 'n'.", fg="red")


def prompt_download_dir(default: str) -> Path:
    """Ask where MPM should be downloaded, creating the directory on request."""
    while True:
        answer = ask(
            "Enter the path to the directory where you would like MPM to download to. "
            f'Press Enter to use "{default}"'
        ) or default
        path = Path(answer).expanduser()
        logger.debug("Download directory answer: %s", path)

        if path.is_dir():
            return path

        if path.exists():
            click.secho(f'"{path}" is not a directory. Please select a different directory.', fg="red")
            continue

        reply = ask(f'The directory "{path}" does not exist. Do you want to create it? (y/n)')
        if reply.lower() in _EXIT_WORDS:
            sys.exit(0)
        if reply.lower() != "y":
            click.echo("Directory creation skipped. Please select a different directory.")
            continue

        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            click.secho(
                f"Failed to create the directory: {exc} Please select a different directory.",
                fg="red",
            )
            continue
        click.echo("Directory created successfully.")
        return path


def prompt_overwrite_mpm() -> bool:
    """Ask whether an MPM already in the download directory should be replaced."""
    click.echo("MPM already exists in this directory. Would you like to overwrite it? ", nl=False)
    return ask_yes_no(click.style(
        'This will also overwrite the directory "mpm-contents" and its contents '
        "if it already exists. (y/n)",
        fg="red",
    ))


def prompt_release(spec: PlatformSpec, preferred: str | None = None) -> Release:
    """Ask which release to install.

    Args:
        spec: Target platform; bounds the accepted releases.
        preferred: Configured default label, used on an empty answer.
    """
    default_label = preferred or default_release(spec).label
    while True:
        answer = ask(
            f"Enter which release you would like to install. Press Enter to select {default_label}:"
        ) or default_label
        chosen = choose_release(answer, spec)
        if chosen["ok"]:
            logger.debug("Selected release: %s", chosen["release"])
            return chosen["release"]
        click.secho(chosen["error"], fg="red")


def prompt_products(
    catalog: Collection[str],
    release: Release,
    *,
    preferred: list[str] | None = None,
    allow_unlisted: bool = False,
) -> list[str]:
    """Ask which products to install.

    An empty answer selects ``preferred`` when configured, otherwise
    the whole catalog.  ``all`` always selects the whole catalog.  A
    rejected ``preferred`` selection is dropped, so the next empty
    answer falls back to the whole catalog.

    Args:
        catalog: Resolved catalog for the platform and release.
        release: Selected release, for messages.
        preferred: Configured default product tokens.
        allow_unlisted: Accept products missing from the catalog
            instead of asking again.
    """
    preferred = list(preferred or [])
    while True:
        if preferred:
            hint = (
                f'Press Enter to use "{" ".join(preferred)}", '
                f'or enter "{_ALL_PRODUCTS}" to install all products.'
            )
        else:
            hint = "Press Enter to install all products."
        answer = ask(
            "Enter the products you would like to install. "
            "Use the same syntax as MPM to specify products. " + hint
        )
        if answer.lower() == _ALL_PRODUCTS:
            return sorted(catalog)

        tokens = split_products(answer) if answer else preferred
        if not tokens:
            return sorted(catalog)

        products = expand_shorthands(tokens)
        missing = validate_selection(products, catalog)
        if not missing:
            return products

        listed = " ".join(sorted(missing))
        if allow_unlisted:
            logger.warning("Passing products not listed for %s to MPM: %s", release, listed)
            return products

        click.secho(f"These products are not available in {release}: {listed}", fg="red")
        for shorthand in shorthands_touching(tokens, missing):
            click.secho(
                f'"{shorthand}" includes products that do not exist in {release}.',
                fg="red",
            )
        if not answer and preferred:
            preferred = []
            click.echo("Press Enter to install all products, or enter a different selection.")
            continue
        click.echo("Please enter a different selection.")


def prompt_install_path(default: str) -> str:
    """Ask where to install the products."""
    answer = ask(
        "Enter the full path where you would like to install these products. "
        f'Press Enter to install to default path: "{default}"'
    ) or default
    logger.debug("Installation path: %s", answer)
    return answer


def prompt_license_file(preferred: str | None = None) -> Path | None:
    """Ask for an optional license file (``.dat`` or ``.lic``)."""
    hint = f' Press Enter to use "{preferred}".' if preferred else " Press Enter to skip."
    while True:
        answer = ask(
            "If you have a license file you'd like to include in your installation, "
            "please provide the full path to the existing license file." + hint
        ) or (preferred or "")
        if not answer:
            return None

        error = check_license_file(answer)
        if error:
            click.secho(error, fg="red")
            continue
        return Path(answer).expanduser()
