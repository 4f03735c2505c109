"""
L3 Detection — Host platform and default locations.

Read-only checks: the ``platform`` module, environment variables and
the contents of the download directory.
"""

from __future__ import annotations

import logging
import os
import platform as _platform
import tempfile
from pathlib import Path

from mpm_installer.core.models.platform import Platform
from mpm_installer.core.services.mpm_install.data.platforms import (
    EXTRACT_DIRNAME,
    MPM_FILENAME,
    PlatformSpec,
)

logger = logging.getLogger(__name__)

_APPLE_SILICON_MACHINES = frozenset({"arm64", "aarch64"})


def detect_platform(system: str | None = None, machine: str | None = None) -> Platform | None:
    """Map the running OS/architecture to a Platform.

    Args:
        system: Override for ``platform.system()``.
        machine: Override for ``platform.machine()``.

    Returns:
        The Platform, or None when the OS is not one MPM ships for.
    """
    system = system if system is not None else _platform.system()
    machine = (machine if machine is not None else _platform.machine()).lower()

    if system == "Windows":
        detected = Platform.WINDOWS
    elif system == "Linux":
        detected = Platform.LINUX
    elif system == "Darwin":
        detected = (
            Platform.MACOS_ARM if machine in _APPLE_SILICON_MACHINES else Platform.MACOS_X64
        )
    else:
        logger.debug("Unrecognized operating system: %r", system)
        return None

    logger.debug("Detected platform %s (system=%s, machine=%s)", detected, system, machine)
    return detected


def default_download_dir(platform: Platform, environ: dict[str, str] | None = None) -> str:
    """Default answer for the download directory prompt.

    Windows uses ``%TMP%``; everything else uses ``/tmp``.
    """
    env = os.environ if environ is None else environ
    if platform == Platform.WINDOWS:
        return env.get("TMP") or tempfile.gettempdir()
    return "/tmp"


def find_existing_mpm(download_dir: Path, spec: PlatformSpec) -> dict[str, bool]:
    """Report what a previous run left in ``download_dir``.

    Returns::

        {"downloaded": True, "extracted": False}

    ``extracted`` is always True on platforms that need no extraction
    once the binary is present.
    """
    downloaded = (download_dir / MPM_FILENAME).is_file()
    if spec.needs_extraction:
        extracted = (download_dir / EXTRACT_DIRNAME).is_dir()
    else:
        extracted = downloaded
    return {"downloaded": downloaded, "extracted": extracted}
