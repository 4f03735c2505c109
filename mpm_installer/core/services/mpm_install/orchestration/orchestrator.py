"""
L5 Orchestration — Top-level coordinators.

Tie the layers together: fetch and unpack MPM, then run the
installation and place the license.  Each coordinator returns a
result dict; none of them prompts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from mpm_installer.core.models.platform import Platform
from mpm_installer.core.models.release import Release
from mpm_installer.core.services.mpm_install.data.platforms import (
    EXTRACT_DIRNAME,
    MPM_FILENAME,
    PlatformSpec,
)
from mpm_installer.core.services.mpm_install.execution.archive import (
    _extract_zip,
    _make_executable,
)
from mpm_installer.core.services.mpm_install.execution.download import _download_file
from mpm_installer.core.services.mpm_install.execution.license_copy import copy_license
from mpm_installer.core.services.mpm_install.execution.mpm_runner import (
    build_install_command,
    run_mpm,
)

logger = logging.getLogger(__name__)


@dataclass
class InstallPlan:
    """Everything the user chose, ready to hand to MPM."""

    platform: Platform
    release: Release
    mpm_path: Path
    install_path: str
    products: list[str] = field(default_factory=list)
    license_file: Path | None = None

    def command(self) -> list[str]:
        return build_install_command(
            self.mpm_path, self.release, self.install_path, self.products,
        )

    def to_dict(self) -> dict:
        return {
            "platform": str(self.platform),
            "release": self.release.label,
            "mpm_path": str(self.mpm_path),
            "install_path": self.install_path,
            "products": self.products,
            "license_file": str(self.license_file) if self.license_file else None,
            "command": self.command(),
        }


def mpm_binary_path(download_dir: Path, spec: PlatformSpec) -> Path:
    """Location of the runnable MPM inside ``download_dir``."""
    return download_dir.joinpath(*spec.binary_relpath)


def prepare_mpm(
    download_dir: Path,
    spec: PlatformSpec,
    *,
    base_url: str,
    timeout: int = 60,
    download: bool = True,
    extract: bool = True,
) -> dict[str, Any]:
    """Download, unpack and make MPM runnable in ``download_dir``.

    Args:
        download_dir: Existing directory to put MPM in.
        spec: Target platform spec.
        base_url: MPM download root, e.g. ``https://www.mathworks.com/mpm``.
        timeout: Download socket timeout in seconds.
        download: False to reuse an ``mpm`` already in the directory.
        extract: False to reuse an existing ``mpm-contents`` directory.
            Ignored where MPM is not an archive.

    Returns:
        ``{"ok": True, "mpm_path": "...", "downloaded": bool,
        "extracted": bool}`` or ``{"ok": False, "stage": "...",
        "error": "..."}``.
    """
    archive = download_dir / MPM_FILENAME
    result: dict[str, Any] = {"downloaded": False, "extracted": False}

    if download:
        url = spec.mpm_url(base_url)
        logger.debug("MPM URL: %s", url)
        fetched = _download_file(url, archive, timeout=timeout)
        if not fetched["ok"]:
            return {"ok": False, "stage": "download", "error": fetched["error"]}
        result["downloaded"] = True

    if spec.needs_extraction and extract:
        unpacked = _extract_zip(archive, download_dir / EXTRACT_DIRNAME)
        if not unpacked["ok"]:
            return {"ok": False, "stage": "extract", "error": unpacked["error"]}
        result["extracted"] = True

    mpm_path = mpm_binary_path(download_dir, spec)

    if not spec.needs_extraction:
        chmod = _make_executable(mpm_path)
        if not chmod["ok"]:
            return {"ok": False, "stage": "chmod", "error": chmod["error"]}

    result.update(ok=True, mpm_path=str(mpm_path))
    return result


def install_products(plan: InstallPlan, *, dry_run: bool = False) -> dict[str, Any]:
    """Run MPM for ``plan`` and place the license file.

    The license is copied whether or not MPM succeeded, so a partial
    install still ends up licensed.

    Returns:
        ``{"ok": bool, "command": [...], "mpm": {...},
        "license": {...} | None, "dry_run": bool}``
    """
    cmd = plan.command()
    if dry_run:
        logger.info("Dry run: %s", " ".join(cmd))
        return {"ok": True, "command": cmd, "mpm": None, "license": None, "dry_run": True}

    logger.info(
        "Installing %d products for %s into %s",
        len(plan.products), plan.release, plan.install_path,
    )
    mpm_result = run_mpm(cmd)

    license_result = None
    if plan.license_file is not None:
        license_result = copy_license(plan.license_file, Path(plan.install_path))
        if not license_result["ok"]:
            logger.warning("License placement failed: %s", license_result["error"])

    return {
        "ok": mpm_result["ok"],
        "command": cmd,
        "mpm": mpm_result,
        "license": license_result,
        "dry_run": False,
    }
