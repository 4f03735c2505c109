"""
L4 Execution — License file checks and placement.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Any

from mpm_installer.core.services.mpm_install.domain.license_check import _check_license_name

logger = logging.getLogger(__name__)

LICENSES_DIRNAME = "licenses"


def check_license_file(path: str) -> str | None:
    """Return an error message if ``path`` is not a usable license file."""
    candidate = Path(path).expanduser()
    if not candidate.exists():
        return f"Error: {candidate} does not exist."
    if not candidate.is_file():
        return f"Error: {candidate} is not a file."
    return _check_license_name(candidate.name)


def copy_license(license_path: Path, install_path: Path) -> dict[str, Any]:
    """Copy the license into ``<install_path>/licenses/``.

    Returns:
        ``{"ok": True, "path": "..."}`` or ``{"ok": False, "error": "..."}``.
    """
    licenses_dir = install_path / LICENSES_DIRNAME
    try:
        licenses_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        return {"ok": False, "error": f"Error creating \"licenses\" directory: {exc}"}

    dest = licenses_dir / license_path.name
    try:
        shutil.copyfile(license_path, dest)
    except OSError as exc:
        return {"ok": False, "error": f"Error copying license file: {exc}"}

    logger.info("License copied to %s", dest)
    return {"ok": True, "path": str(dest)}
