"""
L4 Execution — Unpacking and permissions for the downloaded MPM.

On Windows and macOS MPM is delivered as a zip archive; on Linux it
is a bare binary that needs the executable bit.
"""

from __future__ import annotations

import logging
import os
import shutil
import zipfile
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def _extract_zip(archive: Path, dest: Path) -> dict[str, Any]:
    """Extract ``archive`` into a fresh ``dest`` directory.

    An existing ``dest`` is deleted first.  Members that would land
    outside ``dest`` are refused.  Unix permission bits stored in the
    archive are restored so the extracted ``mpm`` stays executable.

    Returns:
        ``{"ok": True, "path": "...", "files": N}`` or error dict.
    """
    try:
        if dest.exists():
            logger.debug("Removing existing %s", dest)
            shutil.rmtree(dest)
        dest.mkdir(parents=True)
    except OSError as exc:
        return {"ok": False, "error": f"Failed to prepare {dest}: {exc}"}

    root = dest.resolve()
    count = 0
    try:
        with zipfile.ZipFile(archive, "r") as zf:
            for member in zf.infolist():
                target = (root / member.filename).resolve()
                if not target.is_relative_to(root):
                    return {
                        "ok": False,
                        "error": f"Refusing to extract {member.filename!r} outside {dest}",
                    }
                zf.extract(member, root)
                mode = (member.external_attr >> 16) & 0o777
                if mode and not member.is_dir():
                    os.chmod(target, mode)
                count += 1
    except (zipfile.BadZipFile, OSError) as exc:
        return {"ok": False, "error": f"Extract failed: {exc}"}

    logger.debug("Extracted %d entries into %s", count, dest)
    return {"ok": True, "path": str(dest), "files": count}


def _make_executable(path: Path) -> dict[str, Any]:
    """``chmod 0755`` the downloaded binary."""
    try:
        os.chmod(path, 0o755)
    except OSError as exc:
        return {"ok": False, "error": f"Failed to make {path} executable: {exc}"}
    return {"ok": True, "path": str(path)}
