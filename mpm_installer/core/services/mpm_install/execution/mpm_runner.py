"""
L4 Execution — MPM command assembly and launch.

The SINGLE PLACE where the downloaded MPM is executed.  Output is not
captured: MPM's progress goes straight to the user's terminal.
"""

from __future__ import annotations

import logging
import subprocess
import time
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from mpm_installer.core.models.release import Release

logger = logging.getLogger(__name__)


def build_install_command(
    mpm_path: Path | str,
    release: Release,
    destination: str,
    products: Iterable[str],
) -> list[str]:
    """Build the argv for ``mpm install``.

    Shape::

        <mpm> install --release=<release> --destination=<path> --products <p> <p> ...
    """
    return [
        str(mpm_path),
        "install",
        f"--release={release.label}",
        f"--destination={destination}",
        "--products",
        *products,
    ]


def run_mpm(cmd: list[str]) -> dict[str, Any]:
    """Run MPM with the terminal's stdout/stderr.

    Args:
        cmd: Full argv, as built by ``build_install_command``.

    Returns:
        ``{"ok": True, "returncode": 0, "elapsed_ms": N}`` on success,
        ``{"ok": False, "error": "...", ...}`` on failure.
    """
    logger.debug("Executing: %s", " ".join(cmd))
    start = time.monotonic()
    try:
        result = subprocess.run(cmd, check=False)
    except OSError as exc:
        logger.exception("Could not launch MPM: %s", cmd[0])
        return {"ok": False, "returncode": None, "error": f"Could not launch MPM: {exc}"}

    elapsed_ms = int((time.monotonic() - start) * 1000)
    if result.returncode == 0:
        return {"ok": True, "returncode": 0, "elapsed_ms": elapsed_ms}

    return {
        "ok": False,
        "returncode": result.returncode,
        "error": f"MPM exited with code {result.returncode}",
        "elapsed_ms": elapsed_ms,
    }
