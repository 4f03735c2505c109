"""
L4 Execution — MPM download.

Streams the MPM binary (or zip archive) from MathWorks to disk.
"""

from __future__ import annotations

import logging
import time
import urllib.request
from pathlib import Path
from typing import Any

from mpm_installer import __version__
from mpm_installer.core.services.mpm_install.domain.download_helpers import (
    _fmt_size,
    _progress_percent,
)

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 8192


def _download_file(url: str, dest: Path, *, timeout: int = 60) -> dict[str, Any]:
    """Download ``url`` to ``dest``, replacing any existing file.

    A failed download removes ``dest`` so no partial file is left behind.

    Progress is logged at INFO every 10%.

    Args:
        url: HTTP(S) URL to fetch.
        dest: Target file path.  Its directory must exist.
        timeout: Socket timeout in seconds.

    Returns:
        ``{"ok": True, "path": "...", "size_bytes": N, "elapsed_ms": N}``
        or ``{"ok": False, "error": "..."}``.
    """
    logger.debug("Downloading %s → %s", url, dest)
    start = time.monotonic()

    try:
        req = urllib.request.Request(
            url, headers={"User-Agent": f"mpm-installer/{__version__}"},
        )
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            total = int(resp.headers.get("Content-Length", 0) or 0)
            downloaded = 0
            last_logged = -10
            with open(dest, "wb") as f:
                while True:
                    chunk = resp.read(_CHUNK_SIZE)
                    if not chunk:
                        break
                    f.write(chunk)
                    downloaded += len(chunk)

                    pct = _progress_percent(downloaded, total)
                    if pct is not None and pct >= last_logged + 10:
                        last_logged = pct
                        logger.info(
                            "Download progress: %d%% (%s / %s)",
                            pct, _fmt_size(downloaded), _fmt_size(total),
                        )
    except OSError as exc:
        # URLError and HTTPError are OSError subclasses
        dest.unlink(missing_ok=True)
        return {"ok": False, "error": f"Download failed: {exc}"}

    elapsed_ms = int((time.monotonic() - start) * 1000)
    logger.info("Downloaded %s in %d ms", _fmt_size(downloaded), elapsed_ms)
    return {
        "ok": True,
        "path": str(dest),
        "size_bytes": downloaded,
        "elapsed_ms": elapsed_ms,
    }
