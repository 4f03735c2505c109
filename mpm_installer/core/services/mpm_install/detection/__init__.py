"""
L3 Detection — ``__init__.py`` re-exports all detection functions.

These functions READ system state but never WRITE.
"""

from mpm_installer.core.services.mpm_install.detection.host import (  # noqa: F401
    default_download_dir,
    detect_platform,
    find_existing_mpm,
)
