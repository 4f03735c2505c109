"""
Domain models for the installer.

    from mpm_installer.core.models import Platform, Release, InstallerSettings
"""

from mpm_installer.core.models.platform import Platform
from mpm_installer.core.models.release import Half, Release, ReleaseFormatError, release_range
from mpm_installer.core.models.settings import InstallerSettings

__all__ = [
    "Half",
    "InstallerSettings",
    "Platform",
    "Release",
    "ReleaseFormatError",
    "release_range",
]
