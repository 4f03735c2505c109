"""
Shared test fixtures and configuration.
"""

import zipfile
from pathlib import Path

import pytest

from mpm_installer.core.models.platform import Platform
from mpm_installer.core.services.mpm_install.data.platforms import PLATFORM_SPECS


@pytest.fixture
def download_dir(tmp_path: Path) -> Path:
    """Return an empty directory to download MPM into."""
    path = tmp_path / "downloads"
    path.mkdir()
    return path


@pytest.fixture
def license_file(tmp_path: Path) -> Path:
    """Return a dummy license file with a valid extension."""
    path = tmp_path / "network.lic"
    path.write_text("SERVER localhost ANY 27000\n")
    return path


@pytest.fixture
def linux_spec():
    return PLATFORM_SPECS[Platform.LINUX]


@pytest.fixture
def mac_spec():
    return PLATFORM_SPECS[Platform.MACOS_X64]


@pytest.fixture
def windows_spec():
    return PLATFORM_SPECS[Platform.WINDOWS]


def write_mpm_archive(path: Path, arch: str = "maci64") -> Path:
    """Write a zip laid out like the MPM archive for ``arch``."""
    with zipfile.ZipFile(path, "w") as zf:
        info = zipfile.ZipInfo(f"bin/{arch}/mpm")
        info.external_attr = 0o755 << 16
        zf.writestr(info, "#!/bin/sh\nexit 0\n")
        zf.writestr("VersionInfo.xml", "<version/>")
    return path


@pytest.fixture
def mpm_archive_factory():
    """Return a helper that writes an MPM-shaped zip archive."""
    return write_mpm_archive
