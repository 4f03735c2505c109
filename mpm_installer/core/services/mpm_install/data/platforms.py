"""
L0 Data — Per-platform MPM download and install locations.

Pure data.  URLs follow MathWorks' ``/mpm/<arch>/mpm`` layout; on
Windows and macOS the download is a zip archive that unpacks into
``mpm-contents``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from mpm_installer.core.models.platform import Platform
from mpm_installer.core.models.release import Release, release_range

MPM_FILENAME = "mpm"
EXTRACT_DIRNAME = "mpm-contents"

# Release window offered at the release prompt.
FIRST_RELEASE = Release.parse("R2017b")
LATEST_RELEASE = Release.parse("R2024b")


@dataclass(frozen=True)
class PlatformSpec:
    """Where MPM comes from on a platform and where it installs to."""

    platform: Platform
    arch: str                          # MathWorks arch directory, e.g. glnxa64
    binary_relpath: tuple[str, ...]    # runnable mpm, relative to the download dir
    install_root: str                  # default install path template
    min_release: Release = FIRST_RELEASE
    max_release: Release = LATEST_RELEASE
    unsupported_releases: frozenset[Release] = frozenset()

    @property
    def needs_extraction(self) -> bool:
        """Whether the downloaded file is a zip archive."""
        return self.binary_relpath[0] == EXTRACT_DIRNAME

    def mpm_url(self, base_url: str) -> str:
        return f"{base_url.rstrip('/')}/{self.arch}/{MPM_FILENAME}"

    def default_install_path(self, release: Release) -> str:
        return self.install_root.format(release=release.label)

    def supported_releases(self) -> list[Release]:
        """Releases this platform can install, oldest first."""
        return [
            r for r in release_range(self.min_release, self.max_release)
            if r not in self.unsupported_releases
        ]

    def supports(self, release: Release) -> bool:
        return (
            self.min_release <= release <= self.max_release
            and release not in self.unsupported_releases
        )


PLATFORM_SPECS: Mapping[Platform, PlatformSpec] = MappingProxyType({
    Platform.WINDOWS: PlatformSpec(
        platform=Platform.WINDOWS,
        arch="win64",
        binary_relpath=(EXTRACT_DIRNAME, "bin", "win64", "mpm.exe"),
        install_root="C:\\Program Files\\MATLAB\\{release}",
        # MPM could not install R2023b on Windows
        unsupported_releases=frozenset({Release.parse("R2023b")}),
    ),
    Platform.LINUX: PlatformSpec(
        platform=Platform.LINUX,
        arch="glnxa64",
        binary_relpath=(MPM_FILENAME,),
        install_root="/usr/local/MATLAB/{release}",
    ),
    Platform.MACOS_X64: PlatformSpec(
        platform=Platform.MACOS_X64,
        arch="maci64",
        binary_relpath=(EXTRACT_DIRNAME, "bin", "maci64", "mpm"),
        install_root="/Applications/MATLAB_{release}",
    ),
    Platform.MACOS_ARM: PlatformSpec(
        platform=Platform.MACOS_ARM,
        arch="maca64",
        binary_relpath=(EXTRACT_DIRNAME, "bin", "maca64", "mpm"),
        install_root="/Applications/MATLAB_{release}",
        # First release with a native Apple silicon build
        min_release=Release.parse("R2023b"),
    ),
})
