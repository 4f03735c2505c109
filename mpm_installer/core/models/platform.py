"""
Platform model — the operating-system/architecture pairs MPM ships for.
"""

from __future__ import annotations

from enum import StrEnum


class Platform(StrEnum):
    """A target platform with its own product catalog."""

    WINDOWS = "windows"
    LINUX = "linux"
    MACOS_X64 = "macos-x64"
    MACOS_ARM = "macos-arm"

    @property
    def is_macos(self) -> bool:
        return self in (Platform.MACOS_X64, Platform.MACOS_ARM)

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES: dict[Platform, str] = {
    Platform.WINDOWS: "Windows",
    Platform.LINUX: "Linux",
    Platform.MACOS_X64: "macOS (Intel)",
    Platform.MACOS_ARM: "macOS (Apple silicon)",
}
