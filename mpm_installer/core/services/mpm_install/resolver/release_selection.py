"""
L2 Resolver — Release prompt answers → supported releases.
"""

from __future__ import annotations

from typing import Any

from mpm_installer.core.models.release import Release, ReleaseFormatError
from mpm_installer.core.services.mpm_install.data.platforms import PlatformSpec


def default_release(spec: PlatformSpec) -> Release:
    """The newest release the platform supports."""
    return spec.supported_releases()[-1]


def choose_release(answer: str, spec: PlatformSpec) -> dict[str, Any]:
    """Interpret the release prompt answer.

    An empty answer selects the default release.  Labels are matched
    case-insensitively and the leading ``R`` is optional.

    Returns:
        ``{"ok": True, "release": Release}`` or
        ``{"ok": False, "error": "..."}``.
    """
    answer = answer.strip()
    if not answer:
        return {"ok": True, "release": default_release(spec)}

    supported = spec.supported_releases()
    window = f"{supported[0]}-{supported[-1]}"

    try:
        release = Release.parse(answer)
    except ReleaseFormatError:
        return {"ok": False, "error": f"Invalid release. Enter a release between {window}."}

    if release in spec.unsupported_releases:
        return {
            "ok": False,
            "error": (
                f"MPM currently does not support {release} on {spec.platform.display_name}. "
                "Please select a different release."
            ),
        }

    if not spec.supports(release):
        return {"ok": False, "error": f"Invalid release. Enter a release between {window}."}

    return {"ok": True, "release": release}
