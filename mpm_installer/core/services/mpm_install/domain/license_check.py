"""
L1 Domain — License file name rules (pure).
"""

from __future__ import annotations

LICENSE_EXTENSIONS: tuple[str, ...] = (".dat", ".lic")


def _check_license_name(path: str) -> str | None:
    """Return an error message if ``path`` lacks a license extension."""
    if not path.endswith(LICENSE_EXTENSIONS):
        return "Invalid file extension. Please provide a file with .dat or .lic extension."
    return None
