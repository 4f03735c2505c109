"""
Installer settings — defaults for the interactive session.

Loaded from mpm-installer.yml.  Every field is optional: a value here
only changes the default answer offered by the matching prompt.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from mpm_installer.core.models.release import Release

DEFAULT_MPM_BASE_URL = "https://www.mathworks.com/mpm"


class InstallerSettings(BaseModel):
    """Session defaults read from mpm-installer.yml."""

    download_dir: str | None = None
    release: str | None = None
    install_path: str | None = None
    products: list[str] = Field(default_factory=list)
    license_file: str | None = None

    # Treat explicitly named products as authoritative even when the
    # resolved catalog does not list them.
    allow_unlisted_products: bool = False

    mpm_base_url: str = DEFAULT_MPM_BASE_URL
    download_timeout: int = 60

    @field_validator("release")
    @classmethod
    def _release_label(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return Release.parse(value).label

    @field_validator("products", mode="before")
    @classmethod
    def _split_products(cls, value: object) -> object:
        # Accept the same whitespace-separated form the prompt accepts.
        if isinstance(value, str):
            return value.split()
        return value

    @field_validator("download_timeout")
    @classmethod
    def _positive_timeout(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("download_timeout must be positive")
        return value
