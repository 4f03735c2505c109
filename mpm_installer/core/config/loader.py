"""
Configuration loader — reads mpm-installer.yml into InstallerSettings.

The file is optional.  When none is found the installer runs with
built-in defaults; when one is found it must be valid YAML matching
the InstallerSettings schema.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from mpm_installer.core.models.settings import InstallerSettings

logger = logging.getLogger(__name__)

# Default config filename
SETTINGS_FILE = "mpm-installer.yml"


class ConfigError(Exception):
    """Raised when installer configuration is invalid or unreadable."""


def find_settings_file(start_dir: Path | None = None) -> Path | None:
    """Search for mpm-installer.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to mpm-installer.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / SETTINGS_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_settings(path: Path | None = None, *, search: bool = True) -> InstallerSettings:
    """Load and validate installer settings.

    Args:
        path: Explicit path to mpm-installer.yml.  An explicit path
            must exist.
        search: When no path is given, search upward from the cwd.

    Returns:
        Validated InstallerSettings (defaults when no file is found).

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    if path is None:
        path = find_settings_file() if search else None
        if path is None:
            logger.debug("No %s found, using defaults", SETTINGS_FILE)
            return InstallerSettings()
    elif not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading installer settings from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return InstallerSettings()

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # The YAML may wrap everything under an "installer" key or be flat
    settings_data = data.get("installer", data)
    if not isinstance(settings_data, dict):
        raise ConfigError(f"Expected 'installer' to be a mapping in {path}")

    try:
        settings = InstallerSettings.model_validate(settings_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid installer configuration: {e}") from e

    logger.info("Loaded installer settings from %s", path)
    return settings
