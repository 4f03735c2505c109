"""
L1 Domain — ``__init__.py`` re-exports all pure domain functions.

These functions have NO subprocess calls, NO filesystem access,
NO network calls. Pure input→output.
"""

from mpm_installer.core.services.mpm_install.domain.download_helpers import (  # noqa: F401
    _fmt_size,
    _progress_percent,
)
from mpm_installer.core.services.mpm_install.domain.license_check import (  # noqa: F401
    LICENSE_EXTENSIONS,
    _check_license_name,
)
from mpm_installer.core.services.mpm_install.domain.selection import (  # noqa: F401
    expand_shorthands,
    shorthands_touching,
    split_products,
    validate_selection,
)
