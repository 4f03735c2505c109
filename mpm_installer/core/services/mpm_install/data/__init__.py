"""
L0 Data — ``__init__.py`` re-exports all data tables.
"""

from mpm_installer.core.services.mpm_install.data.platforms import (  # noqa: F401
    EXTRACT_DIRNAME,
    FIRST_RELEASE,
    LATEST_RELEASE,
    MPM_FILENAME,
    PLATFORM_SPECS,
    PlatformSpec,
)
from mpm_installer.core.services.mpm_install.data.products import (  # noqa: F401
    PRODUCT_CATALOGS,
    PRODUCT_RECORDS,
    PRODUCT_SHORTHANDS,
)
