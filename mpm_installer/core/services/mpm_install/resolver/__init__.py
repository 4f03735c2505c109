"""
L2 Resolver — ``__init__.py`` re-exports all resolver functions.

These functions turn L0 tables + L1 domain logic into the concrete
product set and release a session will install.
"""

from mpm_installer.core.services.mpm_install.resolver.catalog_resolution import (  # noqa: F401
    CatalogError,
    resolve_catalog,
    resolve_platform_catalog,
)
from mpm_installer.core.services.mpm_install.resolver.catalog_schema import (  # noqa: F401
    check_catalogs,
    validate_catalog,
)
from mpm_installer.core.services.mpm_install.resolver.release_selection import (  # noqa: F401
    choose_release,
    default_release,
)
