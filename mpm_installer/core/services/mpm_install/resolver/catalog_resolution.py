"""
L2 Resolver — Catalog resolution.

Computes the installable product set for a (platform, release) from
the L0 addition/removal tables.  Pure: no state, no I/O, a fresh
frozenset per call.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from mpm_installer.core.models.catalog import ProductCatalog
from mpm_installer.core.models.platform import Platform
from mpm_installer.core.models.release import Release
from mpm_installer.core.services.mpm_install.data.platforms import (
    PLATFORM_SPECS,
    PlatformSpec,
)
from mpm_installer.core.services.mpm_install.data.products import PRODUCT_CATALOGS

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Raised when the resolver is asked for a platform/release it does not cover.

    Callers validate the release before resolving, so this signals a
    programming error rather than bad user input.
    """


def resolve_catalog(catalog: ProductCatalog, release: Release) -> frozenset[str]:
    """Resolve the products installable at ``release``.

    Everything added at or before ``release``, minus everything removed
    at or before ``release``.  Removing a product that was never added
    is a no-op.

    Args:
        catalog: The platform's addition/removal tables.
        release: Target release.

    Returns:
        The resolved product identifiers.
    """
    products: set[str] = set()
    for added_at, added in catalog.additions.items():
        if added_at <= release:
            products |= added
    for removed_at, removed in catalog.removals.items():
        if removed_at <= release:
            products -= removed
    return frozenset(products)


def resolve_platform_catalog(
    platform: Platform,
    release: Release,
    *,
    catalogs: Mapping[Platform, ProductCatalog] = PRODUCT_CATALOGS,
    specs: Mapping[Platform, PlatformSpec] = PLATFORM_SPECS,
) -> frozenset[str]:
    """Resolve the catalog for a supported (platform, release) pair.

    Raises:
        CatalogError: Unknown platform, or a release the platform
            does not support.
    """
    catalog = catalogs.get(platform)
    spec = specs.get(platform)
    if catalog is None or spec is None:
        raise CatalogError(f"No product catalog for platform {platform!r}")
    if not spec.supports(release):
        raise CatalogError(f"{release} is not a supported release on {platform}")

    products = resolve_catalog(catalog, release)
    logger.debug("Resolved %d products for %s %s", len(products), platform, release)
    return products
