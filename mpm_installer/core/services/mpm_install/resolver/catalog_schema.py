"""
L2 Resolver — Catalog self-check.

Mechanical checks over the L0 tables: every supported
(platform, release) resolves to a non-empty catalog, every product
token is well formed, and no release both adds and removes the same
product.  Run by ``mpm-installer catalog check`` and by the tests.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from mpm_installer.core.models.catalog import ProductCatalog
from mpm_installer.core.models.platform import Platform
from mpm_installer.core.services.mpm_install.data.platforms import (
    PLATFORM_SPECS,
    PlatformSpec,
)
from mpm_installer.core.services.mpm_install.data.products import PRODUCT_CATALOGS
from mpm_installer.core.services.mpm_install.resolver.catalog_resolution import (
    resolve_catalog,
)

# Tokens go to mpm as separate argv entries: no whitespace allowed.
_PRODUCT_TOKEN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_\-]*$")


def validate_catalog(catalog: ProductCatalog, spec: PlatformSpec) -> list[str]:
    """Validate one platform's tables.

    Returns:
        List of error strings (empty = valid).
    """
    errors: list[str] = []

    for table_name, table in (("additions", catalog.additions), ("removals", catalog.removals)):
        for release, products in table.items():
            for product in sorted(products):
                if not _PRODUCT_TOKEN.match(product):
                    errors.append(f"{table_name}[{release}]: malformed product id {product!r}")

    for release, removed in catalog.removals.items():
        overlap = removed & catalog.additions.get(release, frozenset())
        if overlap:
            errors.append(
                f"{release}: added and removed in the same release: {', '.join(sorted(overlap))}"
            )

    for release in spec.supported_releases():
        if not resolve_catalog(catalog, release):
            errors.append(f"{release}: resolved catalog is empty")

    return errors


def check_catalogs(
    catalogs: Mapping[Platform, ProductCatalog] = PRODUCT_CATALOGS,
    specs: Mapping[Platform, PlatformSpec] = PLATFORM_SPECS,
) -> dict[str, list[str]]:
    """Validate every platform.

    Returns:
        Dict mapping platform → list of errors.  Only platforms with
        errors are included.
    """
    all_errors: dict[str, list[str]] = {}
    for platform in Platform:
        catalog = catalogs.get(platform)
        spec = specs.get(platform)
        if catalog is None or spec is None:
            all_errors[str(platform)] = ["no catalog or platform spec defined"]
            continue
        errs = validate_catalog(catalog, spec)
        if errs:
            all_errors[str(platform)] = errs
    return all_errors
