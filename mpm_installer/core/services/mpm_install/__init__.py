"""
MPM installation service — package re-exports.

Each symbol lives in its single-responsibility module inside the
appropriate onion layer (data → domain → resolver → detection →
execution → orchestration)::

    from mpm_installer.core.services.mpm_install import resolve_platform_catalog
"""

# ── L0: Data ──
from mpm_installer.core.services.mpm_install.data import (  # noqa: F401
    PLATFORM_SPECS,
    PRODUCT_CATALOGS,
)

# ── L1: Domain ──
from mpm_installer.core.services.mpm_install.domain.selection import (  # noqa: F401
    expand_shorthands,
    split_products,
    validate_selection,
)

# ── L2: Resolver ──
from mpm_installer.core.services.mpm_install.resolver import (  # noqa: F401
    CatalogError,
    check_catalogs,
    choose_release,
    default_release,
    resolve_catalog,
    resolve_platform_catalog,
)

# ── L3: Detection ──
from mpm_installer.core.services.mpm_install.detection import (  # noqa: F401
    default_download_dir,
    detect_platform,
    find_existing_mpm,
)

# ── L5: Orchestration ──
from mpm_installer.core.services.mpm_install.orchestration import (  # noqa: F401
    InstallPlan,
    install_products,
    prepare_mpm,
)
