"""
L5 Orchestration — ``__init__.py`` re-exports all coordinators.
"""

from mpm_installer.core.services.mpm_install.orchestration.orchestrator import (  # noqa: F401
    InstallPlan,
    install_products,
    mpm_binary_path,
    prepare_mpm,
)
