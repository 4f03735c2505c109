"""
L4 Execution — ``__init__.py`` re-exports all execution functions.

These functions WRITE: files, directories, processes.
"""

from mpm_installer.core.services.mpm_install.execution.archive import (  # noqa: F401
    _extract_zip,
    _make_executable,
)
from mpm_installer.core.services.mpm_install.execution.download import (  # noqa: F401
    _download_file,
)
from mpm_installer.core.services.mpm_install.execution.license_copy import (  # noqa: F401
    LICENSES_DIRNAME,
    check_license_file,
    copy_license,
)
from mpm_installer.core.services.mpm_install.execution.mpm_runner import (  # noqa: F401
    build_install_command,
    run_mpm,
)
