"""
MPM Install — Orchestration: prepare_mpm and install_products.

The download and MPM launch are patched at the orchestrator's import
site; extraction and license placement run for real in tmp_path.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

from mpm_installer.core.models.platform import Platform
from mpm_installer.core.models.release import Release
from mpm_installer.core.services.mpm_install.orchestration.orchestrator import (
    InstallPlan,
    install_products,
    mpm_binary_path,
    prepare_mpm,
)

_ORCH = "mpm_installer.core.services.mpm_install.orchestration.orchestrator"
_BASE_URL = "https://www.mathworks.com/mpm"


def _fake_download(payload_writer):
    """Build a _download_file replacement that writes via ``payload_writer``."""
    def _download(url, dest, *, timeout=60):
        payload_writer(dest)
        return {"ok": True, "path": str(dest), "size_bytes": dest.stat().st_size, "elapsed_ms": 1}
    return _download


class TestMpmBinaryPath:

    def test_linux(self, download_dir: Path, linux_spec):
        assert mpm_binary_path(download_dir, linux_spec) == download_dir / "mpm"

    def test_windows(self, download_dir: Path, windows_spec):
        expected = download_dir / "mpm-contents" / "bin" / "win64" / "mpm.exe"
        assert mpm_binary_path(download_dir, windows_spec) == expected


class TestPrepareMpm:

    def test_linux_download_and_chmod(self, download_dir: Path, linux_spec):
        writer = _fake_download(lambda dest: dest.write_bytes(b"\x7fELF"))
        with patch(f"{_ORCH}._download_file", side_effect=writer) as dl:
            result = prepare_mpm(download_dir, linux_spec, base_url=_BASE_URL, timeout=9)

        assert result["ok"] is True
        assert result["downloaded"] is True
        assert result["extracted"] is False
        assert result["mpm_path"] == str(download_dir / "mpm")
        dl.assert_called_once()
        assert dl.call_args.args[0] == "https://www.mathworks.com/mpm/glnxa64/mpm"
        assert dl.call_args.kwargs["timeout"] == 9

    def test_macos_download_and_extract(self, download_dir: Path, mac_spec, mpm_archive_factory):
        writer = _fake_download(lambda dest: mpm_archive_factory(dest, "maci64"))
        with patch(f"{_ORCH}._download_file", side_effect=writer):
            result = prepare_mpm(download_dir, mac_spec, base_url=_BASE_URL)

        assert result["ok"] is True
        assert result["extracted"] is True
        assert Path(result["mpm_path"]).is_file()
        assert result["mpm_path"].endswith(str(Path("mpm-contents", "bin", "maci64", "mpm")))

    def test_reuse_without_download(self, download_dir: Path, mac_spec, mpm_archive_factory):
        mpm_archive_factory(download_dir / "mpm", "maci64")
        with patch(f"{_ORCH}._download_file") as dl:
            result = prepare_mpm(download_dir, mac_spec, base_url=_BASE_URL, download=False)
        dl.assert_not_called()
        assert result["ok"] is True
        assert result["downloaded"] is False
        assert result["extracted"] is True

    def test_reuse_without_extract(self, download_dir: Path, mac_spec):
        with patch(f"{_ORCH}._download_file") as dl, patch(f"{_ORCH}._extract_zip") as ex:
            result = prepare_mpm(
                download_dir, mac_spec, base_url=_BASE_URL, download=False, extract=False,
            )
        dl.assert_not_called()
        ex.assert_not_called()
        assert result == {
            "ok": True,
            "downloaded": False,
            "extracted": False,
            "mpm_path": str(mpm_binary_path(download_dir, mac_spec)),
        }

    def test_download_failure(self, download_dir: Path, linux_spec):
        failure = {"ok": False, "error": "Download failed: timed out"}
        with patch(f"{_ORCH}._download_file", return_value=failure):
            result = prepare_mpm(download_dir, linux_spec, base_url=_BASE_URL)
        assert result == {"ok": False, "stage": "download", "error": "Download failed: timed out"}

    def test_extract_failure(self, download_dir: Path, windows_spec):
        writer = _fake_download(lambda dest: dest.write_bytes(b"not a zip"))
        with patch(f"{_ORCH}._download_file", side_effect=writer):
            result = prepare_mpm(download_dir, windows_spec, base_url=_BASE_URL)
        assert result["ok"] is False
        assert result["stage"] == "extract"

    def test_chmod_failure(self, download_dir: Path, linux_spec):
        # No download and no binary on disk: chmod has nothing to act on.
        result = prepare_mpm(download_dir, linux_spec, base_url=_BASE_URL, download=False)
        assert result["ok"] is False
        assert result["stage"] == "chmod"


class TestInstallPlan:

    def _plan(self, license_file=None, install_path="/opt/MATLAB/R2022b"):
        return InstallPlan(
            platform=Platform.LINUX,
            release=Release.parse("R2022b"),
            mpm_path=Path("/tmp/mpm"),
            install_path=install_path,
            products=["MATLAB", "Simulink"],
            license_file=license_file,
        )

    def test_command(self):
        cmd = self._plan().command()
        assert cmd[1:] == [
            "install", "--release=R2022b", "--destination=/opt/MATLAB/R2022b",
            "--products", "MATLAB", "Simulink",
        ]

    def test_to_dict(self):
        data = self._plan().to_dict()
        assert data["platform"] == "linux"
        assert data["release"] == "R2022b"
        assert data["license_file"] is None
        assert data["command"][0] == str(Path("/tmp/mpm"))

    def test_dry_run_runs_nothing(self):
        with patch(f"{_ORCH}.run_mpm") as run, patch(f"{_ORCH}.copy_license") as copy:
            result = install_products(self._plan(), dry_run=True)
        run.assert_not_called()
        copy.assert_not_called()
        assert result["ok"] is True
        assert result["dry_run"] is True

    def test_success_copies_license(self, tmp_path: Path, license_file: Path):
        install_path = tmp_path / "R2022b"
        plan = self._plan(license_file=license_file, install_path=str(install_path))
        with patch(f"{_ORCH}.run_mpm", return_value={"ok": True, "returncode": 0}) as run:
            result = install_products(plan)
        run.assert_called_once_with(plan.command())
        assert result["ok"] is True
        assert result["license"]["ok"] is True
        assert (install_path / "licenses" / license_file.name).is_file()

    def test_license_copied_after_mpm_failure(self, tmp_path: Path, license_file: Path):
        install_path = tmp_path / "R2022b"
        plan = self._plan(license_file=license_file, install_path=str(install_path))
        failed = {"ok": False, "returncode": 1, "error": "MPM exited with code 1"}
        with patch(f"{_ORCH}.run_mpm", return_value=failed):
            result = install_products(plan)
        assert result["ok"] is False
        assert result["mpm"]["error"] == "MPM exited with code 1"
        assert (install_path / "licenses" / license_file.name).is_file()

    def test_no_license(self):
        with patch(f"{_ORCH}.run_mpm", return_value={"ok": True, "returncode": 0}):
            result = install_products(self._plan())
        assert result["license"] is None
