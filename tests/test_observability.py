"""
Tests for observability — logging setup and level selection.
"""

import logging
from pathlib import Path

import pytest

from mpm_installer.core.observability.logging_config import (
    _parse_level,
    resolve_level,
    setup_logging,
)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestResolveLevel:

    def test_debug_wins(self):
        assert resolve_level(debug=True, verbose=True, quiet=True) == "DEBUG"

    def test_verbose_over_quiet(self):
        assert resolve_level(verbose=True, quiet=True) == "INFO"

    def test_quiet(self):
        assert resolve_level(quiet=True) == "ERROR"

    def test_env_fallback(self, monkeypatch):
        monkeypatch.setenv("MPM_LOG_LEVEL", "INFO")
        assert resolve_level() == "INFO"

    def test_default(self, monkeypatch):
        monkeypatch.delenv("MPM_LOG_LEVEL", raising=False)
        assert resolve_level() == "WARNING"


class TestParseLevel:

    def test_names(self):
        assert _parse_level("debug") == logging.DEBUG
        assert _parse_level("ERROR") == logging.ERROR

    def test_unknown_falls_back(self):
        assert _parse_level("chatty") == logging.WARNING
        assert _parse_level(None) == logging.WARNING


class TestSetupLogging:

    def test_console_only(self):
        setup_logging("INFO")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_file_handler_lowers_root(self, tmp_path: Path):
        log_file = tmp_path / "mpm-installer.log"
        setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2

        logging.getLogger("mpm_installer.test").debug("resolved 3 products")
        for handler in root.handlers:
            handler.flush()
        assert "resolved 3 products" in log_file.read_text(encoding="utf-8")

    def test_repeat_calls_do_not_stack_handlers(self):
        setup_logging("WARNING")
        setup_logging("WARNING")
        assert len(logging.getLogger().handlers) == 1

    def test_console_format_follows_level(self):
        setup_logging("WARNING")
        assert logging.getLogger().handlers[0].formatter._fmt == "%(message)s"
        setup_logging("DEBUG")
        assert "%(lineno)d" in logging.getLogger().handlers[0].formatter._fmt
