"""
Unit tests for logging setup.

Tests cover:
- Root level from settings
- Access-log toggle for uvicorn
- Per-logger level overrides
"""

import logging

import pytest

from psx_spotter.config.settings import Settings
from psx_spotter.config.logging_config import setup_logging

TOUCHED_LOGGERS = ["sqlalchemy.engine", "uvicorn", "uvicorn.access", "psx_spotter.services"]


@pytest.fixture(autouse=True)
def restore_logging():
    """Put logger levels and root handlers back after each test."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_root_level = root.level
    saved_levels = {name: logging.getLogger(name).level for name in TOUCHED_LOGGERS}
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_root_level)
    for name, level in saved_levels.items():
        logging.getLogger(name).setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_root_level_follows_settings(self):
        setup_logging(Settings(log_level="debug"))

        assert logging.getLogger().level == logging.DEBUG

    def test_access_log_is_quiet_by_default(self):
        """
        GIVEN default settings
        WHEN logging is set up
        THEN uvicorn request lines are suppressed and SQL echo is reduced
        """
        setup_logging(Settings())

        assert logging.getLogger("uvicorn.access").level == logging.WARNING
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    def test_access_log_can_be_enabled(self):
        setup_logging(Settings(access_log=True))

        assert logging.getLogger("uvicorn.access").level == logging.INFO

    def test_per_logger_overrides_are_applied(self):
        setup_logging(Settings(log_levels={"psx_spotter.services": "DEBUG", "uvicorn": "error"}))

        assert logging.getLogger("psx_spotter.services").level == logging.DEBUG
        assert logging.getLogger("uvicorn").level == logging.ERROR

    def test_unknown_level_is_rejected(self):
        with pytest.raises(ValueError):
            setup_logging(Settings(log_levels={"psx_spotter.services": "LOUD"}))
