"""Tests for logging setup."""

import logging
from types import SimpleNamespace

import pytest

from campus.common.logger import get_logger, setup_from_settings, setup_logger


class TestSetupLogger:
    """Tests for setup_logger."""

    def test_namespaced(self):
        logger = setup_logger("test_namespaced", console_logging=False)
        assert logger.name == "campus.test_namespaced"
        assert get_logger("test_namespaced") is logger
        assert get_logger("campus.test_namespaced") is logger

    def test_level(self):
        logger = setup_logger("test_level", level="debug", console_logging=False)
        assert logger.level == logging.DEBUG

    def test_invalid_level(self):
        with pytest.raises(ValueError, match="Invalid log level"):
            setup_logger("test_invalid", level="LOUD")

    def test_no_duplicate_handlers(self):
        first = setup_logger("test_dupes")
        second = setup_logger("test_dupes")
        assert first is second
        assert len(second.handlers) == 1

    def test_file_logging(self, tmp_path):
        logger = setup_logger("test_file", log_dir=str(tmp_path), console_logging=False)
        logger.info("registry built")
        for handler in logger.handlers:
            handler.flush()

        log_file = tmp_path / "test_file.log"
        assert log_file.exists()
        assert "registry built" in log_file.read_text()

    def test_setup_from_settings(self, tmp_path):
        settings = SimpleNamespace(log_level="WARNING", log_dir=str(tmp_path), file_logging=False)
        logger = setup_from_settings(settings)

        assert logger.name == "campus"
        assert logger.level == logging.WARNING
        assert not (tmp_path / "campus.log").exists()
