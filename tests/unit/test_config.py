"""Unit tests for settings and logging configuration."""

import logging
import subprocess
import sys
from pathlib import Path

import pytest
import structlog
from pydantic import ValidationError

from fuse_search import get_default_engine
from fuse_search.config import Settings
from fuse_search.core.engine import SearchEngine
from fuse_search.log_config import PACKAGE_LOGGER, configure_logging, get_logger


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self, monkeypatch):
        """Test the default search settings."""
        monkeypatch.delenv("FUSE_SEARCH_THRESHOLD", raising=False)
        settings = Settings(_env_file=None)

        assert settings.location == 0
        assert settings.distance == 100
        assert settings.threshold == 0.6
        assert settings.max_pattern_length == 32
        assert settings.is_case_sensitive is False
        assert settings.tokenize is False

    def test_environment_override(self, monkeypatch):
        """Test reading settings from the environment."""
        monkeypatch.setenv("FUSE_SEARCH_THRESHOLD", "0.25")
        monkeypatch.setenv("FUSE_SEARCH_TOKENIZE", "true")

        settings = Settings(_env_file=None)

        assert settings.threshold == 0.25
        assert settings.tokenize is True

    def test_invalid_environment(self, monkeypatch):
        """Test that invalid values are rejected."""
        monkeypatch.setenv("FUSE_SEARCH_DISTANCE", "-3")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_default_engine(self):
        """Test that the default engine is shared."""
        engine = get_default_engine()

        assert isinstance(engine, SearchEngine)
        assert get_default_engine() is engine


class TestLogging:
    """Test cases for logging configuration."""

    def test_configure_level(self):
        """Test that the package logger level follows the configuration."""
        try:
            configure_logging("DEBUG", "console")
            assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG
        finally:
            configure_logging("WARNING", "json")

        assert logging.getLogger(PACKAGE_LOGGER).level == logging.WARNING

    def test_get_logger_leaves_configuration_alone(self):
        """Test that asking for a logger does not configure structlog."""
        structlog.reset_defaults()

        get_logger("fuse_search.tests").debug("Logger requested")

        assert not structlog.is_configured()

    def test_import_leaves_host_logging_alone(self):
        """Test that importing the package keeps the host's structlog defaults."""
        code = (
            "import structlog, fuse_search\n"
            "print(structlog.is_configured())\n"
        )

        completed = subprocess.run(
            [sys.executable, "-c", code],
            cwd=Path(__file__).resolve().parents[2],
            capture_output=True,
            text=True,
            check=True,
        )

        assert completed.stdout.strip() == "False"

    def test_rejected_pattern_is_logged(self, caplog):
        """Test that an over-long pattern is reported."""
        configure_logging("WARNING", "json")
        engine = SearchEngine(max_pattern_length=3)

        with caplog.at_level(logging.WARNING, logger=PACKAGE_LOGGER):
            assert engine.create_pattern("abcdef") is None

        assert "Pattern exceeds maximum length" in caplog.text
