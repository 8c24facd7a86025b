"""
Unit tests for core configuration module.

Tests defaults, environment loading and validation.
"""
import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from sqlstmt.core.config import Settings, get_settings


class TestSettings:
    """Test cases for Settings class."""

    def test_default_settings(self):
        """Test default settings initialization."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.APP_NAME == "sqlstmt"
        assert settings.LOG_LEVEL == "WARNING"
        assert settings.LOG_JSON_FILE is None
        assert settings.LOG_RICH_CONSOLE is True
        assert settings.STRICT_STATEMENT_KIND is False

    def test_settings_from_env(self):
        """Test settings loading from prefixed environment variables."""
        with patch.dict(os.environ, {
            'SQLSTMT_LOG_LEVEL': 'debug',
            'SQLSTMT_LOG_JSON_FILE': '/tmp/sqlstmt/app.log',
            'SQLSTMT_LOG_RICH_CONSOLE': 'false',
            'SQLSTMT_STRICT_STATEMENT_KIND': 'true',
        }):
            settings = Settings(_env_file=None)

        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.LOG_JSON_FILE == Path("/tmp/sqlstmt/app.log")
        assert settings.LOG_RICH_CONSOLE is False
        assert settings.STRICT_STATEMENT_KIND is True

    def test_unprefixed_env_ignored(self):
        """Test variables without the prefix do not leak in."""
        with patch.dict(os.environ, {'LOG_LEVEL': 'DEBUG'}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.LOG_LEVEL == "WARNING"

    def test_env_file(self, temp_dir):
        """Test configuration loading from a .env file."""
        env_file = temp_dir / ".env"
        env_file.write_text("SQLSTMT_STRICT_STATEMENT_KIND=true\nSQLSTMT_LOG_LEVEL=ERROR\n")

        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=env_file)

        assert settings.STRICT_STATEMENT_KIND is True
        assert settings.LOG_LEVEL == "ERROR"

    def test_invalid_log_level(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            Settings(LOG_LEVEL="LOUD", _env_file=None)

    def test_get_settings_cached(self):
        """Test get_settings returns the same instance."""
        assert get_settings() is get_settings()
