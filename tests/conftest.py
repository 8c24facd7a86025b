"""
PyTest configuration and shared fixtures for the sqlstmt test suite.
"""
import io
import logging
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from sqlstmt.builder import SQLBuilder, Statement
from sqlstmt.core.config import Settings
from sqlstmt.core.logging import ROOT_LOGGER_NAME


class FailingSink(io.StringIO):
    """Text sink whose writes start failing after ``fail_after`` successful calls."""

    def __init__(self, fail_after: int = 0, error: Exception = None):
        super().__init__()
        self.fail_after = fail_after
        self.error = error or OSError("disk full")
        self.calls = 0

    def write(self, s: str) -> int:
        if self.calls >= self.fail_after:
            raise self.error
        self.calls += 1
        return super().write(s)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def mock_settings(temp_dir: Path) -> Settings:
    """Create settings for testing."""
    return Settings(
        LOG_LEVEL="DEBUG",
        LOG_JSON_FILE=temp_dir / "logs" / "sqlstmt.log",
        LOG_RICH_CONSOLE=False,
        STRICT_STATEMENT_KIND=False,
    )


@pytest.fixture
def builder() -> SQLBuilder:
    """Non-strict builder."""
    return SQLBuilder(strict=False)


@pytest.fixture
def strict_builder() -> SQLBuilder:
    """Builder that refuses to switch statement kind."""
    return SQLBuilder(strict=True)


@pytest.fixture
def statement() -> Statement:
    """Fresh statement state."""
    return Statement()


@pytest.fixture
def failing_sink():
    """Factory for sinks that fail after a number of writes."""
    return FailingSink


@pytest.fixture
def sqlstmt_caplog(caplog):
    """caplog attached to the package logger, which does not propagate to root."""
    app_logger = logging.getLogger(ROOT_LOGGER_NAME)
    propagate = app_logger.propagate
    app_logger.propagate = False
    app_logger.addHandler(caplog.handler)
    yield caplog
    app_logger.removeHandler(caplog.handler)
    app_logger.propagate = propagate
