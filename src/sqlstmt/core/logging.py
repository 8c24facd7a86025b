"""
sqlstmt Logging Configuration
Rich console output with an optional structured JSON log file.
"""

import json
import logging
import logging.handlers
from datetime import datetime
from typing import Any, Dict, Optional

from rich.console import Console
from rich.logging import RichHandler

from sqlstmt.core.config import Settings, settings


ROOT_LOGGER_NAME = "sqlstmt"


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra_data"):
            log_entry["extra"] = record.extra_data

        return json.dumps(log_entry, ensure_ascii=False)


class SQLStmtLogger:
    """
    Logging setup for the ``sqlstmt`` logger namespace.

    Handlers are attached to the package logger only; the root logger and
    the host application's handlers are left alone.
    """

    def __init__(self, config: Optional[Settings] = None):
        self.config = config or settings
        self.console = Console(stderr=True)

    def setup_logging(self) -> logging.Logger:
        level = getattr(logging, self.config.LOG_LEVEL)

        app_logger = logging.getLogger(ROOT_LOGGER_NAME)
        app_logger.setLevel(level)

        # Drop handlers from a previous setup
        for handler in app_logger.handlers[:]:
            app_logger.removeHandler(handler)
            handler.close()

        if self.config.LOG_RICH_CONSOLE:
            console_handler = RichHandler(
                console=self.console,
                rich_tracebacks=True,
                show_path=False,
                show_time=True,
            )
            console_handler.setLevel(level)
            app_logger.addHandler(console_handler)

        if self.config.LOG_JSON_FILE is not None:
            self.config.LOG_JSON_FILE.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                self.config.LOG_JSON_FILE,
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())
            app_logger.addHandler(file_handler)

        if app_logger.handlers:
            # Records stop at the package logger once it has its own handlers
            app_logger.propagate = False
        else:
            app_logger.addHandler(logging.NullHandler())
            app_logger.propagate = True

        return app_logger


# Global logger instance
_logger_instance: Optional[SQLStmtLogger] = None


def configure_logging(config: Optional[Settings] = None) -> logging.Logger:
    """
    (Re)configure the package logger, e.g. after changing settings
    """
    global _logger_instance

    _logger_instance = SQLStmtLogger(config)
    return _logger_instance.setup_logging()


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance with proper configuration
    """
    if _logger_instance is None:
        configure_logging()

    return logging.getLogger(name)


class LoggerMixin:
    """
    Mixin to add logging capabilities to classes
    """

    @property
    def logger(self) -> logging.Logger:
        return get_logger(self.__class__.__module__ + "." + self.__class__.__name__)

    def log_with_context(
        self,
        level: int,
        message: str,
        extra_data: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log with additional context data
        """
        if not self.logger.isEnabledFor(level):
            return

        record = self.logger.makeRecord(
            name=self.logger.name,
            level=level,
            fn="",
            lno=0,
            msg=message,
            args=(),
            exc_info=None,
        )

        if extra_data:
            record.extra_data = extra_data

        self.logger.handle(record)
