"""
sqlstmt - Fluent SQL statement builder
Assembles SELECT, INSERT, UPDATE and DELETE text from string fragments, MyBatis style.
"""

__version__ = "0.1.0"

from sqlstmt.core.config import settings
from sqlstmt.core.logging import get_logger
from sqlstmt.builder import (
    SQLBuilder, sql_builder, StatementKind, Logic,
    SQLBuilderError, StatementKindError, SQLRenderError
)

logger = get_logger(__name__)
logger.debug(f"sqlstmt v{__version__} initialized")

__all__ = [
    "SQLBuilder",
    "sql_builder",
    "StatementKind",
    "Logic",
    "SQLBuilderError",
    "StatementKindError",
    "SQLRenderError",
    "settings",
    "get_logger",
    "__version__",
]
