"""
sqlstmt Builder Package
Fluent assembly of SQL statement text from string fragments

Provides:
- Fluent SQLBuilder for SELECT, INSERT, UPDATE and DELETE statements
- Statement state with ordered per-clause fragment lists
- Clause renderer with conjunction handling and explicit AND/OR groups
"""

from .exceptions import SQLBuilderError, StatementKindError, SQLRenderError
from .statement import Statement, StatementKind, Clause, Logic
from .renderer import ClauseRenderer, SafeAppendable, TextSink
from .fluent import SQLBuilder, sql_builder

__all__ = [
    # Builder
    'SQLBuilder',
    'sql_builder',

    # Statement state
    'Statement',
    'StatementKind',
    'Clause',
    'Logic',

    # Rendering
    'ClauseRenderer',
    'SafeAppendable',
    'TextSink',

    # Errors
    'SQLBuilderError',
    'StatementKindError',
    'SQLRenderError',
]
