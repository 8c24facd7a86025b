"""
SQL builder exceptions
"""


class SQLBuilderError(Exception):
    """Base exception for SQL builder errors"""
    pass


class StatementKindError(SQLBuilderError):
    """Raised when a statement starter conflicts with the kind already set"""
    pass


class SQLRenderError(SQLBuilderError):
    """Raised when writing rendered SQL to the output sink fails"""
    pass
