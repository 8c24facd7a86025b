"""
Fluent SQL Builder
MyBatis-style statement builder: chain clause calls, then render to text.
"""

import logging
from typing import Optional

from sqlstmt.builder.exceptions import StatementKindError
from sqlstmt.builder.renderer import ClauseRenderer, TextSink
from sqlstmt.builder.statement import Clause, Logic, Statement, StatementKind
from sqlstmt.core.config import get_settings
from sqlstmt.core.logging import LoggerMixin


class SQLBuilder(LoggerMixin):
    """
    Fluent builder for SELECT, INSERT, UPDATE and DELETE statement text.

    Fragments are taken verbatim; nothing is quoted, escaped or validated.
    Clause order in the output is fixed per statement kind, whatever the
    call order. Instances are not thread-safe: serialize access yourself or
    give each thread its own ``clone()``.

    Example::

        sql = (SQLBuilder()
               .select("id", "name")
               .from_("users")
               .where("active=1")
               .to_string())
    """

    def __init__(self, strict: Optional[bool] = None):
        self.strict = get_settings().STRICT_STATEMENT_KIND if strict is None else strict
        self._statement = Statement()
        self._renderer = ClauseRenderer()

    @property
    def statement(self) -> Statement:
        return self._statement

    @property
    def kind(self) -> Optional[StatementKind]:
        return self._statement.kind

    def _start(self, kind: StatementKind) -> None:
        current = self._statement.kind
        if current is not None and current != kind:
            if self.strict:
                raise StatementKindError(
                    f"Cannot start a {kind.value} statement: builder already holds a {current.value} statement"
                )
            self.log_with_context(
                logging.WARNING,
                f"Statement kind changed from {current.value} to {kind.value}",
                {"previous": current.value, "kind": kind.value},
            )
        self._statement.kind = kind

    # Statement starters

    def select(self, *columns: str) -> "SQLBuilder":
        """Start (or extend) a SELECT statement"""
        self._start(StatementKind.SELECT)
        self._statement.append(Clause.SELECT, *columns)
        return self

    def select_distinct(self, *columns: str) -> "SQLBuilder":
        """Start a SELECT DISTINCT statement"""
        self.select(*columns)
        self._statement.distinct = True
        return self

    def insert_into(self, table: str) -> "SQLBuilder":
        """Start an INSERT statement"""
        self._start(StatementKind.INSERT)
        self._statement.append(Clause.TABLES, table)
        return self

    def update(self, table: str) -> "SQLBuilder":
        """Start an UPDATE statement"""
        self._start(StatementKind.UPDATE)
        self._statement.append(Clause.TABLES, table)
        return self

    def delete_from(self, table: str) -> "SQLBuilder":
        """Start a DELETE statement"""
        self._start(StatementKind.DELETE)
        self._statement.append(Clause.TABLES, table)
        return self

    # Clause appenders

    def from_(self, *tables: str) -> "SQLBuilder":
        self._statement.append(Clause.TABLES, *tables)
        return self

    def join(self, *joins: str) -> "SQLBuilder":
        self._statement.append(Clause.JOIN, *joins)
        return self

    def inner_join(self, *joins: str) -> "SQLBuilder":
        self._statement.append(Clause.INNER_JOIN, *joins)
        return self

    def outer_join(self, *joins: str) -> "SQLBuilder":
        self._statement.append(Clause.OUTER_JOIN, *joins)
        return self

    def left_outer_join(self, *joins: str) -> "SQLBuilder":
        self._statement.append(Clause.LEFT_OUTER_JOIN, *joins)
        return self

    def right_outer_join(self, *joins: str) -> "SQLBuilder":
        self._statement.append(Clause.RIGHT_OUTER_JOIN, *joins)
        return self

    def where(self, *conditions: str) -> "SQLBuilder":
        """Add WHERE predicates; later ``and_()``/``or_()`` calls apply to WHERE"""
        self._statement.append_predicates(Clause.WHERE, *conditions)
        return self

    def having(self, *conditions: str) -> "SQLBuilder":
        """Add HAVING predicates; later ``and_()``/``or_()`` calls apply to HAVING"""
        self._statement.append_predicates(Clause.HAVING, *conditions)
        return self

    def and_(self) -> "SQLBuilder":
        """Start a new AND group in the last predicate clause touched"""
        self._statement.append_logic(Logic.AND)
        return self

    def or_(self) -> "SQLBuilder":
        """Start a new OR group in the last predicate clause touched"""
        self._statement.append_logic(Logic.OR)
        return self

    def group_by(self, *columns: str) -> "SQLBuilder":
        self._statement.append(Clause.GROUP_BY, *columns)
        return self

    def order_by(self, *columns: str) -> "SQLBuilder":
        self._statement.append(Clause.ORDER_BY, *columns)
        return self

    def set(self, *assignments: str) -> "SQLBuilder":
        self._statement.append(Clause.SETS, *assignments)
        return self

    def into_columns(self, *columns: str) -> "SQLBuilder":
        self._statement.append(Clause.COLUMNS, *columns)
        return self

    def into_values(self, *values: str) -> "SQLBuilder":
        self._statement.append(Clause.VALUES, *values)
        return self

    def values(self, column: str, value: str) -> "SQLBuilder":
        """Add one column and its value to an INSERT"""
        self._statement.append(Clause.COLUMNS, column)
        self._statement.append(Clause.VALUES, value)
        return self

    # Terminal operations

    def to_string(self) -> str:
        """Render the statement; empty string when no statement was started"""
        return self._renderer.render(self._statement)

    def write_to(self, sink: TextSink) -> str:
        """Render the statement into ``sink`` and return the text written"""
        return self._renderer.render(self._statement, sink)

    def clear(self) -> "SQLBuilder":
        """Reset to an empty builder"""
        self._statement = Statement()
        return self

    def clone(self) -> "SQLBuilder":
        """Create an independent copy of the builder"""
        new_builder = SQLBuilder(strict=self.strict)
        new_builder._statement = self._statement.copy()
        return new_builder

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        kind = self.kind.value if self.kind else None
        return f"<SQLBuilder kind={kind} strict={self.strict}>"


def sql_builder(strict: Optional[bool] = None) -> SQLBuilder:
    """Create a new SQL builder instance"""
    return SQLBuilder(strict=strict)
