"""
Clause Renderer
Turns a Statement's fragment lists into SQL text, one clause per line.
"""

import io
from typing import List, Optional, Protocol, Sequence

from sqlstmt.builder.exceptions import SQLRenderError
from sqlstmt.builder.statement import Clause, Logic, Part, Statement, StatementKind
from sqlstmt.core.logging import LoggerMixin


class TextSink(Protocol):
    """Anything rendered SQL can be written to"""

    def write(self, s: str) -> int: ...


class SafeAppendable:
    """
    Write-through wrapper around a text sink.

    Remembers whether anything has been written yet (used to place the
    newline between clauses) and keeps its own copy of the emitted text, so
    a sink that already held data does not leak into the result. A failing
    write aborts the render with ``SQLRenderError``.
    """

    def __init__(self, sink: Optional[TextSink] = None):
        self.sink = sink if sink is not None else io.StringIO()
        self.empty = True
        self._chunks: List[str] = []

    def append(self, text: str) -> "SafeAppendable":
        if self.empty and text:
            self.empty = False
        try:
            self.sink.write(text)
        except (OSError, ValueError) as e:
            raise SQLRenderError(f"Failed to write SQL fragment: {e}") from e
        self._chunks.append(text)
        return self

    def getvalue(self) -> str:
        return "".join(self._chunks)


JOIN_CLAUSES = (
    (Clause.JOIN, "JOIN"),
    (Clause.INNER_JOIN, "INNER JOIN"),
    (Clause.OUTER_JOIN, "OUTER JOIN"),
    (Clause.LEFT_OUTER_JOIN, "LEFT OUTER JOIN"),
    (Clause.RIGHT_OUTER_JOIN, "RIGHT OUTER JOIN"),
)


class ClauseRenderer(LoggerMixin):
    """
    Renders statements clause by clause.

    Every clause goes through ``sql_clause`` with its own keyword, wrapping
    and conjunction; the per-kind ``_build_*`` methods only fix the order.
    """

    def render(self, statement: Statement, sink: Optional[TextSink] = None) -> str:
        """Render ``statement``, writing into ``sink`` when given, and return the SQL"""
        if statement.kind is None:
            return ""

        out = SafeAppendable(sink)
        try:
            if statement.kind == StatementKind.SELECT:
                self._build_select(out, statement)
            elif statement.kind == StatementKind.INSERT:
                self._build_insert(out, statement)
            elif statement.kind == StatementKind.UPDATE:
                self._build_update(out, statement)
            elif statement.kind == StatementKind.DELETE:
                self._build_delete(out, statement)
        except SQLRenderError as e:
            self.logger.error("Rendering %s statement aborted: %s", statement.kind.value, e)
            raise

        sql = out.getvalue()
        self.logger.debug("Rendered %s statement (%d chars)", statement.kind.value, len(sql))
        return sql

    def sql_clause(
        self,
        out: SafeAppendable,
        keyword: str,
        parts: Sequence[Part],
        opening: str = "",
        closing: str = "",
        conjunction: str = ", ",
    ) -> None:
        """
        Emit one clause: keyword, opening delimiter, parts joined by
        ``conjunction``, closing delimiter.

        No conjunction is written next to a ``Logic`` marker; the marker's own
        text closes the current group and opens the next one.
        """
        if not parts:
            return

        if not out.empty:
            out.append("\n")
        if keyword:
            out.append(keyword)
            out.append(" ")
        out.append(opening)

        last: Optional[Part] = None
        for i, part in enumerate(parts):
            if i > 0 and not isinstance(part, Logic) and not isinstance(last, Logic):
                out.append(conjunction)
            out.append(part.value if isinstance(part, Logic) else part)
            last = part

        out.append(closing)

    def _joins(self, out: SafeAppendable, statement: Statement) -> None:
        for clause, keyword in JOIN_CLAUSES:
            self.sql_clause(out, keyword, statement.parts(clause), "", "", f"\n{keyword} ")

    def _where(self, out: SafeAppendable, statement: Statement) -> None:
        self.sql_clause(out, "WHERE", statement.parts(Clause.WHERE), "(", ")", " AND ")

    def _build_select(self, out: SafeAppendable, statement: Statement) -> None:
        keyword = "SELECT DISTINCT" if statement.distinct else "SELECT"
        self.sql_clause(out, keyword, statement.parts(Clause.SELECT), "", "", ", ")
        self.sql_clause(out, "FROM", statement.parts(Clause.TABLES), "", "", ", ")
        self._joins(out, statement)
        self._where(out, statement)
        self.sql_clause(out, "GROUP BY", statement.parts(Clause.GROUP_BY), "", "", ", ")
        self.sql_clause(out, "HAVING", statement.parts(Clause.HAVING), "(", ")", " AND ")
        self.sql_clause(out, "ORDER BY", statement.parts(Clause.ORDER_BY), "", "", ", ")

    def _build_insert(self, out: SafeAppendable, statement: Statement) -> None:
        self.sql_clause(out, "INSERT INTO", statement.parts(Clause.TABLES), "", "", "")
        self.sql_clause(out, "", statement.parts(Clause.COLUMNS), "(", ")", ", ")
        self.sql_clause(out, "VALUES", statement.parts(Clause.VALUES), "(", ")", ", ")

    def _build_delete(self, out: SafeAppendable, statement: Statement) -> None:
        self.sql_clause(out, "DELETE FROM", statement.parts(Clause.TABLES), "", "", "")
        self._where(out, statement)

    def _build_update(self, out: SafeAppendable, statement: Statement) -> None:
        self.sql_clause(out, "UPDATE", statement.parts(Clause.TABLES), "", "", "")
        self._joins(out, statement)
        self.sql_clause(out, "SET", statement.parts(Clause.SETS), "", "", ", ")
        self._where(out, statement)
