"""
Statement state
Ordered fragment lists per clause, collected by the fluent builder and read by the renderer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union


class StatementKind(Enum):
    """SQL statement types"""
    SELECT = "SELECT"
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class Logic(Enum):
    """Explicit conjunction markers; the value is the text emitted in place of the marker"""
    AND = ") \nAND ("
    OR = ") \nOR ("


class Clause(Enum):
    """Clause lists held by a statement"""
    SELECT = "select"
    TABLES = "tables"
    JOIN = "join"
    INNER_JOIN = "inner_join"
    OUTER_JOIN = "outer_join"
    LEFT_OUTER_JOIN = "left_outer_join"
    RIGHT_OUTER_JOIN = "right_outer_join"
    WHERE = "where"
    GROUP_BY = "group_by"
    HAVING = "having"
    ORDER_BY = "order_by"
    SETS = "sets"
    COLUMNS = "columns"
    VALUES = "values"


PREDICATE_CLAUSES = (Clause.WHERE, Clause.HAVING)

Part = Union[str, Logic]


def _empty_clauses() -> Dict[Clause, List[Part]]:
    return {clause: [] for clause in Clause}


@dataclass
class Statement:
    """
    Mutable state of one SQL statement under construction.

    Fragments are kept verbatim and in call order. ``last_predicates`` names
    the predicate list (WHERE or HAVING) that receives explicit AND/OR
    markers.
    """
    kind: Optional[StatementKind] = None
    distinct: bool = False
    clauses: Dict[Clause, List[Part]] = field(default_factory=_empty_clauses)
    last_predicates: Clause = Clause.WHERE

    def parts(self, clause: Clause) -> List[Part]:
        return self.clauses[clause]

    def append(self, clause: Clause, *parts: str) -> None:
        self.clauses[clause].extend(parts)

    def append_predicates(self, clause: Clause, *conditions: str) -> None:
        if clause not in PREDICATE_CLAUSES:
            raise ValueError(f"Not a predicate clause: {clause}")
        self.clauses[clause].extend(conditions)
        self.last_predicates = clause

    def append_logic(self, logic: Logic) -> None:
        self.clauses[self.last_predicates].append(logic)

    def copy(self) -> "Statement":
        return Statement(
            kind=self.kind,
            distinct=self.distinct,
            clauses={clause: list(parts) for clause, parts in self.clauses.items()},
            last_predicates=self.last_predicates,
        )
