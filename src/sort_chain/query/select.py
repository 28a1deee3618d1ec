"""SelectQuery: ORDER BY composition on SQLAlchemy statements."""

from __future__ import annotations

from typing import Any

import sqlalchemy as sa
from sqlalchemy.orm import Query
from sqlalchemy.sql import ColumnElement, Select

from .base import OrderableQuery


class SelectQuery(OrderableQuery):
    """Ordering view over a SQLAlchemy Core ``Select`` or ORM ``Query``.

    Nothing is executed: each call returns a new statement with ORDER BY
    clauses added. Collation, NULL placement and tie handling are up to the
    database.

    Keys may be column expressions / ORM attributes, the name of a selected
    column, or a callable receiving the statement's ``selected_columns``.
    """

    __slots__ = ("_statement", "_ordered")

    def __init__(self, statement: Select | Query, ordered: bool = False) -> None:
        if not isinstance(statement, (Select, Query)):
            raise TypeError(
                f"SelectQuery needs a SQLAlchemy Select or Query, "
                f"got {type(statement).__name__}."
            )
        self._statement = statement
        self._ordered = ordered

    @property
    def is_ordered(self) -> bool:
        return self._ordered

    @property
    def statement(self) -> Select | Query:
        return self._statement

    def unwrap(self) -> Select | Query:
        return self._statement

    def _order(self, key: Any, descending: bool) -> SelectQuery:
        clause = self._clause(key, descending)
        return SelectQuery(self._statement.order_by(None).order_by(clause), True)

    def _then(self, key: Any, descending: bool) -> SelectQuery:
        clause = self._clause(key, descending)
        return SelectQuery(self._statement.order_by(clause), True)

    def _clause(self, key: Any, descending: bool) -> ColumnElement:
        expr = self._resolve(key)
        return sa.desc(expr) if descending else sa.asc(expr)

    def _selected_columns(self):
        if isinstance(self._statement, Query):
            return self._statement.statement.selected_columns
        return self._statement.selected_columns

    def _resolve(self, key: Any) -> Any:
        if isinstance(key, ColumnElement) or hasattr(key, "__clause_element__"):
            return key
        if isinstance(key, str):
            columns = self._selected_columns()
            if key not in columns:
                raise KeyError(
                    f"Column '{key}' is not selected by the statement. "
                    f"Available: {list(columns.keys())}"
                )
            return columns[key]
        if callable(key):
            return key(self._selected_columns())
        raise TypeError(
            f"Cannot order a SQL statement by {type(key).__name__}. "
            "Use a column expression, a column name or a callable."
        )

    def __repr__(self) -> str:
        return f"SelectQuery(ordered={self._ordered})"
