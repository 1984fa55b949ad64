"""MySQL query builder implementation."""

from typing import FrozenSet, Mapping, Sequence

from fluentsql.common.exceptions import sequencing_error, unsupported_step_error
from fluentsql.constants.sql import (
    CONDITION_QUERY_TYPES,
    PAGINATION_QUERY_TYPES,
    STATEMENT_TERMINATOR,
    Dialect,
    QueryType,
)
from fluentsql.logging import get_logger
from fluentsql.query_builder.base import SQLBuilder
from fluentsql.query_builder.state import QueryState

logger = get_logger(__name__)


class MySQLQueryBuilder(SQLBuilder):
    """Query builder for MySQL, the default dialect.

    Renders pagination in the two-argument comma form ``LIMIT 3, 8`` and
    conditions as ``field operator 'value'``. Values are quoted but not
    escaped; callers must sanitize them.

    Example:
        >>> MySQLQueryBuilder().select("users", ["login"]).limit(3, 8).render()
        'SELECT login FROM users LIMIT 3, 8;'
    """

    dialect = Dialect.MYSQL

    def __init__(self) -> None:
        self._query = QueryState()

    @property
    def state(self) -> QueryState:
        return self._query

    def _reset(self, kind: QueryType, base: str) -> None:
        self._query = QueryState(kind=kind, base=base)
        logger.debug(
            "Started statement",
            extra={"dialect": self.dialect.value, "query_type": kind.value},
        )

    def _require(self, step: str, allowed: FrozenSet[QueryType]) -> None:
        """Fail fast unless the current statement kind accepts ``step``."""
        if not self._query.is_initialized:
            raise sequencing_error(step)
        if self._query.kind not in allowed:
            raise unsupported_step_error(step, self._query.kind, allowed)

    def select(self, table: str, fields: Sequence[str]) -> SQLBuilder:
        self._reset(QueryType.SELECT, f"SELECT {', '.join(fields)} FROM {table}")
        return self

    def insert(self, table: str, values: Mapping[str, str]) -> SQLBuilder:
        columns = ", ".join(values.keys())
        literals = ", ".join(self.quote_value(value) for value in values.values())
        self._reset(QueryType.INSERT, f"INSERT INTO {table} ({columns}) VALUES ({literals})")
        return self

    def update(self, table: str, values: Mapping[str, str]) -> SQLBuilder:
        assignments = ", ".join(
            f"{column} = {self.quote_value(value)}" for column, value in values.items()
        )
        self._reset(QueryType.UPDATE, f"UPDATE {table} SET {assignments}")
        return self

    def delete(self, table: str) -> SQLBuilder:
        self._reset(QueryType.DELETE, f"DELETE FROM {table}")
        return self

    def where(self, field: str, value: str, operator: str = "=") -> SQLBuilder:
        self._require("where", CONDITION_QUERY_TYPES)
        self._query.conditions.append(f"{field} {operator} {self.quote_value(value)}")
        return self

    def limit(self, start: int, offset: int) -> SQLBuilder:
        self._require("limit", PAGINATION_QUERY_TYPES)
        self._query.pagination = f" LIMIT {start}, {offset}"
        return self

    def render(self) -> str:
        query = self._query
        sql = query.base
        if query.conditions:
            sql += " WHERE " + " AND ".join(query.conditions)
        if query.pagination is not None:
            sql += query.pagination
        sql += STATEMENT_TERMINATOR

        logger.debug("Rendered statement", extra={"dialect": self.dialect.value, "sql": sql})
        return sql

    @staticmethod
    def quote_value(value: str) -> str:
        """Wrap a literal in single quotes without escaping it."""
        return f"'{value}'"
