"""PostgreSQL query builder implementation."""

from typing import Mapping, Sequence

from fluentsql.constants.sql import Dialect
from fluentsql.query_builder.base import SQLBuilder
from fluentsql.query_builder.mysql import MySQLQueryBuilder
from fluentsql.query_builder.state import QueryState


class PostgresQueryBuilder(SQLBuilder):
    """Query builder for PostgreSQL.

    PostgreSQL accepts the same statements as MySQL except for pagination,
    which uses the keyword form ``LIMIT 3 OFFSET 8``. The builder wraps a
    :class:`MySQLQueryBuilder` and forwards every step to it; ``limit`` lets
    the delegate run its checks and then replaces the pagination clause.

    Differences from MySQL:
        - ``LIMIT <start> OFFSET <offset>`` instead of ``LIMIT <start>, <offset>``
    """

    dialect = Dialect.POSTGRES

    def __init__(self) -> None:
        self._delegate = MySQLQueryBuilder()
        self._delegate.dialect = self.dialect

    @property
    def state(self) -> QueryState:
        return self._delegate.state

    def select(self, table: str, fields: Sequence[str]) -> SQLBuilder:
        self._delegate.select(table, fields)
        return self

    def insert(self, table: str, values: Mapping[str, str]) -> SQLBuilder:
        self._delegate.insert(table, values)
        return self

    def update(self, table: str, values: Mapping[str, str]) -> SQLBuilder:
        self._delegate.update(table, values)
        return self

    def delete(self, table: str) -> SQLBuilder:
        self._delegate.delete(table)
        return self

    def where(self, field: str, value: str, operator: str = "=") -> SQLBuilder:
        self._delegate.where(field, value, operator)
        return self

    def limit(self, start: int, offset: int) -> SQLBuilder:
        self._delegate.limit(start, offset)
        self._delegate.state.pagination = f" LIMIT {start} OFFSET {offset}"
        return self

    def render(self) -> str:
        return self._delegate.render()
