from abc import ABC, abstractmethod
from typing import Mapping, Optional, Sequence

from fluentsql.constants.sql import QueryType
from fluentsql.query_builder.state import QueryState


class SQLBuilder(ABC):
    """Chainable contract shared by every dialect-specific builder.

    A builder assembles one SQL statement at a time. A statement-initiating
    step (``select``, ``insert``, ``update``, ``delete``) discards whatever
    the builder held before and starts a new statement; the following steps
    add to it; ``render`` returns the final text.

    Every step except ``render`` returns the builder itself, which allows::

        sql = (
            builder.select("users", ["login", "phone"])
            .where("zipcode", "78005", ">")
            .limit(3, 8)
            .render()
        )

    Builders only generate SQL strings. They never execute queries, and
    they hold mutable state between calls, so one instance must not be
    shared across threads without external locking.
    """

    @abstractmethod
    def select(self, table: str, fields: Sequence[str]) -> "SQLBuilder":
        """Start a SELECT statement.

        Args:
            table: Table to read from
            fields: Column names, rendered in the given order

        Returns:
            The builder itself
        """
        pass

    @abstractmethod
    def insert(self, table: str, values: Mapping[str, str]) -> "SQLBuilder":
        """Start an INSERT statement.

        Args:
            table: Target table
            values: Column name -> literal value

        Returns:
            The builder itself
        """
        pass

    @abstractmethod
    def update(self, table: str, values: Mapping[str, str]) -> "SQLBuilder":
        """Start an UPDATE statement.

        Args:
            table: Target table
            values: Column name -> new literal value

        Returns:
            The builder itself
        """
        pass

    @abstractmethod
    def delete(self, table: str) -> "SQLBuilder":
        """Start a DELETE statement.

        Args:
            table: Target table

        Returns:
            The builder itself
        """
        pass

    @abstractmethod
    def where(self, field: str, value: str, operator: str = "=") -> "SQLBuilder":
        """Add a condition, joined to earlier ones with AND.

        Args:
            field: Column name
            value: Literal value, wrapped in single quotes as-is
            operator: Comparison operator

        Returns:
            The builder itself

        Raises:
            SequencingError: If no statement has been started
            UnsupportedStepError: If the statement cannot be filtered
        """
        pass

    @abstractmethod
    def limit(self, start: int, offset: int) -> "SQLBuilder":
        """Set the row-window clause, replacing any earlier one.

        Args:
            start: First argument of the dialect's LIMIT clause
            offset: Second argument of the dialect's LIMIT clause

        Returns:
            The builder itself

        Raises:
            SequencingError: If no statement has been started
            UnsupportedStepError: If the statement is not a SELECT
        """
        pass

    @abstractmethod
    def render(self) -> str:
        """Return the statement text terminated by ``;``.

        Does not modify the builder, so repeated calls return the same string.
        """
        pass

    @property
    @abstractmethod
    def state(self) -> QueryState:
        """The statement currently being built."""
        pass

    @property
    def query_type(self) -> Optional[QueryType]:
        """Kind of the current statement, None before any statement starts."""
        return self.state.kind

    def get_sql(self) -> str:
        """Alias of :meth:`render`."""
        return self.render()

    def __str__(self) -> str:
        return self.render()
