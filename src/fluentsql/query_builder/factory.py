"""Query Builder Factory.

This module maps a dialect to its query builder. The dialect is always an
explicit input: either passed by the caller or read from the settings object
the caller hands over. Builders themselves never look at configuration.
"""

from typing import TYPE_CHECKING, Dict, Optional, Type, Union

from fluentsql.common.exceptions import ErrorCode, configuration_error
from fluentsql.constants.sql import Dialect
from fluentsql.logging import get_logger
from fluentsql.query_builder.base import SQLBuilder
from fluentsql.query_builder.mysql import MySQLQueryBuilder
from fluentsql.query_builder.postgres import PostgresQueryBuilder

if TYPE_CHECKING:
    from fluentsql.settings import _Settings

logger = get_logger(__name__)


class QueryBuilderFactory:
    """Factory for creating dialect-specific query builders.

    Example:
        >>> mysql = QueryBuilderFactory.create_mysql_builder()
        >>> postgres = QueryBuilderFactory.create("postgres")
    """

    _builders: Dict[Dialect, Type[SQLBuilder]] = {
        Dialect.MYSQL: MySQLQueryBuilder,
        Dialect.POSTGRES: PostgresQueryBuilder,
    }

    @staticmethod
    def create_mysql_builder() -> MySQLQueryBuilder:
        """Create a MySQL query builder."""
        return MySQLQueryBuilder()

    @staticmethod
    def create_postgres_builder() -> PostgresQueryBuilder:
        """Create a PostgreSQL query builder."""
        return PostgresQueryBuilder()

    @classmethod
    def create(cls, dialect: Union[Dialect, str]) -> SQLBuilder:
        """Create the query builder for ``dialect``.

        Args:
            dialect: Dialect enum member or its value (case-insensitive)

        Returns:
            A fresh builder for the dialect.

        Raises:
            FluentSQLError: If the dialect is not supported.
        """
        try:
            resolved = Dialect(dialect.lower() if isinstance(dialect, str) else dialect)
        except ValueError as e:
            supported = ", ".join(d.value for d in Dialect)
            raise configuration_error(
                f"Unsupported dialect: {dialect}. Supported dialects: {supported}",
                config_key="dialect",
                error_code=ErrorCode.DIALECT_NOT_SUPPORTED,
                cause=e,
            ) from e

        builder = cls._builders[resolved]()
        logger.info("Created query builder", extra={"dialect": resolved.value})
        return builder


def get_query_builder(settings: Optional["_Settings"] = None) -> SQLBuilder:
    """Get a query builder for the configured dialect.

    Args:
        settings: Settings to read ``builder.dialect`` from. Defaults to the
            application-wide instance from ``get_settings()``.

    Returns:
        A fresh builder for the configured dialect.

    Example:
        >>> # FLUENTSQL_BUILDER_DIALECT=postgres
        >>> builder = get_query_builder()
        >>> isinstance(builder, PostgresQueryBuilder)
        True
    """
    if settings is None:
        from fluentsql.settings import get_settings
        settings = get_settings()

    return QueryBuilderFactory.create(settings.builder.dialect)
