"""Query builder module for SQL generation across dialects.

Query builders assemble one SQL statement at a time from chained steps and
render it as text. They do NOT execute queries.

Architecture:
    - base.py: SQLBuilder, the abstract chainable contract
    - state.py: QueryState, the statement being built
    - mysql.py: MySQLQueryBuilder, the default dialect
    - postgres.py: PostgresQueryBuilder, wraps the MySQL builder and
      changes only the LIMIT syntax
    - factory.py: dialect -> builder mapping

Example:
    >>> from fluentsql.query_builder import QueryBuilderFactory
    >>> builder = QueryBuilderFactory.create("postgres")
    >>> (builder.select("users", ["login", "password"])
    ...     .where("zipcode", "78005", ">")
    ...     .limit(3, 8)
    ...     .render())
    "SELECT login, password FROM users WHERE zipcode > '78005' LIMIT 3 OFFSET 8;"

Dialect Differences:
    MySQL:
        - LIMIT 3, 8
    PostgreSQL:
        - LIMIT 3 OFFSET 8
"""

from fluentsql.query_builder.base import SQLBuilder
from fluentsql.query_builder.state import QueryState
from fluentsql.query_builder.mysql import MySQLQueryBuilder
from fluentsql.query_builder.postgres import PostgresQueryBuilder
from fluentsql.query_builder.factory import QueryBuilderFactory, get_query_builder

__all__ = [
    "SQLBuilder",
    "QueryState",
    "MySQLQueryBuilder",
    "PostgresQueryBuilder",
    "QueryBuilderFactory",
    "get_query_builder",
]
