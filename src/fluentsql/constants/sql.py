"""SQL and query-related constants.

This module contains the statement kinds and SQL dialects known to the
query builders. These constants sit at the bottom of the package and can be
imported by any other module without creating circular dependencies.
"""

from enum import Enum
from typing import FrozenSet


class QueryType(str, Enum):
    """SQL statement kind.

    A builder tags its in-progress statement with one of these values when a
    statement-initiating step runs. The kind decides which later steps are
    accepted.

    Categories:
    - Data Query: SELECT
    - Data Manipulation: INSERT, UPDATE, DELETE
    """

    SELECT = "SELECT"
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class Dialect(str, Enum):
    """SQL dialect supported by the query builders.

    Values:
        MYSQL: MySQL / MariaDB syntax (default)
            - ``LIMIT <start>, <offset>`` pagination
        POSTGRES: PostgreSQL syntax
            - ``LIMIT <start> OFFSET <offset>`` pagination
    """

    MYSQL = "mysql"
    POSTGRES = "postgres"


# Statement kinds that accept a WHERE condition
CONDITION_QUERY_TYPES: FrozenSet[QueryType] = frozenset(
    {QueryType.SELECT, QueryType.UPDATE, QueryType.DELETE}
)

# Statement kinds that accept a row-window (LIMIT) clause
PAGINATION_QUERY_TYPES: FrozenSet[QueryType] = frozenset({QueryType.SELECT})

STATEMENT_TERMINATOR = ";"
