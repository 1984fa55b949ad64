"""Constants module for fluentsql.

This module contains the constant values and enumerations used throughout
the package. It has no dependencies on other fluentsql modules.
"""

from fluentsql.constants.sql import (
    CONDITION_QUERY_TYPES,
    PAGINATION_QUERY_TYPES,
    STATEMENT_TERMINATOR,
    Dialect,
    QueryType,
)

__all__ = [
    "QueryType",
    "Dialect",
    "CONDITION_QUERY_TYPES",
    "PAGINATION_QUERY_TYPES",
    "STATEMENT_TERMINATOR",
]
