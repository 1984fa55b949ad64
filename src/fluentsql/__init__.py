from fluentsql.__version__ import __version__

from fluentsql.constants import Dialect, QueryType
from fluentsql.common.exceptions import (
    ErrorCode,
    FluentSQLError,
    SequencingError,
    UnsupportedStepError,
)
from fluentsql.query_builder import (
    MySQLQueryBuilder,
    PostgresQueryBuilder,
    QueryBuilderFactory,
    QueryState,
    SQLBuilder,
    get_query_builder,
)

__all__ = [
    "__version__",

    "SQLBuilder",
    "QueryState",
    "MySQLQueryBuilder",
    "PostgresQueryBuilder",
    "QueryBuilderFactory",
    "get_query_builder",

    "QueryType",
    "Dialect",

    # Exceptions (public API)
    "FluentSQLError",
    "ErrorCode",
    "SequencingError",
    "UnsupportedStepError",
]
