"""Settings module providing configuration management for fluentsql.

Built on Pydantic Settings. Configuration is read from environment variables
and an optional ``.env`` file, validated on load, and exposed through a
singleton accessor.

Architecture:
    1. Base Layer (base.py):
       - FluentSQLBaseSettings: shared model config
    2. Domain Settings:
       - builder.py: dialect selection for get_query_builder()
       - logging.py: log level for setup_logging()
    3. Main Aggregator (main.py):
       - _Settings: aggregates the domain settings
       - get_settings(): singleton factory function
       - _reload_settings(): force reload from environment

Environment Variable Naming:
    - FLUENTSQL_BUILDER_DIALECT=postgres
    - FLUENTSQL_LOG_LEVEL=DEBUG
    - FLUENTSQL_APP_ENV=prod

Quick Start:
    >>> from fluentsql.settings import get_settings
    >>> settings = get_settings()
    >>> settings.builder.dialect
    <Dialect.MYSQL: 'mysql'>
"""

from .main import _Settings, get_settings, _reload_settings
from .base import FluentSQLBaseSettings
from .builder import BuilderSettings
from .logging import LoggingSettings

__all__ = [
    "get_settings",
    "BuilderSettings",
    "LoggingSettings",
]
