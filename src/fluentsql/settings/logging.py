import logging

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict

from .base import FluentSQLBaseSettings


class LoggingSettings(FluentSQLBaseSettings):
    """Logging configuration.

    Environment Variables:
        FLUENTSQL_LOG_LEVEL: DEBUG, INFO (default), WARNING, ERROR, CRITICAL
    """

    model_config = SettingsConfigDict(env_prefix="FLUENTSQL_LOG_")

    level: str = Field(
        default="INFO",
        description="Log level passed to setup_logging()"
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log level '{v}'")
        return level
