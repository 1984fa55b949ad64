from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict

from fluentsql.constants.sql import Dialect
from .base import FluentSQLBaseSettings


class BuilderSettings(FluentSQLBaseSettings):
    """Query builder selection.

    Environment Variables:
        FLUENTSQL_BUILDER_DIALECT: mysql (default) or postgres
    """

    model_config = SettingsConfigDict(env_prefix="FLUENTSQL_BUILDER_")

    dialect: Dialect = Field(
        default=Dialect.MYSQL,
        description="SQL dialect used by get_query_builder()"
    )

    @field_validator("dialect", mode="before")
    @classmethod
    def normalize_dialect(cls, v):
        """Accept dialect names in any case (e.g. 'PostgreS')."""
        if isinstance(v, str):
            return v.strip().lower()
        return v
