from pydantic_settings import BaseSettings, SettingsConfigDict


class FluentSQLBaseSettings(BaseSettings):
    """Base class for all fluentsql settings.

    Shares one model config so every settings class reads ``.env`` files,
    ignores unknown keys and matches environment variables case-insensitively.
    Subclasses narrow their environment namespace with ``env_prefix``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__"
    )
