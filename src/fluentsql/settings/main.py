from typing import Optional

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from .base import FluentSQLBaseSettings
from .builder import BuilderSettings
from .logging import LoggingSettings


class _Settings(FluentSQLBaseSettings):

    model_config = SettingsConfigDict(env_prefix="FLUENTSQL_")

    app_env: str = Field(
        default="dev",
        description="Application deployment environment (e.g., dev, qa, prod)"
    )
    builder: BuilderSettings = Field(
        default_factory=BuilderSettings,
        description="Query builder configuration"
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration"
    )


_settings: Optional[_Settings] = None


def get_settings(force_reload: bool = False) -> _Settings:
    """Get the singleton settings instance for the application.

    Settings are loaded from environment variables and ``.env`` on first
    access and reused afterwards.

    Args:
        force_reload: If True, creates a new Settings instance even if
                     one already exists. Useful for testing or when
                     environment variables have changed.

    Returns:
        Settings: The singleton Settings instance

    Example:
        ```python
        settings = get_settings()
        assert settings is get_settings()

        new_settings = get_settings(force_reload=True)
        assert new_settings is not settings
        ```

    Note:
        Not thread-safe for the initial creation. Load settings once at
        application startup before threading begins.
    """
    global _settings

    if _settings is None or force_reload:
        _settings = _Settings()

    return _settings


def _reload_settings() -> _Settings:
    """Force reload of settings.

    This is primarily for testing purposes where you need to reset
    the singleton instance.

    Returns:
        A fresh _Settings instance
    """
    global _settings
    _settings = None
    return get_settings(force_reload=True)
