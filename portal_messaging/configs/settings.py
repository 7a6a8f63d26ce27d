"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from portal_messaging.configs.api import ApiSettings
from portal_messaging.configs.auth import AuthSettings
from portal_messaging.configs.base import BaseSettings
from portal_messaging.configs.bootstrap import BootstrapSettings
from portal_messaging.configs.database import DatabaseSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    database: DatabaseSettings = DatabaseSettings()
    api: ApiSettings = ApiSettings()
    auth: AuthSettings = AuthSettings()
    bootstrap: BootstrapSettings = BootstrapSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from portal_messaging.configs import get_settings
        settings = get_settings()
    """
    return Settings()
