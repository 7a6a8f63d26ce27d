"""
Schema bootstrap configuration.

Dependencies: pydantic_settings
System role: Controls table creation and dev seeding at startup
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from portal_messaging.configs.base import BaseSettings


class BootstrapSettings(BaseSettings):
    """Startup schema bootstrap flags."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="BOOTSTRAP_",
        case_sensitive=False,
        extra="ignore",
    )

    create_tables_on_startup: bool = Field(
        default=False,
        description="Create missing tables when the application starts",
    )
    seed: bool = Field(
        default=False,
        description="Insert development seed rows (never enable in production)",
    )
