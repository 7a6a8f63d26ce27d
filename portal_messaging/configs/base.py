"""
Shared settings base for the messaging service.

Every settings group (database, API surface, auth headers, bootstrap)
inherits the .env loading and the service-wide runtime fields defined here.

Dependencies: pydantic, pydantic_settings
System role: Foundation for all configuration classes
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Runtime fields shared by every messaging settings group."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Deployment name reported in the startup log",
    )
    debug: bool = Field(
        default=False,
        description="Return tracebacks from unhandled errors (FastAPI debug mode)",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level passed to configure_logging()",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level
