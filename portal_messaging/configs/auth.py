"""
Identity collaborator configuration.

Names the trusted headers an upstream auth proxy uses to forward the
authenticated identity, and the role that grants admin visibility.

Dependencies: pydantic_settings
System role: Identity lookup configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from portal_messaging.configs.base import BaseSettings


class AuthSettings(BaseSettings):
    """Identity header and role configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AUTH_",
        case_sensitive=False,
        extra="ignore",
    )

    user_id_header: str = Field(default="X-User-Id", description="Header carrying the user id")
    user_role_header: str = Field(default="X-User-Role", description="Header carrying the user role")
    admin_role: str = Field(default="admin", description="Role name with access to all support messages")
