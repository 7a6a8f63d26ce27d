"""
HTTP and WebSocket surface configuration.

Dependencies: pydantic_settings
System role: Route prefixes, WebSocket path, and CORS origins
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from portal_messaging.configs.base import BaseSettings


class ApiSettings(BaseSettings):
    """Mount points for the messaging API."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="API_",
        case_sensitive=False,
        extra="ignore",
    )

    chat_prefix: str = Field(default="/api/chat", description="Prefix for chat and support routes")
    health_prefix: str = Field(default="/api", description="Prefix for health routes")
    websocket_path: str = Field(default="/ws", description="Realtime broadcast endpoint path")
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")
    host: str = Field(default="0.0.0.0", description="Bind host for uvicorn")
    port: int = Field(default=8000, description="Bind port for uvicorn")
