"""
HTTP server configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Server bind address and enabled entity routes
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseSettings):
    """Uvicorn bind settings and the entity kinds exposed over HTTP."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SERVER_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=9010, description="Bind port")
    entities: list[str] = Field(
        default=["book", "user", "stock"],
        description="Entity kinds to expose, as a JSON list (e.g. '[\"book\"]')",
    )
