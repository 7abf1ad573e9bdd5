"""
Entity store configuration settings.

Selects the store backend used by the gateway.

Dependencies: pydantic, pydantic_settings
System role: Store backend selection
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreSettings(BaseSettings):
    """Settings for the entity store backend."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    backend: Literal["sqlalchemy", "memory"] = Field(
        default="sqlalchemy",
        description="Store backend: 'sqlalchemy' (relational) or 'memory' (process-local)",
    )
