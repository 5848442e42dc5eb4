"""Application configuration."""

import os
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    record_store: Literal["supabase", "pocketbase"] = "supabase"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    pocketbase_url: str = "http://127.0.0.1:8090"
    pocketbase_token: str | None = None
    guests_collection: str = "guests"
    min_loading_ms: int = 1000
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def min_loading_seconds(self) -> float:
        """Floor duration for loading indicators, in seconds."""
        return max(self.min_loading_ms, 0) / 1000
