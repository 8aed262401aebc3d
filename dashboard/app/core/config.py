"""Application configuration and settings management."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

LOCAL_API_BASE_URL = "http://127.0.0.1:8000"
DEPLOYED_API_BASE_URL = "https://madde-backend.onrender.com"


class Settings(BaseSettings):
    """Central dashboard settings loaded from environment variables."""

    app_name: str = Field(default="Madde Company Dashboard")

    # Explicit override; otherwise resolved from ``environment``.
    api_base_url: Optional[str] = Field(default=None)
    environment: str = Field(default="local")

    # ``None`` keeps httpx's own default timeout.
    request_timeout: Optional[float] = Field(default=None)

    share_min: float = Field(default=0.0)
    share_max: float = Field(default=200.0)

    log_level: str = Field(default="INFO")

    model_config = {
        "env_file": ".env",
        "env_prefix": "MADDE_",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @property
    def resolved_api_base_url(self) -> str:
        if self.api_base_url and self.api_base_url.strip():
            return self.api_base_url.strip().rstrip("/")
        if self.environment.strip().lower() in ("local", "dev", "development"):
            return LOCAL_API_BASE_URL
        return DEPLOYED_API_BASE_URL


@lru_cache()
def get_settings() -> Settings:
    """Return cached dashboard settings."""

    return Settings()  # type: ignore[arg-type]


settings = get_settings()
"""Eagerly instantiated settings for modules that prefer direct import."""
