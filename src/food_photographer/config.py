"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    gemini_api_key: str
    generation_model: str = "imagen-4.0-generate-001"
    edit_model: str = "gemini-2.5-flash-image"
    generation_mime_type: str = "image/jpeg"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
