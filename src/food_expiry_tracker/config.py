"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from food_expiry_tracker.domain.expiry_rules import DEFAULT_EXPIRY_DAYS

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    openai_api_key: str
    openai_ocr_model: str = "gpt-5.2"
    telegram_bot_token: str | None = None
    expiry_fallback_days: int = DEFAULT_EXPIRY_DAYS
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
