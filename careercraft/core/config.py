"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # MongoDB
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "careercraft"

    # OpenAI (any OpenAI-compatible endpoint works via base_url)
    openai_api_key: Optional[str] = None
    openai_base_url: Optional[str] = None
    ai_model: str = "gpt-4-turbo-preview"

    # JWT Auth
    jwt_secret: str = Field(..., min_length=16)
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 60 * 24 * 7

    # App
    port: int = Field(4000, gt=0)
    frontend_origin: Optional[str] = None
    log_level: str = "INFO"

    @property
    def cors_origins(self) -> List[str]:
        """Comma-separated FRONTEND_ORIGIN, or every origin when unset."""
        if not self.frontend_origin:
            return ["*"]
        return [o.strip() for o in self.frontend_origin.split(",") if o.strip()]

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
