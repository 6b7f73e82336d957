"""
Application Configuration
Loads settings from environment variables with validation
"""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Uses pydantic-settings for validation and type coercion.

    Scoring weights are intentionally not settings; they live in
    app.intelligence.weights so a code version always scores the same way.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # ============================================
    # Application Settings
    # ============================================
    app_name: str = "SellerHealthIntelligence"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # ============================================
    # Server Settings
    # ============================================
    host: str = "0.0.0.0"
    port: int = 8000

    # ============================================
    # Rate Limiting
    # ============================================
    seller_health_rate_limit: str = "60/minute"

    # ============================================
    # CORS Settings
    # ============================================
    cors_origins: str = "http://localhost:3000,http://localhost:5173"

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins string into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",")]


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Uses lru_cache to avoid loading .env file on every call.
    """
    return Settings()


# Export a default settings instance for convenience
settings = get_settings()
