"""
Configuration management for OrgAPI.

Uses pydantic-settings for environment variable management.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./orgapi.db"
    DEBUG: bool = False  # echo SQL statements

    # App
    APP_NAME: str = "OrgAPI"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Security
    JWT_SECRET_KEY: str = "change-me-in-production-use-strong-secret"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRATION_MINUTES: int = 60

    # Error tracking (disabled when unset)
    SENTRY_DSN: Optional[str] = None

    # Pagination
    DEFAULT_PAGE_SIZE: int = 10

    # Frontend
    FRONTEND_URL: str = "http://localhost:3000"


# Global settings instance
settings = Settings()
