"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "fba-planner"
    debug: bool = False
    environment: str = "development"

    # Database (SQLite for local use, PostgreSQL for a shared deployment)
    database_url: str = "sqlite+aiosqlite:///./fba_planner.db"

    # Frontend
    frontend_url: str = "http://localhost:5173"

    # API
    api_prefix: str = "/api"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
