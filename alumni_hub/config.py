"""
Application Configuration

Loads environment variables and provides configuration settings
for all services in the application.
"""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    APP_NAME: str = "alumni-hub"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"

    # Database (any SQLAlchemy URL; SQLite file by default)
    DATABASE_URL: str = "sqlite:///./alumni_hub.db"
    DB_ECHO: bool = False

    # Seed the default accounts, events and fundraisers into an empty store
    SEED_DEFAULT_DATA: bool = True

    # Search Settings
    SEARCH_DEFAULT_LIMIT: int = 10
    SEARCH_MAX_QUERY_LENGTH: int = 200

    # Accounts
    MIN_PASSWORD_LENGTH: int = 6
    DEFAULT_COLLEGE: str = "State University"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Allow extra fields in .env without raising validation errors


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Application settings
    """
    return Settings()


settings = get_settings()
