"""
Configuration management for the School API
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = "sqlite:///./school.db"
    sql_echo: bool = False

    # API Settings
    api_host: str = "0.0.0.0"
    # The listening port comes from the plain PORT variable used by hosting platforms
    api_port: int = Field(default=4000, validation_alias=AliasChoices("PORT", "SCHOOL_API_PORT"))
    api_reload: bool = False
    graphiql: bool = True
    cors_origins: list[str] = ["http://localhost:3000"]

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "SCHOOL_"
        case_sensitive = False
        populate_by_name = True
        extra = "ignore"


# Global settings instance
settings = Settings()


def get_async_database_url(database_url: str) -> str:
    """Map a plain connection string onto the async driver SQLAlchemy should use."""
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if database_url.startswith("sqlite://"):
        return database_url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return database_url
