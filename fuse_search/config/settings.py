"""Application settings and configuration management."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Search defaults with environment variable support (FUSE_SEARCH_*)."""

    # Search Configuration
    location: int = Field(default=0, ge=0)
    distance: int = Field(default=100, ge=0)
    threshold: float = Field(default=0.6, ge=0.0, le=1.0)
    max_pattern_length: int = Field(default=32, ge=1)
    is_case_sensitive: bool = Field(default=False)
    tokenize: bool = Field(default=False)

    # Logging
    log_level: str = Field(default="WARNING")
    log_format: str = Field(default="json")  # json or console

    model_config = SettingsConfigDict(
        env_prefix="FUSE_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
