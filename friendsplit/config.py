"""Configuration management"""

from functools import lru_cache
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Application settings"""

    # Application
    app_name: str = "Eat-N-Split"
    debug: bool = False
    api_prefix: str = "/api/v1"
    log_level: str = "INFO"

    # Friends
    avatar_base_url: str = "https://i.pravatar.cc/48"
    load_seed_friends: bool = True

    # CORS
    allowed_origins: List[str] = []

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one the logging module knows"""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("avatar_base_url")
    @classmethod
    def validate_avatar_base_url(cls, v: str) -> str:
        """Validate avatar URL is an http(s) URL"""
        if not v.startswith(("http://", "https://")):
            raise ValueError("AVATAR_BASE_URL must be an http(s) URL")
        return v


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
