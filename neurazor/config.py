"""Application configuration with validation."""
from typing import Literal
from functools import lru_cache
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Scoring engine settings, read from the environment and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "NeuRazor Scoring Engine"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # Redis
    REDIS_URL: str = "redis://localhost:6379/0"
    CACHE_ENABLED: bool = True
    CACHE_TTL_ACTIVE_VERSION: int = Field(default=300, ge=1, le=86400)  # 5 minutes

    # Versioning
    VERSION_NAME_PREFIX: str = Field(default="V", min_length=1, max_length=16)
    DEFAULT_ACTOR_ID: str = "system"

    # Weight sanity checks (warnings only, never enforced)
    WEIGHT_SUM_TOLERANCE: float = Field(default=0.001, ge=0.0, le=1.0)

    @field_validator("VERSION_NAME_PREFIX")
    @classmethod
    def validate_version_prefix(cls, v: str) -> str:
        if any(ch.isdigit() for ch in v):
            raise ValueError("VERSION_NAME_PREFIX must not contain digits")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
