"""Configuration management using pydantic-settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Export storage
    storage_dir: Path = Field(
        default=Path("storage"),
        description="Directory where type A orders are exported as CSV",
    )

    # Classification service
    classification_api_url: str = Field(
        default="",
        description="Base URL of the remote classification service",
    )
    classification_api_key: str = Field(
        default="",
        description="Bearer token for the classification service (optional)",
    )
    classification_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        le=120,
        description="Timeout for a single classification call",
    )

    # Server Settings
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    @field_validator("classification_api_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, value: str | None) -> str:
        """Normalize the base URL so paths can be appended directly."""
        if not value:
            return ""
        return str(value).strip().rstrip("/")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: str | None) -> str:
        return (value or "INFO").strip().upper()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
