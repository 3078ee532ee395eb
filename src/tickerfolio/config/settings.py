"""Application settings and configuration."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TICKERFOLIO_",
    )

    app_name: str = "Tickerfolio"
    app_version: str = "0.1.0"
    log_level: str = "INFO"

    # Portfolio defaults
    default_exchange_rate: float = Field(default=5.2, gt=0, description="USD -> BRL")
    default_currency: str = "USD"
    default_category: str = "Other"

    # Treemap container used when the caller does not send one
    treemap_width: float = Field(default=1200.0, gt=0)
    treemap_height: float = Field(default=600.0, gt=0)

    # Allowed drift from 100% when validating goal allocations
    goal_tolerance_percent: float = Field(default=0.01, ge=0)


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
