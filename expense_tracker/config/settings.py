"""
Configuration Management for the Expense Tracker

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Nothing in the tracker needs credentials or external services, so every
setting has a working default and only presentation and logging can be tuned.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="EXPENSE_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    app_name: str = Field(
        default="Expense Tracker",
        description="Name shown in the welcome banner"
    )

    # Presentation
    currency_symbol: str = Field(
        default="$",
        max_length=5,
        description="Symbol prefixed to amounts in listings and reports"
    )
    date_format: str = Field(
        default="%x",
        description="strftime format for record dates (locale short date by default)"
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Standard library log level for the structlog output"
    )
    json_logs: bool = Field(
        default=True,
        description="Render log lines as JSON instead of console text"
    )

    # Audit trail
    audit_enabled: bool = Field(
        default=True,
        description="Keep an in-memory audit trail of the session"
    )
    recent_events_limit: int = Field(
        default=100,
        ge=1,
        le=10000,
        description="Default number of events returned by recent-event lookups"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only allow standard level names."""
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unsupported log level: {v}. Allowed: {sorted(_LOG_LEVELS)}")
        return level


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()
