"""
Configuration module for Column Comparer.
Settings are loaded from environment variables (optionally via a .env file).
"""
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Settings(BaseSettings):
    """Application settings loaded from COLUMN_COMPARER_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="COLUMN_COMPARER_",
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Logging
    LOG_LEVEL: str = Field(default="WARNING", description="Console logging level")
    LOG_DIR: Optional[Path] = Field(
        default=None,
        description="Directory for DEBUG log files (unset = no log file)"
    )

    # Report Settings
    CSV_SEPARATOR: str = Field(
        default=",",
        description="Separator used when printing full rows"
    )

    # Tabular data provider used when the file extension does not pick one
    DEFAULT_PROVIDER: str = Field(
        default="openpyxl",
        description="Provider implementation name"
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Ensure the log level is one logging understands."""
        v = v.upper()
        if v not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            raise ValueError("LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return v

    @field_validator("CSV_SEPARATOR")
    @classmethod
    def validate_separator(cls, v):
        """The separator is a single character."""
        if len(v) != 1:
            raise ValueError("CSV_SEPARATOR must be exactly one character")
        return v


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance (created on first use)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
