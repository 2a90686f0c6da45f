"""Configuration settings for Resume Reviewer."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings are optional and can be set via environment variables
    prefixed with ``RESUME_REVIEWER_`` or a .env file. When ``project_root``
    is set it takes precedence over any config file on disk.
    """

    model_config = SettingsConfigDict(
        env_prefix="RESUME_REVIEWER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Project location override
    project_root: Path | None = Field(
        default=None,
        description="Project root directory (skips config file discovery when set)",
    )
    default_person: str | None = Field(
        default=None,
        description="Person slug used when a command does not name one",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR",
    )

    @field_validator("project_root", "default_person", mode="before")
    @classmethod
    def blank_to_none(cls, v: object) -> object:
        """Treat empty environment values as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the application settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (useful for testing)."""
    global _settings
    _settings = None
