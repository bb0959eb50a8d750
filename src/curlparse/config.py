"""Configuration management with pydantic-settings."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from curlparse.logging import LOG_LEVELS


class CurlparseSettings(BaseSettings):
    """curlparse settings loaded from environment variables.

    All settings use the CURLPARSE_ prefix for environment variables.
    Settings only shape CLI output and logging; parse results never
    depend on them.
    """

    # Logging configuration
    log_level: str = Field(default="WARNING", description="Logging level")
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log output format: console or json",
    )

    # Output configuration
    output_format: Literal["json", "table"] = Field(
        default="json",
        description="Default output format for the parse command",
    )
    json_indent: int = Field(
        default=2,
        ge=0,
        description="Indentation used when printing JSON results",
    )

    model_config = SettingsConfigDict(
        env_prefix="CURLPARSE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unsupported log level: {value}. Supported: {', '.join(LOG_LEVELS)}")
        return level


# Global settings instance
_settings: CurlparseSettings | None = None


def get_settings() -> CurlparseSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = CurlparseSettings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance (useful for testing)."""
    global _settings
    _settings = None
