"""
Configuration management using Pydantic Settings.

Loads environment variables (prefixed ``RECORDS_``) with validation and
defaults. Settings are passed explicitly to the client; nothing here is
read at request time from module globals.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from records_client.constants import (
    DEFAULT_API_BASE,
    DEFAULT_COLORS,
    DEFAULT_LIMIT,
    DEFAULT_TIMEOUT_SECONDS,
    JSON_LOG_FORMAT,
    MIN_LIMIT,
    TEXT_LOG_FORMAT,
)

# Search for .env file in project root (parent of src/)
_project_root = Path(__file__).parent.parent.parent
_env_file = _project_root / ".env"

load_dotenv(dotenv_path=_env_file, override=False)


class Settings(BaseSettings):
    """
    Client configuration loaded from environment variables.

    All settings have defaults matching the public records endpoint
    contract and are validated on load.
    """

    model_config = SettingsConfigDict(
        env_prefix="RECORDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================================================
    # Endpoint Configuration
    # ========================================================================

    api_base: str = Field(
        default=DEFAULT_API_BASE,
        description="Full URL of the /records endpoint",
    )
    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        le=300,
        description="HTTP request timeout",
    )

    # ========================================================================
    # Query Defaults
    # ========================================================================

    page_limit: int = Field(
        default=DEFAULT_LIMIT,
        ge=MIN_LIMIT,
        description="Records per page",
    )
    default_colors: list[str] = Field(
        default_factory=lambda: list(DEFAULT_COLORS),
        description="Colours requested when the caller gives none",
    )

    # ========================================================================
    # Logging Configuration
    # ========================================================================

    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_format: str = Field(
        default="text",
        description="Log format: json or text",
    )

    # ========================================================================
    # Validators
    # ========================================================================

    @field_validator("api_base")
    @classmethod
    def validate_api_base(cls, v: str) -> str:
        """Require an absolute http(s) URL."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid api_base: {v}. Must be an http(s) URL")
        return v

    @field_validator("default_colors")
    @classmethod
    def validate_default_colors(cls, v: list[str]) -> list[str]:
        """Reject an empty colour list."""
        if not v:
            raise ValueError("default_colors must contain at least one colour")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of {valid_levels}"
            )
        return v_upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format."""
        valid_formats = {"json", "text"}
        v_lower = v.lower()
        if v_lower not in valid_formats:
            raise ValueError(
                f"Invalid log format: {v}. Must be 'json' or 'text'"
            )
        return v_lower


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure root logging from settings.

    Args:
        settings: Settings to read level and format from (default: loads env)
    """
    settings = settings or Settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=TEXT_LOG_FORMAT if settings.log_format == "text" else JSON_LOG_FORMAT,
        stream=sys.stderr,
    )
