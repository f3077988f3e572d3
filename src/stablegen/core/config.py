"""Configuration management for StableGen.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the STABLEGEN_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (STABLEGEN_* prefix)
2. .env file in the project root
3. Default values defined in StableGenConfig

Example .env file:
    STABLEGEN_API_KEY=sk-...
    STABLEGEN_API_HOST=https://api.stability.ai
    STABLEGEN_SERVER_PORT=7860

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.
This ensures a single source of truth for all configuration values across
the application.

Usage Example
-------------
    from stablegen.core.config import config

    print(config.api_host)
    print(config.has_api_key)

The API key is optional at load time. Its absence only becomes an error when
a generation is attempted (see ConfigurationError in core/errors.py), so the
UI can still start and explain what is missing.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_HOST = "https://api.stability.ai"


class StableGenConfig(BaseSettings):
    """Main configuration for StableGen.

    Attributes
    ----------
    Stability API:
        api_host : str
            Base URL of the Stability REST API (no trailing slash)
        api_key : str | None
            Bearer credential; required for any generation attempt
        request_timeout : float | None
            Client-side timeout in seconds. None disables the timeout

    Server:
        server_host : str
            Bind address for the web server
        server_port : int
            Port (1024-65535)
        gradio_share : bool
            Create public gradio.live link (keep False for local-only)

    Logging:
        log_level : Literal["DEBUG", "INFO", "WARNING", "ERROR"]

    Examples
    --------
        >>> custom_config = StableGenConfig(api_key="sk-test", request_timeout=30)
        >>> custom_config.has_api_key
        True
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="STABLEGEN_",
        case_sensitive=False,
    )

    # Stability API settings
    api_host: str = Field(
        default=DEFAULT_API_HOST,
        description="Base URL of the Stability REST API",
    )
    api_key: str | None = Field(
        default=None,
        description="Stability API key sent as a Bearer token",
    )
    request_timeout: float | None = Field(
        default=None,
        description="Request timeout in seconds (unset = wait for the service)",
        gt=0,
    )

    # Server settings
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    gradio_share: bool = Field(
        default=False,
        description="Create public gradio.live link (keep False for local-only)",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root log level",
    )

    @field_validator("api_host")
    @classmethod
    def validate_api_host(cls, v: str) -> str:
        """Ensure api_host is an http(s) URL without a trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("api_host must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("api_key")
    @classmethod
    def blank_api_key_is_missing(cls, v: str | None) -> str | None:
        """Treat an empty or whitespace-only key as not configured."""
        if v is None or not v.strip():
            return None
        return v.strip()

    @property
    def has_api_key(self) -> bool:
        """Whether a credential is available for generation."""
        return self.api_key is not None


# Global configuration instance
# Loads values from environment variables (STABLEGEN_* prefix) and .env file.
config = StableGenConfig()
