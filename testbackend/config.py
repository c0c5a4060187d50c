# -*- coding: utf-8 -*-
"""Location: ./testbackend/config.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Test Backend Configuration.
This module defines configuration settings for the test backend using Pydantic.
Settings can be overridden via environment variables or a ``.env`` file.

Environment variables:
- DISABLE_HTTPS_REDIRECT: "true" or "1" disables the HTTP to HTTPS redirect
- DATA_ROOT: Root directory served by /util/files (default: ./data)
- MOCK_DEFAULT_COUNT / MOCK_MAX_COUNT: Defaults and upper bound for /mock batches
- FILES_MAX_CONTENT_CHARS: Maximum characters of file content returned
- ALLOCATE_MAX_MB: Upper bound for a single /util/allocate call
- LOG_LEVEL / LOG_FORMAT / LOG_REQUESTS: Logging behaviour

Examples:
    >>> from testbackend.config import Settings
    >>> s = Settings(_env_file=None, disable_https_redirect="1")
    >>> s.disable_https_redirect
    True
    >>> Settings(_env_file=None, disable_https_redirect="yes").disable_https_redirect
    False
"""

# Standard
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal, Optional

# Third-Party
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_TRUTHY_REDIRECT_VALUES = {"true", "1"}


class Settings(BaseSettings):
    """Test backend configuration.

    All settings can be overridden via environment variables, e.g.
    ``DATA_ROOT=/srv/data`` or ``LOG_FORMAT=json``.
    """

    app_name: str = Field(default="Test Backend Service", description="Title shown in the OpenAPI document")
    environment: Literal["development", "staging", "production"] = Field(default="production", description="Deployment environment")
    docs_enabled: bool = Field(default=False, description="Expose /swagger and /openapi.json outside development")

    host: str = Field(default="127.0.0.1", description="Host to bind to")
    port: int = Field(default=8080, ge=1, le=65535, description="Port to bind to")

    disable_https_redirect: bool = Field(default=False, description="Skip the HTTPS redirect middleware (only 'true' or '1' enable this)")

    data_root: Path = Field(default=Path("data"), description="Root directory browsed by /util/files")
    files_max_content_chars: int = Field(default=16_000, ge=1, description="Maximum characters of file content returned by /util/files")

    mock_default_count: int = Field(default=10, ge=1, description="Default number of records for /mock batches")
    mock_max_count: int = Field(default=1000, ge=1, description="Upper clamp for /mock batch sizes")
    mock_locale: str = Field(default="en_US", description="Faker locale used for generated records")

    allocate_max_mb: int = Field(default=1024, ge=1, description="Upper clamp for a single /util/allocate call")

    build_informational_version: Optional[str] = Field(default=None, description="Informational version (e.g. git commit) reported by /util/version")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", description="Root log level")
    log_format: Literal["text", "json"] = Field(default="text", description="Log output format")
    log_requests: bool = Field(default=True, description="Log one line per HTTP request")
    log_detailed_requests: bool = Field(default=False, description="Include (masked) request headers in request logs")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore", case_sensitive=False)

    @field_validator("disable_https_redirect", mode="before")
    @classmethod
    def parse_redirect_flag(cls, value: Any) -> Any:
        """Accept only "true" (any case) or "1" as enabling values.

        Args:
            value: Raw value from the environment or constructor.

        Returns:
            Boolean flag for string input, the original value otherwise.
        """
        if isinstance(value, str):
            return value.strip().lower() in _TRUTHY_REDIRECT_VALUES
        return value

    @field_validator("data_root", mode="before")
    @classmethod
    def default_blank_data_root(cls, value: Any) -> Any:
        """Treat an empty or whitespace-only DATA_ROOT as unset.

        Args:
            value: Raw value from the environment or constructor.

        Returns:
            The default ``data`` path for blank strings, the original value otherwise.
        """
        if value is None or (isinstance(value, str) and not value.strip()):
            return Path("data")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value: Any) -> Any:
        """Normalize log level names to upper case.

        Args:
            value: Raw log level.

        Returns:
            Upper-cased level for string input.
        """
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @property
    def docs_available(self) -> bool:
        """Whether the interactive API docs should be mounted.

        Returns:
            True in development or when docs are explicitly enabled.
        """
        return self.docs_enabled or self.environment == "development"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: A cached instance of the Settings class.

    Examples:
        >>> get_settings() is get_settings()
        True
    """
    return Settings()


settings = get_settings()
