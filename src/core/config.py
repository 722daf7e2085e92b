"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from
environment variables.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Complex values (the app registry) are JSON in the environment

Usage:
    from src.core.config import get_settings

    settings = get_settings()
    subdomain = settings.kintone_subdomain
    timeout = settings.kintone_timeout

Environment:
    KINTONE_SUBDOMAIN=example
    KINTONE_APPS='{"customers": {"appId": 12, "apiToken": "..."}}'
    KINTONE_USERNAME=alice          # optional, with KINTONE_PASSWORD
    KINTONE_PASSWORD=s3cret         # optional, with KINTONE_USERNAME
    KINTONE_AUTH=YWxpY2U6czNjcmV0   # optional, instead of username/password
"""

from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.constants import KINTONE_TIMEOUT_DEFAULT
from src.core.enums import Environment

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """
    Client settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values (only for non-sensitive config)

    Returns:
        Settings: Configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # kintone connection
    kintone_subdomain: str = Field(
        description="Subdomain (e.g. 'example') or custom domain ending in '.com'",
    )
    kintone_apps: dict[str, dict[str, Any]] = Field(
        default_factory=dict,
        description="App registry as JSON: name -> {appId, guestId, name, apiToken}",
    )
    kintone_timeout: float = Field(
        default=KINTONE_TIMEOUT_DEFAULT,
        description="HTTP request timeout in seconds",
    )

    # Client-level credentials (optional; per-app tokens are used otherwise)
    kintone_username: str | None = Field(
        default=None,
        description="Login name for password authentication",
    )
    kintone_password: str | None = Field(
        default=None,
        description="Login password for password authentication",
    )
    kintone_auth: str | None = Field(
        default=None,
        description="Pre-encoded base64 'username:password' value",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate and normalize the log level name.

        Args:
            v: Level name (any case).

        Returns:
            str: Upper-case level name.

        Raises:
            ValueError: If the level is not one of the standard five.
        """
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(sorted(_LOG_LEVELS))}")
        return level

    @field_validator("kintone_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Reject non-positive timeouts."""
        if v <= 0:
            raise ValueError("kintone_timeout must be positive")
        return v

    @model_validator(mode="after")
    def validate_credentials(self) -> "Settings":
        """
        Validate client-level credential settings.

        Raises:
            ValueError: If only one of username/password is set, or if a
                username/password pair and KINTONE_AUTH are both set.
        """
        has_username = bool(self.kintone_username)
        has_password = self.kintone_password is not None
        if has_username != has_password:
            raise ValueError("kintone_username and kintone_password must be set together")
        if has_username and self.kintone_auth:
            raise ValueError(
                "Set either kintone_username/kintone_password or kintone_auth, not both"
            )
        return self

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        """Check if running in CI environment."""
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()  # type: ignore[call-arg]  # Pydantic Settings loads from env
