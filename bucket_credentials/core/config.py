"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables. The
host process owns the environment; nothing here is hard-coded per credential.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- AWS client timeouts and retries are configuration, not constants

Usage:
    from bucket_credentials.core.config import get_settings

    settings = get_settings()
    settings.aws_read_timeout
    settings.password_cache_ttl_seconds
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bucket_credentials.core.enums import Environment

RETRY_MODES = ("legacy", "standard", "adaptive")


class Settings(BaseSettings):
    """
    Runtime settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values

    Returns:
        Settings: Configuration loaded from environment.
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # AWS client configuration
    aws_region: str = Field(
        default="us-east-1",
        description="Default AWS region used when no credential region applies",
    )
    aws_endpoint_url: str | None = Field(
        default=None,
        description="Endpoint override for S3 and KMS (e.g. LocalStack). "
        "None uses the regional AWS endpoints.",
    )
    aws_connect_timeout: float = Field(
        default=10.0,
        description="Seconds to wait for a connection to S3/KMS",
    )
    aws_read_timeout: float = Field(
        default=30.0,
        description="Seconds to wait for a response from S3/KMS",
    )
    aws_max_attempts: int = Field(
        default=3,
        description="Total attempts per AWS call including the first (1 = fail fast)",
    )
    aws_retry_mode: str = Field(
        default="standard",
        description="botocore retry mode (legacy, standard, adaptive)",
    )

    # Password caching
    password_cache_ttl_seconds: float = Field(
        default=0,
        description="Seconds a decrypted password is reused. 0 re-fetches on every call.",
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
        Normalise and validate the logging level name.

        Args:
            v: Level name in any case.

        Returns:
            str: Upper-case level name.

        Raises:
            ValueError: If the name is not a standard logging level.
        """
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log_level: {v}")
        return level

    @field_validator("aws_connect_timeout", "aws_read_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """
        Validate timeouts are positive.

        Raises:
            ValueError: If timeout is zero or negative.
        """
        if v <= 0:
            raise ValueError("AWS timeouts must be greater than 0")
        return v

    @field_validator("aws_max_attempts")
    @classmethod
    def validate_max_attempts(cls, v: int) -> int:
        """
        Validate retry attempts are within a sane range.

        Raises:
            ValueError: If attempts are not between 1 and 10.
        """
        if not 1 <= v <= 10:
            raise ValueError("aws_max_attempts must be between 1 and 10")
        return v

    @field_validator("aws_retry_mode")
    @classmethod
    def validate_retry_mode(cls, v: str) -> str:
        """
        Validate botocore retry mode.

        Raises:
            ValueError: If mode is not supported by botocore.
        """
        mode = v.lower()
        if mode not in RETRY_MODES:
            raise ValueError(
                f"aws_retry_mode must be one of {', '.join(RETRY_MODES)}"
            )
        return mode

    @field_validator("password_cache_ttl_seconds")
    @classmethod
    def validate_cache_ttl(cls, v: float) -> float:
        """
        Validate cache TTL is not negative.

        Raises:
            ValueError: If TTL is negative.
        """
        if v < 0:
            raise ValueError("password_cache_ttl_seconds cannot be negative")
        return v

    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION

    @property
    def password_cache_enabled(self) -> bool:
        """Whether decrypted passwords are reused between calls."""
        return self.password_cache_ttl_seconds > 0


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache so settings are loaded once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
