"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from src.core.config import settings

    secret = settings.secret_key

    if settings.is_development:
        # Dev-specific behavior
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.enums import Environment


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values (only for non-sensitive config)
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, detailed errors)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="Ball Badminton Association API",
        description="Application name",
    )
    app_version: str = Field(
        default="1.0.0",
        description="Application version",
    )

    # Security configuration
    secret_key: str = Field(
        description="Secret key for JWT token signing (must be kept secure)",
    )
    algorithm: str = Field(
        default="HS256",
        description="JWT signing algorithm",
    )
    access_token_expire_minutes: int = Field(
        default=15,
        description="Access token expiration time in minutes",
    )

    # API configuration
    api_base_url: str = Field(
        default="http://localhost:8000",
        description="API base URL used in Problem Details type URIs",
    )
    api_v1_prefix: str = Field(
        default="/api/v1",
        description="API v1 route prefix",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("access_token_expire_minutes")
    @classmethod
    def validate_token_expiry(cls, v: int) -> int:
        """
        Validate access token lifetime is positive.

        Raises:
            ValueError: If minutes is zero or negative.
        """
        if v <= 0:
            raise ValueError("access_token_expire_minutes must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """
        Upper-case and validate the log level name.

        Raises:
            ValueError: If level is not a standard logging level.
        """
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log_level: {v}")
        return level

    @field_validator("api_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """
        Remove trailing slashes from URLs.

        Args:
            v: URL string.

        Returns:
            str: URL without trailing slash.
        """
        return v.rstrip("/")

    @property
    def is_development(self) -> bool:
        """True if environment is DEVELOPMENT."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """True if environment is TESTING."""
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        """True if environment is CI."""
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        """True if environment is PRODUCTION."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache so settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()  # type: ignore[call-arg]  # Pydantic Settings loads from env


# Global settings instance (singleton pattern)
settings = get_settings()
