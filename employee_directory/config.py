"""
Configuration module for the employee directory.

This module provides centralized configuration management using Pydantic settings.
All configuration values can be overridden via environment variables or .env file.
"""

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENVIRONMENTS = ("development", "staging", "production")


class Settings(BaseSettings):
    """
    Application settings for the employee directory.

    All settings can be configured via environment variables.
    Settings are validated on instantiation to ensure correct configuration.

    Attributes:
        APP_NAME: Display name for the application
        SERVICE_NAME: Identifier used in logs and health responses
        ENVIRONMENT: Deployment environment (development, staging, production)
        DEBUG: Expose interactive API docs
        HOST: Server bind address
        PORT: Server port number
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        LOG_JSON: Emit JSON structured log lines
        HTTPS_REDIRECT: Redirect plain HTTP requests to HTTPS
        HSTS_MAX_AGE: Strict-Transport-Security max-age in seconds
        SLOW_REQUEST_THRESHOLD_MS: Threshold for slow request warnings
        ENABLE_TRACING: Export OpenTelemetry traces
        OTLP_ENDPOINT: OTLP collector endpoint for traces
    """

    # Application configuration
    APP_NAME: str = Field(
        default="Employee Directory",
        description="Display name for the application",
    )
    SERVICE_NAME: str = Field(
        default="employee-directory",
        description="Service identifier for logs and health checks",
    )
    ENVIRONMENT: str = Field(
        default="development",
        description="Deployment environment",
    )
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    # Server configuration
    HOST: str = Field(
        default="0.0.0.0",
        description="Server bind address",
    )
    PORT: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="Server port number",
    )

    # Logging configuration
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    LOG_JSON: bool = Field(
        default=False,
        description="Use JSON structured logging",
    )

    # Transport security
    HTTPS_REDIRECT: bool = Field(
        default=False,
        description="Redirect HTTP requests to HTTPS",
    )
    HSTS_MAX_AGE: int = Field(
        default=2592000,
        ge=0,
        description="Strict-Transport-Security max-age in seconds (30 days)",
    )

    SLOW_REQUEST_THRESHOLD_MS: float = Field(
        default=1000.0,
        gt=0,
        description="Requests slower than this are logged as warnings",
    )

    # Tracing configuration
    ENABLE_TRACING: bool = Field(
        default=False,
        description="Enable OpenTelemetry tracing",
    )
    OTLP_ENDPOINT: Optional[str] = Field(
        default=None,
        description="OTLP gRPC endpoint for trace export",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, value: str) -> str:
        """
        Validate and normalise the deployment environment name.

        Args:
            value: The environment name to validate

        Returns:
            The lower-cased environment name

        Raises:
            ValueError: If environment is unknown
        """
        value = value.strip().lower()
        if value not in ENVIRONMENTS:
            raise ValueError(
                f"ENVIRONMENT must be one of {', '.join(ENVIRONMENTS)}, got: {value}"
            )
        return value

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"


# Global settings instance
settings = Settings()
