"""
Application configuration using Pydantic settings.
"""
from pydantic_settings import BaseSettings
from pydantic import AliasChoices, Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Report API Configuration
    report_api_base_url: str = Field(
        default="https://generativelanguage.googleapis.com",
        description="Base URL for the generative-text API"
    )
    report_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("report_api_key", "gemini_api_key", "api_key"),
        description="API key for the generative-text API (empty disables reports)"
    )
    report_model: str = Field(
        default="gemini-2.5-flash",
        description="Model used to generate analytical reports"
    )
    report_timeout: float = Field(
        default=60.0,
        description="HTTP timeout in seconds for report generation"
    )
    report_language: str = Field(
        default="Vietnamese",
        description="Language the generated report is written in"
    )

    # Retry Configuration
    max_retry_attempts: int = Field(
        default=3,
        description="Maximum number of retry attempts for API calls"
    )
    retry_backoff_multiplier: int = Field(
        default=1,
        description="Multiplier for exponential backoff"
    )
    retry_min_wait: int = Field(
        default=1,
        description="Minimum wait time in seconds between retries"
    )
    retry_max_wait: int = Field(
        default=10,
        description="Maximum wait time in seconds between retries"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )

    # CORS Configuration
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins (use specific origins in production)"
    )

    # Rate Limiting
    report_rate_limit: str = Field(
        default="10/minute",
        description="Rate limit applied to report generation per client"
    )

    # Application Settings
    app_name: str = Field(
        default="Hoa Cuong Agricultural Traceability API",
        description="Application name"
    )
    app_version: str = Field(
        default="1.0.0",
        description="Application version"
    )
    debug: bool = Field(
        default=False,
        description="Debug mode"
    )

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
