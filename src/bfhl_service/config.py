"""
Configuration settings for the BFHL service.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Application ===
    APP_NAME: str = "BFHL API"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # === Server ===
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # === Identity (attached to every POST /bfhl response) ===
    FULL_NAME: str = "john_doe"
    EMAIL: str = "john@xyz.com"
    ROLL_NUMBER: str = "ABCD123"

    # === Request Limits ===
    # Item count and length bounds live on BfhlRequest
    MAX_BODY_BYTES: int = 1_048_576  # 1 MiB

    # === CORS ===
    CORS_ALLOW_ORIGINS: list[str] = ["*"]

    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True


# Global settings instance
settings = Settings()
