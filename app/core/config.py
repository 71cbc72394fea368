"""
Configuration settings for the web app service
Resolved once at startup from the environment into an immutable value
"""
import sys
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "Kubernetes Web App"
APP_VERSION = "1.0.0"

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_LOG_FORMATS = ["json", "console"]


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_ignore_empty=True,
        frozen=True,
        extra="ignore",
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    timeout_keep_alive: int = 5  # seconds

    # Static assets, relative to the working directory
    static_dir: str = "static"

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("port")
    @classmethod
    def validate_port(cls, v):
        """Ensure the port is a usable TCP port."""
        if not 0 < v < 65536:
            raise ValueError("PORT must be between 1 and 65535")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        if v.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level must be one of: {VALID_LOG_LEVELS}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        if v.lower() not in VALID_LOG_FORMATS:
            raise ValueError(f"Log format must be one of: {VALID_LOG_FORMATS}")
        return v.lower()


def load_settings() -> Settings:
    """Resolve application settings, exiting on invalid configuration."""
    try:
        return Settings()
    except ValidationError as e:
        print(f"Configuration validation error: {e}", file=sys.stderr)
        raise SystemExit(1)
