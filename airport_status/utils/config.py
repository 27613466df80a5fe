"""
Environment configuration loader with validation for airport-status.
"""

import os
from typing import Optional, Dict, Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

DEFAULT_API_URL = "https://soa.smext.faa.gov/asws/api/airport/status"


class AirportStatusConfig(BaseModel):
    """Configuration model for the airport status fetcher with validation."""

    # Remote API
    api_base_url: str = Field(
        default=DEFAULT_API_URL, description="Airport status endpoint, without the code"
    )
    request_timeout: Optional[float] = Field(
        default=None, gt=0, description="Request timeout in seconds, None for no timeout"
    )

    # Output
    error_prefix_length: int = Field(
        default=29, ge=1, description="Characters of an error message that get printed"
    )
    log_level: str = Field(default="WARNING", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        if not v:
            raise ValueError("AIRPORT_STATUS_API_URL must not be empty")
        return v.rstrip("/")


def load_config(env_file: Optional[str] = None) -> AirportStatusConfig:
    """
    Load configuration from environment variables and .env file.

    Args:
        env_file: Optional path to .env file. If None, looks for .env in current directory.

    Returns:
        AirportStatusConfig: Validated configuration object

    Raises:
        ValueError: If configuration is invalid
    """
    if env_file is None:
        env_file = ".env"

    if os.path.exists(env_file):
        load_dotenv(env_file)

    timeout = os.getenv("AIRPORT_STATUS_REQUEST_TIMEOUT")

    try:
        config_data: Dict[str, Any] = {
            "api_base_url": os.getenv("AIRPORT_STATUS_API_URL", DEFAULT_API_URL),
            "request_timeout": float(timeout) if timeout else None,
            "error_prefix_length": int(os.getenv("AIRPORT_STATUS_ERROR_PREFIX", "29")),
            "log_level": os.getenv("AIRPORT_STATUS_LOG_LEVEL", "WARNING"),
        }
        return AirportStatusConfig(**config_data)
    except ValueError as e:
        raise ValueError(f"Configuration validation failed: {e}") from e


# Global configuration instance
_config: Optional[AirportStatusConfig] = None


def get_config() -> AirportStatusConfig:
    """
    Get the global configuration instance, loading it if necessary.

    Returns:
        AirportStatusConfig: The global configuration object
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config
