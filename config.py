"""
Configuration module for environment variable validation and type-safe config.

Settings are read once from the environment and validated before any
client is built from them.
"""
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_REGION = "us-east-1"
DEFAULT_TIMEOUT = 30


@dataclass
class Config:
    """Type-safe configuration object with validated environment variables."""

    aws_region: str = DEFAULT_REGION
    support_endpoint: Optional[str] = None
    aws_access_key_id: Optional[str] = None
    aws_secret_access_key: Optional[str] = None
    aws_session_token: Optional[str] = None
    support_secret_name: Optional[str] = None
    request_timeout: int = DEFAULT_TIMEOUT
    log_level: str = "INFO"

    @property
    def endpoint(self) -> str:
        """Service endpoint, derived from the region unless overridden."""
        if self.support_endpoint:
            return self.support_endpoint.rstrip("/")
        return f"https://support.{self.aws_region}.amazonaws.com"

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create Config instance from environment variables.

        Raises:
            ValueError: If environment variables are invalid.
        """
        aws_region = os.environ.get("AWS_REGION") or DEFAULT_REGION

        raw_timeout = os.environ.get("SUPPORT_REQUEST_TIMEOUT", str(DEFAULT_TIMEOUT))
        try:
            request_timeout = int(raw_timeout)
        except ValueError:
            raise ValueError(
                f"SUPPORT_REQUEST_TIMEOUT must be an integer, got: {raw_timeout}"
            )
        if request_timeout <= 0:
            raise ValueError(
                f"SUPPORT_REQUEST_TIMEOUT must be positive, got: {request_timeout}"
            )

        log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
        valid_log_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if log_level not in valid_log_levels:
            raise ValueError(
                f"LOG_LEVEL must be one of {valid_log_levels}, got: {log_level}"
            )

        return cls(
            aws_region=aws_region,
            support_endpoint=os.environ.get("SUPPORT_ENDPOINT") or None,
            aws_access_key_id=os.environ.get("AWS_ACCESS_KEY_ID") or None,
            aws_secret_access_key=os.environ.get("AWS_SECRET_ACCESS_KEY") or None,
            aws_session_token=os.environ.get("AWS_SESSION_TOKEN") or None,
            support_secret_name=os.environ.get("SUPPORT_SECRET_NAME") or None,
            request_timeout=request_timeout,
            log_level=log_level,
        )


_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config: The validated configuration object

    Raises:
        ValueError: If environment variables are invalid.
    """
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() re-reads the environment."""
    global _config
    _config = None
