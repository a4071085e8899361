"""Configuration management for the model gateway.

Settings are read from environment variables (a local .env file is loaded
first). Provider credentials and routing live with the routing layer, not here.
"""

import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _str_to_bool(value: str) -> bool:
    """Convert string to boolean. Accepts: 'true', '1', 'yes', 'on' (case-insensitive)"""
    return value.lower() in ("true", "1", "yes", "on")


class EnvConfig:
    """Gateway settings from environment variables."""

    def __init__(self):
        self.log_level: str = os.environ.get("LOG_LEVEL", "INFO").upper()
        self.log_file: str = os.environ.get("LOG_FILE", "logs/modelgateway.log")
        self.verify_ssl: bool = _str_to_bool(os.environ.get("VERIFY_SSL", "true"))
        self.request_timeout_secs: int = int(
            os.environ.get("REQUEST_TIMEOUT_SECS", "300")
        )
        # When enabled, upstream error detail is echoed back to clients
        self.expose_error_detail: bool = _str_to_bool(
            os.environ.get("EXPOSE_ERROR_DETAIL", "false")
        )

    @classmethod
    def from_env(cls) -> "EnvConfig":
        """Load configuration from environment variables"""
        return cls()


_cached_config: Optional[EnvConfig] = None


def set_config(config: EnvConfig) -> None:
    """Override the runtime configuration"""
    global _cached_config
    _cached_config = config


def clear_config_cache() -> None:
    """Clear the configuration cache"""
    global _cached_config
    _cached_config = None


def get_config() -> EnvConfig:
    """Get current runtime configuration, loading it from the environment once."""
    global _cached_config
    if _cached_config is None:
        _cached_config = EnvConfig.from_env()
    return _cached_config
