"""Configuration management for CCRider."""

from ccrider.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from ccrider.core.config.models import AppConfig, LoggingConfig, RiderConfig

__all__ = [
    # Loaders
    "detect_format",
    "load_config",
    "load_app_config",
    "configure_logging",
    # Models
    "AppConfig",
    "LoggingConfig",
    "RiderConfig",
]
