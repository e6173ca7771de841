"""Configuration management for tweenr."""

from tweenr.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
    load_curve,
)
from tweenr.core.config.models import AnimationConfig, AppConfig, LoggingConfig

__all__ = [
    # Loaders
    "configure_logging",
    "detect_format",
    "load_app_config",
    "load_config",
    "load_curve",
    # Models
    "AnimationConfig",
    "AppConfig",
    "LoggingConfig",
]
