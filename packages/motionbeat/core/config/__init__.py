"""Configuration management for motionbeat."""

from motionbeat.core.config.loader import (
    configure_logging_from_config,
    detect_format,
    load_app_config,
    load_config,
    load_scene,
    load_video,
)
from motionbeat.core.config.models import AppConfig, CompositionConfig, LoggingConfig

__all__ = [
    # Loaders
    "configure_logging_from_config",
    "detect_format",
    "load_app_config",
    "load_config",
    "load_scene",
    "load_video",
    # Models
    "AppConfig",
    "CompositionConfig",
    "LoggingConfig",
]
