"""Configuration management for phimotion."""

from phimotion.core.config.loader import (
    configure_logging_from_config,
    detect_format,
    load_config,
    load_motion_config,
)
from phimotion.core.config.models import LoggingConfig, MotionConfig, StaggerConfig

__all__ = [
    "LoggingConfig",
    "MotionConfig",
    "StaggerConfig",
    "configure_logging_from_config",
    "detect_format",
    "load_config",
    "load_motion_config",
]
