"""Configuration management for OpenSI core."""

from opensi.core.config.loader import (
    configure_logging_from_config,
    detect_format,
    load_config,
    load_core_config,
)
from opensi.core.config.models import ArchiveConfig, CoreConfig, LoggingConfig

__all__ = [
    # Loaders
    "detect_format",
    "load_config",
    "load_core_config",
    "configure_logging_from_config",
    # Models
    "ArchiveConfig",
    "CoreConfig",
    "LoggingConfig",
]
