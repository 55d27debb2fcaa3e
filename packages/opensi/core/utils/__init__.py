"""Shared utilities for OpenSI."""

from opensi.core.utils.logging import configure_logging, get_logger, log_performance

__all__ = [
    "configure_logging",
    "get_logger",
    "log_performance",
]
