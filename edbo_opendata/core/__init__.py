"""
Core utilities and configuration for edbo-opendata.

This package provides logging configuration and environment-driven settings.
"""

from edbo_opendata.core.config import EdboClientConfig, Settings, settings
from edbo_opendata.core.logging_config import get_logger, setup_logging

__all__ = ["EdboClientConfig", "Settings", "settings", "get_logger", "setup_logging"]
