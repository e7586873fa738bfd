"""Configuration for the Bot API client."""

from .logging_config import configure_logging, configure_logging_from_settings
from .settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "configure_logging_from_settings", "get_settings"]
