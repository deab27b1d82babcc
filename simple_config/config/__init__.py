"""
Configuration Module

Runtime settings for the configuration builder.

Usage:
    from simple_config.config import get_settings, configure_logging

    settings = get_settings()
    configure_logging("DEBUG")
"""

from .settings import SimpleConfigSettings, get_settings, configure_logging

__all__ = [
    "SimpleConfigSettings",
    "get_settings",
    "configure_logging",
]
