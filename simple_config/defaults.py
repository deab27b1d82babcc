"""
Default Configuration Values

Fallback values used when no SIMPLE_CONFIG_* environment variable is set.

Version: 1.0.0
"""

from typing import List, Optional


class Defaults:
    """Default values for the runtime settings."""

    ENVIRONMENT: str = "development"
    DEFAULT_ADAPTER: Optional[str] = None
    ENV_FALSY_VALUES: List[str] = ["", "0", "false", "no", "off"]
    LOG_LEVEL: str = "WARNING"
