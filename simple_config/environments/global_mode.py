"""
Global Mode Matcher.

Matches an environment name against a process-wide "current mode" value
(development, staging, production, ...).

Usage:
    from simple_config.environments import set_current_mode, GlobalModeEnvironment

    set_current_mode("qa")
    GlobalModeEnvironment().matches("QA")  # True

Version: 1.0.0
"""

import logging
from enum import Enum
from typing import Any, Callable, Optional

from ..config import get_settings

logger = logging.getLogger(__name__)

_current_mode: Optional[str] = None


def _mode_name(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    return str(value)


def set_current_mode(mode: Any) -> None:
    """Set the process-wide current mode. None falls back to SIMPLE_CONFIG_ENVIRONMENT."""
    global _current_mode
    _current_mode = None if mode is None else _mode_name(mode)
    logger.debug("Current mode set to %r", _current_mode)


def get_current_mode() -> str:
    """Get the current mode, falling back to SIMPLE_CONFIG_ENVIRONMENT."""
    if _current_mode is not None:
        return _current_mode
    return get_settings().environment


def reset_current_mode() -> None:
    """Clear the explicitly set mode."""
    set_current_mode(None)


class GlobalModeEnvironment:
    """
    Environment matcher comparing candidates to a current mode value.

    Comparison is case-insensitive on the string form, so "production",
    "PRODUCTION" and an enum member whose value is "production" are equivalent.

    Args:
        mode_source: Zero-argument callable returning the current mode.
                     Defaults to get_current_mode.
    """

    def __init__(self, mode_source: Optional[Callable[[], Any]] = None):
        self._mode_source = mode_source or get_current_mode

    @property
    def current_mode(self) -> Optional[str]:
        mode = self._mode_source()
        return None if mode is None else _mode_name(mode)

    def matches(self, candidate: Any) -> bool:
        mode = self.current_mode
        if mode is None:
            return False
        return mode.lower() == _mode_name(candidate).lower()

    def __repr__(self) -> str:
        return f"GlobalModeEnvironment(current_mode={self.current_mode!r})"
