"""
Environment Matchers.

Built-in matchers and the factory resolving them by short name.
"""

from .env_var import EnvVarEnvironment
from .global_mode import (
    GlobalModeEnvironment,
    set_current_mode,
    get_current_mode,
    reset_current_mode,
)
from .environment_factory import EnvironmentFactory

__all__ = [
    "EnvVarEnvironment",
    "GlobalModeEnvironment",
    "set_current_mode",
    "get_current_mode",
    "reset_current_mode",
    "EnvironmentFactory",
]
