"""
Environment Interfaces.

Defines the protocol an environment matcher must satisfy to drive
environment-conditional settings.

Version: 1.0.0
"""

from __future__ import annotations
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IEnvironmentMatcher(Protocol):
    """
    Interface for deciding whether a named deployment environment is active.

    Implementations may read ambient process state (environment variables,
    a global mode value) but must not mutate it.

    Built-in implementations:
    - EnvVarEnvironment: matches names of set environment variables
    - GlobalModeEnvironment: matches the process-wide current mode

    Example:
        class TestOnly:
            def matches(self, candidate: Any) -> bool:
                return str(candidate) == "test"

        config = configure(lambda c: c.use_environment(TestOnly()))
    """

    def matches(self, candidate: Any) -> bool:
        """
        Check whether the candidate environment is active.

        Args:
            candidate: Environment name as declared in a setting block

        Returns:
            True if the candidate is the active environment
        """
        ...


def is_environment_matcher(obj: Any) -> bool:
    """Return True if obj exposes a callable matches()."""
    return callable(getattr(obj, "matches", None))
