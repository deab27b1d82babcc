"""
Interfaces for the configuration builder.
"""

from .environment_interfaces import IEnvironmentMatcher, is_environment_matcher

__all__ = [
    "IEnvironmentMatcher",
    "is_environment_matcher",
]
