"""
Environment Variable Matcher.

Matches an environment name when an environment variable of that name is set
to a non-falsy value.

Version: 1.0.0
"""

import os
from typing import Any, Iterable, Mapping, Optional

from ..config import get_settings


class EnvVarEnvironment:
    """
    Environment matcher backed by environment variables.

    A candidate matches when a variable named str(candidate) exists and its
    value, stripped and lower-cased, is not one of the falsy values
    ("", "0", "false", "no", "off" by default, see SIMPLE_CONFIG_ENV_FALSY_VALUES).

    Usage:
        # Read os.environ at match time
        matcher = EnvVarEnvironment()

        # Injected mapping for tests
        matcher = EnvVarEnvironment(environ={"FEATURE_X": "1"})
        matcher.matches("FEATURE_X")  # True
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        falsy_values: Optional[Iterable[str]] = None,
    ):
        self._environ = environ
        self._falsy_values = (
            frozenset(value.strip().lower() for value in falsy_values)
            if falsy_values is not None else None
        )

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    @property
    def falsy_values(self) -> frozenset:
        if self._falsy_values is not None:
            return self._falsy_values
        return frozenset(get_settings().env_falsy_values)

    def matches(self, candidate: Any) -> bool:
        value = self.environ.get(str(candidate))
        if value is None:
            return False
        return value.strip().lower() not in self.falsy_values

    def __repr__(self) -> str:
        source = "os.environ" if self._environ is None else "mapping"
        return f"EnvVarEnvironment(source={source})"
