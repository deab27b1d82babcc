"""
Environment Factory.

Provides a centralized way to resolve and register environment matchers by
short name.
"""

import logging
from typing import Dict, List

from ..constants import ADAPTER_ENV, ADAPTER_MODE, ADAPTER_GLOBAL, BUILTIN_ADAPTER_UNREGISTER_MESSAGE
from ..exceptions import InvalidEnvironmentError, UnknownEnvironmentAdapterError
from ..interfaces import IEnvironmentMatcher, is_environment_matcher
from .env_var import EnvVarEnvironment
from .global_mode import GlobalModeEnvironment

logger = logging.getLogger(__name__)


class EnvironmentFactory:
    """
    Factory for resolving environment matchers by name.

    Built-in Environment Matchers:
        - 'env': EnvVarEnvironment - matches set environment variables
        - 'mode': GlobalModeEnvironment - matches the process-wide current mode
        - 'global': alias of 'mode'

    Names are case-insensitive.

    Usage:
        # Get built-in matcher
        matcher = EnvironmentFactory.get_environment('env')

        # Register custom matcher
        EnvironmentFactory.register('region', RegionEnvironment())
        matcher = EnvironmentFactory.get_environment('region')
    """

    _BUILTINS = (ADAPTER_ENV, ADAPTER_MODE, ADAPTER_GLOBAL)

    _environments: Dict[str, IEnvironmentMatcher] = {
        ADAPTER_ENV: EnvVarEnvironment(),
        ADAPTER_MODE: GlobalModeEnvironment(),
        ADAPTER_GLOBAL: GlobalModeEnvironment(),
    }

    @classmethod
    def get_environment(cls, name: str) -> IEnvironmentMatcher:
        """
        Get an environment matcher by name.

        Args:
            name: Matcher name ('env', 'mode', or a registered name)

        Returns:
            IEnvironmentMatcher instance

        Raises:
            UnknownEnvironmentAdapterError: If name is not registered
        """
        environment = cls._environments.get(str(name).lower())

        if environment is None:
            raise UnknownEnvironmentAdapterError(name, cls.list_available())

        logger.debug("Resolved environment adapter %r to %r", name, environment)
        return environment

    @classmethod
    def register(cls, name: str, environment: IEnvironmentMatcher) -> None:
        """
        Register a custom environment matcher.

        Args:
            name: Name to register the matcher under
            environment: Object implementing matches(candidate)

        Raises:
            InvalidEnvironmentError: If environment has no matches()
        """
        if not is_environment_matcher(environment):
            raise InvalidEnvironmentError(environment)
        cls._environments[str(name).lower()] = environment

    @classmethod
    def unregister(cls, name: str) -> None:
        """
        Unregister an environment matcher.

        Args:
            name: Name of the matcher to unregister
        """
        key = str(name).lower()
        if key in cls._BUILTINS:
            raise ValueError(BUILTIN_ADAPTER_UNREGISTER_MESSAGE.format(ADAPTER_NAME=key))
        cls._environments.pop(key, None)

    @classmethod
    def list_available(cls) -> List[str]:
        """List all registered environment matcher names."""
        return list(cls._environments.keys())
