"""
Configuration Entry Points

Builds root namespaces and wires them onto host classes.

Usage:
    from simple_config import Configurable, configuration, configure

    # Standalone
    config = configure(lambda c: c.set("key", "value"))

    # Mixin, builds a new root on every call
    class App(Configurable):
        pass

    config = App.configure(lambda c: c.set("key", "value"))

    # Descriptor, builds once per host class on first access
    class Service:
        @configuration
        def settings(c):
            c.use_environment("mode")
            c.set("workers", body=workers)

    Service.settings.workers

Version: 1.0.0
"""

import logging
from typing import Any, Callable, Dict, Optional, Union

from .config import get_settings
from .interfaces import IEnvironmentMatcher
from .namespace import Namespace

logger = logging.getLogger(__name__)

NamespaceBody = Callable[[Namespace], Any]


def configure(
    body: NamespaceBody,
    environment: Union[str, IEnvironmentMatcher, None] = None,
) -> Namespace:
    """
    Build a root namespace.

    Args:
        body: Builder callable receiving the root namespace
        environment: Initial environment matcher or adapter name. Defaults to
                     SIMPLE_CONFIG_DEFAULT_ADAPTER when set.

    Returns:
        The built root namespace
    """
    if environment is None:
        environment = get_settings().default_adapter
    root = Namespace.build(None, body, environment=environment)
    logger.debug("Configured root namespace with keys %s", root.keys())
    return root


class Configurable:
    """Mixin giving a class a configure() builder entry point."""

    @classmethod
    def configure(
        cls,
        body: NamespaceBody,
        environment: Union[str, IEnvironmentMatcher, None] = None,
    ) -> Namespace:
        return configure(body, environment=environment)


class configuration:
    """
    Class attribute building a root namespace on first access.

    The root is memoized per host class, so subclasses get their own tree.
    """

    def __init__(
        self,
        body: Optional[NamespaceBody] = None,
        environment: Union[str, IEnvironmentMatcher, None] = None,
    ):
        self._body = body
        self._environment = environment
        self._attr_name: Optional[str] = None
        self._roots: Dict[type, Namespace] = {}

    def __call__(self, body: NamespaceBody) -> "configuration":
        """Allow configuration(environment=...) to be used as a decorator."""
        self._body = body
        return self

    def __set_name__(self, owner: type, name: str) -> None:
        self._attr_name = name

    def __get__(self, instance: Any, owner: type) -> Namespace:
        root = self._roots.get(owner)
        if root is None:
            logger.debug("Building configuration %s.%s", owner.__name__, self._attr_name)
            root = configure(self._body, environment=self._environment)
            self._roots[owner] = root
        return root

    def reset(self, owner: Optional[type] = None) -> None:
        """Drop memoized roots so the next access rebuilds them."""
        if owner is None:
            self._roots.clear()
        else:
            self._roots.pop(owner, None)
