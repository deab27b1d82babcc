"""
Simple Config.

Hierarchical configuration builder: declare a tree of named settings grouped
into namespaces, where any setting may resolve differently per deployment
environment.

Architecture:
=============
- Namespace: tree node with a builder surface (set, namespace,
  use_environment) and read accessors (attribute access, get, get_bool,
  to_dict)
- Setting: named leaf holding a literal or a SettingBlock
- SettingBlock: deferred value re-evaluated on every read, able to
  short-circuit with environment(names, value)
- IEnvironmentMatcher: anything with matches(candidate) -> bool
- EnvironmentFactory: short-name registry ('env', 'mode')

Usage:
    from simple_config import configure, set_current_mode

    def timeout(block):
        block.environment(["qa", "staging"], 30)
        block.environment("production", 10)
        return 60

    def build(c):
        c.use_environment("mode")
        c.set("timeout", body=timeout)
        c.namespace("database", lambda db: db.set("host", "localhost"))

    config = configure(build)

    set_current_mode("production")
    config.timeout           # 10
    config.database.host     # "localhost"
    config.to_dict()         # {"timeout": 10, "database": {"host": "localhost"}}

Version: 0.1.0
"""

from .configurable import configure, Configurable, configuration
from .config import SimpleConfigSettings, get_settings, configure_logging
from .enum import BlockState, MemberKind
from .environments import (
    EnvVarEnvironment,
    GlobalModeEnvironment,
    EnvironmentFactory,
    set_current_mode,
    get_current_mode,
    reset_current_mode,
)
from .exceptions import (
    SimpleConfigError,
    InvalidEnvironmentError,
    UnknownEnvironmentAdapterError,
    NoSuchMemberError,
    DuplicateKeyError,
    InvalidKeyError,
    NamespaceFrozenError,
    BlockNotRunningError,
    SerializationError,
)
from .interfaces import IEnvironmentMatcher
from .namespace import Namespace, Setting, SettingBlock

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "configure",
    "Configurable",
    "configuration",
    # Tree
    "Namespace",
    "Setting",
    "SettingBlock",
    # Environments
    "IEnvironmentMatcher",
    "EnvVarEnvironment",
    "GlobalModeEnvironment",
    "EnvironmentFactory",
    "set_current_mode",
    "get_current_mode",
    "reset_current_mode",
    # Settings
    "SimpleConfigSettings",
    "get_settings",
    "configure_logging",
    # Enums
    "BlockState",
    "MemberKind",
    # Exceptions
    "SimpleConfigError",
    "InvalidEnvironmentError",
    "UnknownEnvironmentAdapterError",
    "NoSuchMemberError",
    "DuplicateKeyError",
    "InvalidKeyError",
    "NamespaceFrozenError",
    "BlockNotRunningError",
    "SerializationError",
]
