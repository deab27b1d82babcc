"""
Namespace

Tree node holding settings and child namespaces. Exposes the builder surface
(set, namespace, use_environment) while being built and read accessors
(attribute access, get, get_bool, to_dict) afterwards.

Version: 1.0.0
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Union

from ..constants import (
    NO_SUCH_MEMBER_MESSAGE,
    NO_BOOL_FOR_NAMESPACE_MESSAGE,
    RESERVED_KEY_MESSAGE,
    ROOT_NAMESPACE_LABEL,
    VALUE_AND_BODY_MESSAGE,
)
from ..enum import MemberKind
from ..environments import EnvironmentFactory
from ..exceptions import (
    DuplicateKeyError,
    InvalidEnvironmentError,
    InvalidKeyError,
    NamespaceFrozenError,
    NoSuchMemberError,
)
from ..interfaces import IEnvironmentMatcher, is_environment_matcher
from ..utils.serialization import to_json, to_toml
from .setting import Setting
from .setting_block import SettingBlock

logger = logging.getLogger(__name__)

EnvironmentRef = Union[str, IEnvironmentMatcher, None]
NamespaceBody = Callable[["Namespace"], Any]


class Namespace:
    """
    Named node of a configuration tree.

    Namespaces are built once by running a builder callable against an empty
    namespace, then frozen. Child namespaces start with the environment
    matcher their parent had when they were declared.

    Usage:
        def build(c):
            c.use_environment("mode")
            c.set("debug", False)
            c.set("api_url", body=api_url)

            def database(db):
                db.set("host", "localhost")
                db.set("port", 5432)

            c.namespace("database", database)

        config = Namespace.build(None, build)

        config.debug                # False
        config.get_bool("api_url")  # truthiness of the resolved value
        config.database.port        # 5432
        config.to_dict()            # {"debug": False, "api_url": ..., "database": {...}}

    Keys naming a Namespace attribute (set, name, to_dict, ...) or starting
    with an underscore are rejected with InvalidKeyError.
    """

    def __init__(
        self,
        name: Optional[str] = None,
        environment: EnvironmentRef = None,
        path: Optional[str] = None,
    ):
        self._name = name
        self._path = path or name or ROOT_NAMESPACE_LABEL
        self._environment: Optional[IEnvironmentMatcher] = None
        self._settings: Dict[str, Setting] = {}
        self._children: Dict[str, Namespace] = {}
        self._members: Dict[str, MemberKind] = {}
        self._frozen = False

        self.use_environment(environment)

    @classmethod
    def build(
        cls,
        name: Optional[str],
        body: Optional[NamespaceBody] = None,
        environment: EnvironmentRef = None,
        path: Optional[str] = None,
    ) -> Namespace:
        """
        Build a namespace by running body against a fresh instance.

        Args:
            name: Namespace name, None for the root
            body: Builder callable receiving the namespace
            environment: Initial environment matcher or adapter name
            path: Dotted path used in error messages

        Returns:
            The built, frozen namespace
        """
        namespace = cls(name, environment=environment, path=path)
        if body is not None:
            body(namespace)
        namespace._frozen = True
        return namespace

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def path(self) -> str:
        return self._path

    @property
    def environment(self) -> Optional[IEnvironmentMatcher]:
        return self._environment

    @property
    def settings(self) -> List[Setting]:
        return list(self._settings.values())

    @property
    def children(self) -> List[Namespace]:
        return list(self._children.values())

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    # =========================================================================
    # Builder methods
    # =========================================================================

    def use_environment(self, environment: EnvironmentRef = None) -> None:
        """
        Set the environment matcher for settings declared after this call.

        Args:
            environment: Adapter name ('env', 'mode', ...), an object with
                         matches(candidate), or None for no change

        Raises:
            UnknownEnvironmentAdapterError: If the adapter name is not registered
            InvalidEnvironmentError: If the object has no matches()
        """
        self._check_mutable()
        if environment is None:
            return

        if isinstance(environment, str):
            environment = EnvironmentFactory.get_environment(environment)
        elif not is_environment_matcher(environment):
            raise InvalidEnvironmentError(environment)

        self._environment = environment

    def set(
        self,
        key: str,
        value: Any = None,
        body: Optional[Callable[..., Any]] = None,
    ) -> Setting:
        """
        Declare a setting.

        Args:
            key: Setting name
            value: Literal value
            body: Callable evaluated on every read, see SettingBlock

        Returns:
            The declared Setting

        Raises:
            ValueError: If both value and body are given
        """
        self._declare(key)
        if body is not None:
            if value is not None:
                raise ValueError(VALUE_AND_BODY_MESSAGE.format(KEY=key))
            value = SettingBlock(body, self._environment)

        setting = Setting(key=key, value=value)
        self._settings[key] = setting
        self._members[key] = MemberKind.SETTING
        logger.debug("Declared setting %s.%s (deferred=%s)", self._path, key, setting.is_deferred)
        return setting

    def namespace(self, key: str, body: Optional[NamespaceBody] = None) -> Namespace:
        """
        Declare a child namespace.

        Args:
            key: Namespace name
            body: Builder callable receiving the child namespace

        Returns:
            The built child namespace
        """
        self._declare(key)
        path = key if self._name is None else f"{self._path}.{key}"
        child = Namespace.build(key, body, environment=self._environment, path=path)

        self._children[key] = child
        self._members[key] = MemberKind.NAMESPACE
        logger.debug("Declared namespace %s", path)
        return child

    def _check_mutable(self) -> None:
        if self._frozen:
            raise NamespaceFrozenError(self._path)

    def _declare(self, key: Any) -> None:
        self._check_mutable()
        if not isinstance(key, str) or not key:
            raise InvalidKeyError(key)
        if key.startswith("_") or hasattr(type(self), key):
            raise InvalidKeyError(key, RESERVED_KEY_MESSAGE.format(KEY=key))
        if key in self._members:
            raise DuplicateKeyError(self._path, key)

    # =========================================================================
    # Read accessors
    # =========================================================================

    def get(self, key: str) -> Any:
        """
        Get a setting's resolved value or a child namespace.

        Raises:
            NoSuchMemberError: If key was never declared
        """
        kind = self._members.get(key)
        if kind is MemberKind.SETTING:
            return self._settings[key].resolved_value()
        if kind is MemberKind.NAMESPACE:
            return self._children[key]
        raise self._no_such_member(key)

    def get_bool(self, key: str) -> bool:
        """
        Get the truthiness of a setting's resolved value.

        Raises:
            NoSuchMemberError: If key was never declared or names a namespace
        """
        kind = self._members.get(key)
        if kind is MemberKind.SETTING:
            return self._settings[key].is_truthy()
        if kind is MemberKind.NAMESPACE:
            raise NoSuchMemberError(
                NO_BOOL_FOR_NAMESPACE_MESSAGE.format(KEY=key, NAMESPACE=self._path),
                namespace=self._path,
                key=key,
            )
        raise self._no_such_member(key)

    def keys(self) -> List[str]:
        """Declared setting and namespace keys in declaration order."""
        return list(self._members)

    def __getattr__(self, key: str) -> Any:
        members = self.__dict__.get("_members")
        if members is None or key not in members:
            raise self._no_such_member(key)
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._members

    def __dir__(self) -> List[str]:
        return sorted(set(super().__dir__()) | set(self._members))

    def _no_such_member(self, key: str) -> NoSuchMemberError:
        path = self.__dict__.get("_path", ROOT_NAMESPACE_LABEL)
        return NoSuchMemberError(
            NO_SUCH_MEMBER_MESSAGE.format(NAMESPACE=path, KEY=key),
            namespace=path,
            key=key,
        )

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_dict(self) -> Dict[str, Any]:
        """
        Resolve every setting and return the tree as nested dictionaries.

        The root namespace (name None) returns its contents directly, any
        other namespace returns {name: contents}.
        """
        contents: Dict[str, Any] = {}
        for key, kind in self._members.items():
            if kind is MemberKind.SETTING:
                contents.update(self._settings[key].to_dict())
            else:
                contents.update(self._children[key].to_dict())

        if self._name is None:
            return contents
        return {self._name: contents}

    def to_json(self, **kwargs: Any) -> str:
        """Resolve the tree and render it as JSON."""
        return to_json(self.to_dict(), **kwargs)

    def to_toml(self) -> str:
        """Resolve the tree and render it as TOML (requires tomli-w)."""
        return to_toml(self.to_dict())

    def __repr__(self) -> str:
        return f"Namespace(path={self._path!r}, keys={self.keys()!r})"
