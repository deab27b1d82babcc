"""
Simple Config Exceptions Module.

This module defines all custom exceptions raised by the configuration builder.
"""

from typing import Any, Dict, Optional

from .constants import (
    ERROR_INVALID_ENVIRONMENT,
    ERROR_UNKNOWN_ENVIRONMENT_ADAPTER,
    ERROR_NO_SUCH_MEMBER,
    ERROR_DUPLICATE_KEY,
    ERROR_INVALID_KEY,
    ERROR_NAMESPACE_FROZEN,
    ERROR_BLOCK_NOT_RUNNING,
    ERROR_SERIALIZATION,
    INVALID_ENVIRONMENT_MESSAGE,
    UNKNOWN_ADAPTER_MESSAGE,
    DUPLICATE_KEY_MESSAGE,
    INVALID_KEY_MESSAGE,
    NAMESPACE_FROZEN_MESSAGE,
    BLOCK_NOT_RUNNING_MESSAGE,
    COMMA,
    SPACE,
)


class SimpleConfigError(Exception):
    """Base exception for all configuration builder errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        parts = [self.message]
        if self.error_code:
            parts.insert(0, f"[{self.error_code}]")
        return " ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }


class InvalidEnvironmentError(SimpleConfigError):
    """Raised when use_environment() is given an object without matches()."""

    def __init__(self, environment: Any, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            INVALID_ENVIRONMENT_MESSAGE.format(ENVIRONMENT=repr(environment)),
            error_code=ERROR_INVALID_ENVIRONMENT,
            details=details,
        )
        self.environment = environment


class UnknownEnvironmentAdapterError(SimpleConfigError):
    """Raised when a short adapter name is not in the registry."""

    def __init__(self, adapter_name: str, available: Optional[list] = None):
        available = available or []
        super().__init__(
            UNKNOWN_ADAPTER_MESSAGE.format(
                ADAPTER_NAME=adapter_name,
                AVAILABLE_ADAPTERS=(COMMA + SPACE).join(available),
            ),
            error_code=ERROR_UNKNOWN_ENVIRONMENT_ADAPTER,
            details={"available": available},
        )
        self.adapter_name = adapter_name


class NoSuchMemberError(SimpleConfigError, AttributeError):
    """
    Raised when reading a key that was never declared on a namespace.

    Also an AttributeError so that getattr(ns, key, default) and hasattr()
    behave as they do for any Python object.
    """

    def __init__(self, message: str, namespace: str, key: str):
        super().__init__(
            message,
            error_code=ERROR_NO_SUCH_MEMBER,
            details={"namespace": namespace, "key": key},
        )
        self.namespace = namespace
        self.key = key


class DuplicateKeyError(SimpleConfigError):
    """Raised when a key is declared twice in the same namespace."""

    def __init__(self, namespace: str, key: str):
        super().__init__(
            DUPLICATE_KEY_MESSAGE.format(KEY=key, NAMESPACE=namespace),
            error_code=ERROR_DUPLICATE_KEY,
            details={"namespace": namespace, "key": key},
        )
        self.namespace = namespace
        self.key = key


class InvalidKeyError(SimpleConfigError):
    """Raised when a setting or namespace key is empty, not a string, or reserved."""

    def __init__(self, key: Any, message: Optional[str] = None):
        super().__init__(
            message or INVALID_KEY_MESSAGE.format(KEY=key),
            error_code=ERROR_INVALID_KEY,
            details={"key": repr(key)},
        )
        self.key = key


class NamespaceFrozenError(SimpleConfigError):
    """Raised when a builder method is called on an already built namespace."""

    def __init__(self, namespace: str):
        super().__init__(
            NAMESPACE_FROZEN_MESSAGE.format(NAMESPACE=namespace),
            error_code=ERROR_NAMESPACE_FROZEN,
            details={"namespace": namespace},
        )
        self.namespace = namespace


class BlockNotRunningError(SimpleConfigError):
    """Raised when environment() is called outside of a block evaluation."""

    def __init__(self):
        super().__init__(BLOCK_NOT_RUNNING_MESSAGE, error_code=ERROR_BLOCK_NOT_RUNNING)


class SerializationError(SimpleConfigError):
    """Raised when a resolved tree cannot be rendered to the requested format."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code=ERROR_SERIALIZATION, details=details)
