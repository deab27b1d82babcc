"""
Shared Serialization Utilities.

Renders resolved configuration trees as JSON or TOML text.

Usage:
    from simple_config.utils.serialization import to_json, to_toml

    json_str = to_json(config.to_dict())
    toml_str = to_toml(config.to_dict())  # requires tomli-w

Version: 1.0.0
"""

import json
from datetime import datetime, date
from enum import Enum
from pathlib import PurePath
from typing import Any, Dict

from ..exceptions import SerializationError

# Try to import tomli_w for writing TOML
try:
    import tomli_w
except ImportError:
    tomli_w = None


def _serialize_value(value: Any) -> Any:
    """
    Serialize a value to a JSON/TOML-compatible format.

    Handles:
    - datetime/date objects -> ISO format strings
    - Enum values -> underlying value
    - Paths -> strings
    - Pydantic models -> dict (via model_dump)
    - Objects with to_dict() method (namespaces, settings)
    - Nested dicts, lists, tuples and sets
    """
    if value is None:
        return None
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, PurePath):
        return str(value)
    elif isinstance(value, dict):
        return {str(k): _serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple, set, frozenset)):
        return [_serialize_value(v) for v in value]
    elif hasattr(value, 'model_dump'):
        return _serialize_value(value.model_dump())
    elif hasattr(value, 'to_dict'):
        return _serialize_value(value.to_dict())
    elif isinstance(value, (str, int, float, bool)):
        return value
    else:
        return str(value)


def to_json(
    data: Dict[str, Any],
    indent: int = 2,
    sort_keys: bool = False,
) -> str:
    """
    Serialize dictionary to JSON string.

    Args:
        data: Dictionary to serialize
        indent: Indentation level (default: 2)
        sort_keys: Sort dictionary keys (default: False)

    Raises:
        SerializationError: If serialization fails
    """
    try:
        serialized = _serialize_value(data)
        return json.dumps(serialized, indent=indent, sort_keys=sort_keys, default=str)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Failed to serialize to JSON: {e}") from e


def to_toml(data: Dict[str, Any]) -> str:
    """
    Serialize dictionary to TOML string.

    TOML has no null, so trees containing None values cannot be rendered.

    Raises:
        SerializationError: If tomli-w is not installed or serialization fails
    """
    if not is_toml_write_available():
        raise SerializationError(
            "TOML writing requires 'tomli-w' package. "
            "Install with: pip install simple-config[toml]"
        )

    try:
        serialized = _serialize_value(data)
        return tomli_w.dumps(serialized)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Failed to serialize to TOML: {e}") from e


def is_toml_write_available() -> bool:
    """Check if TOML writing is available."""
    return tomli_w is not None
