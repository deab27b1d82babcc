"""Utilities for the configuration builder."""

from .serialization import to_json, to_toml, is_toml_write_available

__all__ = [
    "to_json",
    "to_toml",
    "is_toml_write_available",
]
