"""
Tests for serialization helpers.

Version: 1.0.0
"""

import json
from datetime import date
from enum import Enum
from pathlib import Path

import pytest

from simple_config import SerializationError, configure
from simple_config.utils import serialization
from simple_config.utils.serialization import to_json, to_toml


class Color(Enum):
    RED = "red"


# =============================================================================
# JSON TESTS
# =============================================================================

class TestToJson:
    """Tests for JSON rendering."""

    def test_special_values(self):
        """Test dates, enums, paths, tuples and sets become JSON types."""
        data = {
            "day": date(2024, 1, 2),
            "color": Color.RED,
            "path": Path("/tmp/x"),
            "pair": (1, 2),
            "tags": {"a"},
        }

        assert json.loads(to_json(data)) == {
            "day": "2024-01-02",
            "color": "red",
            "path": "/tmp/x",
            "pair": [1, 2],
            "tags": ["a"],
        }

    def test_objects_with_to_dict(self):
        """Test namespaces stored as setting values serialize through to_dict()."""
        inner = configure(lambda c: c.set("k", "v"))
        outer = configure(lambda c: c.set("embedded", inner))

        assert json.loads(outer.to_json()) == {"embedded": {"k": "v"}}

    def test_unknown_objects_use_str(self):
        """Test other objects fall back to their string form."""
        class Token:
            def __str__(self):
                return "token"

        assert json.loads(to_json({"t": Token()})) == {"t": "token"}

    def test_indent_and_sort(self):
        """Test formatting options are passed through."""
        rendered = configure(lambda c: (c.set("b", 1), c.set("a", 2))).to_json(indent=None, sort_keys=True)

        assert rendered == '{"a": 2, "b": 1}'


# =============================================================================
# TOML TESTS
# =============================================================================

class TestToToml:
    """Tests for TOML rendering."""

    def test_unavailable(self, monkeypatch):
        """Test a clear error when tomli-w is not installed."""
        monkeypatch.setattr(serialization, "tomli_w", None)

        assert not serialization.is_toml_write_available()
        with pytest.raises(SerializationError, match="tomli-w"):
            to_toml({"k": "v"})

    def test_available(self):
        """Test availability is reported when tomli-w is installed."""
        pytest.importorskip("tomli_w")

        assert serialization.is_toml_write_available()

    def test_render(self):
        """Test TOML output of a nested tree."""
        pytest.importorskip("tomli_w")

        def build(c):
            c.set("service", "svc")
            c.namespace("db", lambda db: db.set("port", 5432))

        rendered = configure(build).to_toml()

        assert 'service = "svc"' in rendered
        assert "[db]" in rendered
        assert "port = 5432" in rendered

    def test_none_rejected(self):
        """Test None values cannot be rendered as TOML."""
        pytest.importorskip("tomli_w")

        with pytest.raises(SerializationError):
            configure(lambda c: c.set("missing", None)).to_toml()
