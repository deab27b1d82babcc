"""
Pytest Configuration.

Resets process-wide state (current mode, cached settings) around every test.
"""

import pytest

from simple_config import get_settings, reset_current_mode


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    """Isolate tests from SIMPLE_CONFIG_* variables and the global mode."""
    for name in (
        "SIMPLE_CONFIG_ENVIRONMENT",
        "SIMPLE_CONFIG_DEFAULT_ADAPTER",
        "SIMPLE_CONFIG_ENV_FALSY_VALUES",
        "SIMPLE_CONFIG_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    reset_current_mode()
    yield
    get_settings.cache_clear()
    reset_current_mode()


class RecordingMatcher:
    """Matcher accepting a fixed set of names and recording every check."""

    def __init__(self, *accepted):
        self.accepted = {str(name) for name in accepted}
        self.checked = []

    def matches(self, candidate):
        self.checked.append(candidate)
        return str(candidate) in self.accepted


@pytest.fixture
def recording_matcher():
    """Factory for RecordingMatcher instances."""
    return RecordingMatcher
