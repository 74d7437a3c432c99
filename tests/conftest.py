"""
Shared test fixtures for the tjbot test suite.

Nothing here needs LED hardware: drivers are either unavailable (no Blinka
board) or replaced with MagicMock objects.
"""

import pytest
from unittest.mock import MagicMock

import tjbot.config


# ---------------------------------------------------------------------------
# Collaborators for shine / pulse
# ---------------------------------------------------------------------------

class Recorder:
    """Collects calls so tests can assert on order and content."""

    def __init__(self):
        self.calls = []

    def __call__(self, value):
        self.calls.append(value)


@pytest.fixture
def render():
    """Render callable that records every color it is given."""
    return Recorder()


@pytest.fixture
def sleep():
    """Sleep callable that records delays instead of blocking."""
    return Recorder()


# ---------------------------------------------------------------------------
# Hardware
# ---------------------------------------------------------------------------

@pytest.fixture
def no_hardware(monkeypatch):
    """Force every LED driver to report its library as missing."""
    monkeypatch.setattr("tjbot.leds.display.HAS_NEOPIXEL", False)
    monkeypatch.setattr("tjbot.leds.display.HAS_DOTSTAR", False)
    monkeypatch.setattr("tjbot.leds.display.HAS_PWM", False)


def mock_channels():
    """Three distinct PWM channel mocks (red, green, blue)."""
    return (MagicMock(name="red"), MagicMock(name="green"), MagicMock(name="blue"))


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def fresh_config_manager(monkeypatch):
    """Each test starts without a cached global ConfigManager."""
    monkeypatch.setattr(tjbot.config, "_config_manager", None)
