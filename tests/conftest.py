"""
conftest.py
-----------
Shared pytest configuration and fixtures for Pushball tests.

Contains:
- Headless SDL setup so pygame runs without a window or sound card
- Common fixtures used across multiple test modules
- Pytest configuration and hooks
"""

import os
from collections import defaultdict
from types import SimpleNamespace
from unittest.mock import MagicMock

# Must be set before pygame initializes its video/audio subsystems
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from pushball.core.debug.debug_logger import LoggerConfig  # noqa: E402
from pushball.core.services.event_manager import EventManager  # noqa: E402
from pushball.systems.physics.physics_world import PhysicsWorld  # noqa: E402


# ===========================================================
# Session Setup
# ===========================================================

@pytest.fixture(scope="session", autouse=True)
def pygame_init():
    """Initialize pygame once for the whole run, quietly."""
    LoggerConfig.apply(level="ERROR")
    pygame.init()
    pygame.font.init()
    yield
    pygame.quit()


# ===========================================================
# Common Fixtures
# ===========================================================

@pytest.fixture
def mock_input_manager():
    """Mock for InputManager with nothing pressed."""
    input_manager = MagicMock()
    input_manager.action_pressed.return_value = False
    input_manager.action_released.return_value = False
    input_manager.action_held.return_value = False
    return input_manager


@pytest.fixture
def mock_draw_manager():
    """Mock for DrawManager."""
    return MagicMock()


@pytest.fixture
def mock_event_manager():
    """Mock for EventManager."""
    event_manager = MagicMock()
    event_manager.subscribe = MagicMock()
    event_manager.dispatch = MagicMock()
    event_manager.unsubscribe = MagicMock()
    return event_manager


@pytest.fixture
def events():
    """A real, empty EventManager."""
    return EventManager()


@pytest.fixture
def world(events):
    """Physics world wired to the events fixture, with no damping."""
    w = PhysicsWorld(events, damping=1.0)
    yield w
    w.clear()


# ===========================================================
# Test Utilities
# ===========================================================

class HeldInput:
    """Minimal held-action source: action_held(name) is True for names in held."""

    def __init__(self, *held):
        self.held = set(held)

    def action_held(self, action):
        return action in self.held


def make_held_input(*actions):
    return HeldInput(*actions)


def key_state(*pressed_keys):
    """Key state mapping for InputManager.update(): True only for pressed_keys."""
    keys = defaultdict(bool)
    for key in pressed_keys:
        keys[key] = True
    return keys


def make_victory_indicator(visible=False):
    return SimpleNamespace(visible=visible)


# ===========================================================
# Pytest Configuration
# ===========================================================

def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "integration: marks tests that wire several systems together")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        if "scenes" in item.nodeid or "integration" in item.nodeid:
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
