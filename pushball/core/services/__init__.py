"""
Core services exports.

Provides the event system, configuration loading, input and service
access. SceneManager is imported from its own module to keep this
package free of scene imports.
"""

from pushball.core.services.config_manager import load_config
from pushball.core.services.event_manager import (
    EventManager,
    BaseEvent,
    TriggerEnteredEvent,
    TriggerExitedEvent,
    RestartRequestedEvent,
)
from pushball.core.services.service_locator import ServiceLocator
from pushball.core.services.input_manager import InputManager

__all__ = [
    # Config
    'load_config',
    # Events
    'EventManager',
    'BaseEvent',
    'TriggerEnteredEvent',
    'TriggerExitedEvent',
    'RestartRequestedEvent',
    # Services
    'ServiceLocator',
    'InputManager',
]
