"""
base_scene.py
-------------
Abstract base class for all scenes.

Provides:
- Lifecycle hooks (load, enter, exit)
- Service locator access
- Abstract methods for update, draw, handle_event
"""

from abc import ABC, abstractmethod
from pushball.scenes.scene_state import SceneState


class BaseScene(ABC):
    """
    Base class for all scenes.

    Attributes:
        state: Current lifecycle state
        input_context: Input context for this scene
        services: ServiceLocator for accessing managers and globals
    """

    def __init__(self, services):
        """
        Args:
            services: ServiceLocator instance for dependency injection
        """
        self.services = services
        self.state = SceneState.INACTIVE
        self.input_context = "gameplay"

        # Convenience access to frequently used managers
        self.scene_manager = services.scene_manager
        self.input_manager = services.input_manager
        self.draw_manager = services.draw_manager

    @property
    def is_active(self) -> bool:
        return self.state == SceneState.ACTIVE

    # ===========================================================
    # Lifecycle Hooks (Override in subclasses)
    # ===========================================================

    def on_load(self, **scene_data):
        """Called once right after construction, before activation."""
        pass

    def on_enter(self):
        """Called when scene becomes active."""
        pass

    def on_exit(self):
        """Called before the scene is discarded (switch or reload)."""
        pass

    # ===========================================================
    # Abstract Methods (Must implement in subclasses)
    # ===========================================================

    @abstractmethod
    def update(self, dt: float):
        """
        Advance scene logic by one fixed step.

        Args:
            dt: Delta time in seconds
        """
        pass

    @abstractmethod
    def draw(self, draw_manager):
        """
        Queue the scene's draw calls.

        Args:
            draw_manager: DrawManager instance for queuing draws
        """
        pass

    @abstractmethod
    def handle_event(self, event):
        """
        Handle a pygame event.

        Args:
            event: pygame event object
        """
        pass
