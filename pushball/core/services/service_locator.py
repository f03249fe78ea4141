"""
service_locator.py
------------------
Centralized access to core game services.
Provides dependency injection for scenes.
"""

from typing import Any


# ===========================================================
# Service Locator
# ===========================================================


class ServiceLocator:
    """Container for core services plus named global values that outlive scenes."""

    __slots__ = (
        "scene_manager",
        "input_manager",
        "draw_manager",
        "_global_systems",
    )

    def __init__(self, scene_manager):
        """
        Args:
            scene_manager: The SceneManager instance (scene reload primitive)
        """
        self.scene_manager = scene_manager
        self.input_manager = None
        self.draw_manager = None
        self._global_systems = {}

    # ===========================================================
    # Manager Registration
    # ===========================================================

    def register_managers(self, input_mgr=None, draw=None):
        """
        Register core managers.

        Args:
            input_mgr: InputManager instance
            draw: DrawManager instance
        """
        if input_mgr:
            self.input_manager = input_mgr
        if draw:
            self.draw_manager = draw

    # ===========================================================
    # Global System Access
    # ===========================================================

    def register_global(self, name: str, system: Any) -> None:
        """
        Register a value that persists across scene reloads.

        Args:
            name: Identifier (e.g. "level_file", "rng")
            system: Value or system instance
        """
        self._global_systems[name] = system

    def get_global(self, name: str, default: Any = None) -> Any:
        """Get a global value by name, or default."""
        return self._global_systems.get(name, default)

    # ===========================================================
    # Scene Control
    # ===========================================================

    def reload_scene(self) -> None:
        """Destroy and rebuild the active scene."""
        self.scene_manager.reload_scene()
