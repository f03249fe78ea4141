"""
scene_manager.py
----------------
Scene coordinator - direct class registration.

Owns the scene-reload primitive: reload_scene() tears the active scene
down and constructs a brand new instance of the same class, so no state
survives a restart except what lives in the ServiceLocator globals.
"""

from pushball.core.debug.debug_logger import DebugLogger
from pushball.core.services.service_locator import ServiceLocator
from pushball.scenes.scene_state import SceneState


class SceneManager:
    """Coordinates scene creation, reload, and delegates update/draw logic."""

    def __init__(self, input_manager, draw_manager, scene_classes, **globals_):
        """
        Initialize scene manager.

        Args:
            input_manager: InputManager shared by all scenes
            draw_manager: DrawManager shared by all scenes
            scene_classes: Mapping of scene name -> scene class
            **globals_: Values registered as ServiceLocator globals
        """
        self.input_manager = input_manager
        self.draw_manager = draw_manager
        DebugLogger.init_entry("SceneManager")

        self.services = ServiceLocator(self)
        self.services.register_managers(input_mgr=input_manager, draw=draw_manager)
        for name, value in globals_.items():
            self.services.register_global(name, value)

        self.scene_classes = dict(scene_classes)

        self._active_scene = None
        self._active_name = None
        self._active_data = {}
        self.reload_count = 0

        DebugLogger.init_sub(f"Registered scenes: {list(self.scene_classes.keys())}")

    # ===========================================================
    # Properties
    # ===========================================================

    @property
    def active_scene(self):
        return self._active_scene

    @property
    def active_name(self):
        return self._active_name

    # ===========================================================
    # Scene Control
    # ===========================================================

    def set_scene(self, name: str, **scene_data):
        """
        Switch to another scene.

        Args:
            name: Registered scene name
            **scene_data: Data passed to the new scene's on_load() hook
        """
        if name not in self.scene_classes:
            DebugLogger.warn(f"Unknown scene: '{name}'", category="scene")
            return

        prev_name = self._active_name or "None"
        DebugLogger.system(f"Transitioning [{prev_name}] -> [{name}]", category="scene")

        # 1. Exit old scene first so its world and subscriptions are gone
        self._exit_active_scene()

        # 2. Create and load new scene
        new_scene = self.scene_classes[name](self.services)
        new_scene.state = SceneState.LOADING
        DebugLogger.state(f"Loading {name}", category="scene")
        new_scene.on_load(**scene_data)

        # 3. Activate
        self._active_scene = new_scene
        self._active_name = name
        self._active_data = dict(scene_data)
        new_scene.state = SceneState.ACTIVE
        DebugLogger.section(f"Active Scene: {name}")

        new_scene.on_enter()
        self.input_manager.set_context(new_scene.input_context)

    def reload_scene(self):
        """
        Destroy the active scene and build a fresh instance of it.

        Runs synchronously: when this returns, the new scene is active.
        """
        if self._active_scene is None:
            DebugLogger.warn("No active scene to reload", category="scene")
            return

        self.reload_count += 1
        DebugLogger.action(f"Reloading {self._active_name} (#{self.reload_count})", category="scene")
        self.set_scene(self._active_name, **self._active_data)

    def _exit_active_scene(self):
        if self._active_scene is None:
            return
        DebugLogger.state(f"Exiting {self._active_name}", category="scene")
        self._active_scene.state = SceneState.EXITING
        self._active_scene.on_exit()
        self._active_scene.state = SceneState.INACTIVE
        self._active_scene = None

    def shutdown(self):
        """Exit the active scene without replacing it."""
        self._exit_active_scene()
        self._active_name = None

    # ===========================================================
    # Event, Update, Draw Delegation
    # ===========================================================

    def handle_event(self, event):
        """Forward event to active scene."""
        if self._active_scene:
            self._active_scene.handle_event(event)

    def update(self, dt: float):
        """Update the active scene."""
        if self._active_scene and self._active_scene.state == SceneState.ACTIVE:
            self._active_scene.update(dt)

    def draw(self, draw_manager):
        """Render the active scene."""
        if self._active_scene:
            self._active_scene.draw(draw_manager)
