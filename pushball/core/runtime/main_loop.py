"""
main_loop.py
------------
Core game loop orchestrating timing, events, updates, and rendering.

Responsibilities:
- Initialize pygame and core systems
- Maintain fixed timestep update loop
- Coordinate event handling, updates, and rendering
"""

import pygame

from pushball.core.debug.debug_logger import DebugLogger
from pushball.core.runtime.game_settings import Debug, Display, Physics
from pushball.core.services.input_manager import InputManager
from pushball.core.services.scene_manager import SceneManager
from pushball.graphics.draw_manager import DrawManager
from pushball.scenes.level_scene import DEFAULT_LEVEL, LevelScene


SCENES = {
    "Level": LevelScene,
}


class MainLoop:
    """
    Core runtime controller managing the game's main loop.

    Implements a fixed timestep for physics/logic with variable rendering.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, level_file: str = DEFAULT_LEVEL, fps: int = Display.FPS, rng=None):
        """
        Initialize pygame and all core systems.

        Args:
            level_file: Level config loaded by the level scene
            fps: Render frame cap
            rng: Optional random.Random shared by every level instance
        """
        DebugLogger.section("Initializing MainLoop")

        self.fps = fps
        self._init_pygame()
        self._init_core_systems()
        self._init_scene_manager(level_file, rng)

    def _init_pygame(self):
        """Initialize pygame subsystems and window."""
        pygame.init()
        pygame.font.init()

        self.screen = pygame.display.set_mode((Display.WIDTH, Display.HEIGHT))
        pygame.display.set_caption(Display.CAPTION)

        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"Window {Display.WIDTH}x{Display.HEIGHT} '{Display.CAPTION}'")

    def _init_core_systems(self):
        """Initialize input and drawing systems."""
        self.input_manager = InputManager()
        self.draw_manager = DrawManager()

    def _init_scene_manager(self, level_file, rng):
        """Initialize scene management and runtime state."""
        self.scenes = SceneManager(
            self.input_manager,
            self.draw_manager,
            SCENES,
            level_file=level_file,
            rng=rng,
        )

        self.clock = pygame.time.Clock()
        self.running = True

        DebugLogger.init_entry("Main Loop Runtime")
        DebugLogger.init_sub("Game Clock Initialized", level=1)

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self):
        """
        Execute main game loop until quit.

        Uses fixed timestep for updates with accumulator pattern.
        Rendering happens once per frame after all updates.
        """
        self.scenes.set_scene("Level")
        DebugLogger.section("Game Loop")

        fixed_dt = Physics.FIXED_DT
        accumulator = 0.0

        while self.running:
            # Frame timing with safety clamp
            frame_time = self.clock.tick(self.fps) / 1000.0
            frame_time = min(frame_time, Physics.MAX_FRAME_TIME)
            accumulator += frame_time

            # Process events
            self._handle_events()
            if not self.running:
                break

            # Fixed timestep updates
            while accumulator >= fixed_dt:
                self.input_manager.update()
                self.scenes.update(fixed_dt)
                accumulator -= fixed_dt

            # Render
            self._draw()

        # Cleanup
        self.scenes.shutdown()
        pygame.quit()
        DebugLogger.system("Pygame terminated")

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        """
        Process all pending pygame events.

        Routes events to:
        1. Quit handling
        2. System hotkeys (Esc, F3)
        3. Scene-specific handling
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT or self.input_manager.is_system_action("quit", event):
                self.running = False
                DebugLogger.action("Quit signal received")
                break

            if self.input_manager.is_system_action("toggle_debug", event):
                Debug.DRAW_PHYSICS_SHAPES = not Debug.DRAW_PHYSICS_SHAPES
                DebugLogger.action(f"Physics debug shapes {'ON' if Debug.DRAW_PHYSICS_SHAPES else 'OFF'}")
                continue

            self.scenes.handle_event(event)

    # ===========================================================
    # Rendering
    # ===========================================================

    def _draw(self):
        """Queue the active scene and flush the draw queue to the window."""
        self.scenes.draw(self.draw_manager)

        if Debug.SHOW_FPS:
            pygame.display.set_caption(f"{Display.CAPTION} - {self.clock.get_fps():.0f} FPS")

        self.draw_manager.render(self.screen)
        pygame.display.flip()
