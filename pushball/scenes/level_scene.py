"""
level_scene.py
--------------
The playable level: an arena with the player, a ball, a few props and a goal.

Build order (on_load):
    1. Scene-local EventManager and PhysicsWorld
    2. Walls, pillars, crates, ball and the goal trigger region
    3. HUD (victory label hidden, restart button)
    4. Player and its character controller
    5. Goal controller, bound to the scene's events

Per fixed step (update):
    restart action -> RestartRequestedEvent (scene is replaced, stop here)
    character.process_input() -> character.physics_process(dt)
    sprite animation, HUD hover state

Everything is owned by the scene instance, so a reload through the
SceneManager throws all of it away and builds it again from config.
"""

import pygame

from pushball.core.debug.debug_logger import DebugLogger
from pushball.core.runtime.game_settings import Debug, Display, Goal, Layers, Physics
from pushball.core.services.config_manager import load_config
from pushball.core.services.event_manager import EventManager, RestartRequestedEvent
from pushball.entities.entity_types import BodyNames
from pushball.entities.goal.goal_controller import GoalController
from pushball.entities.player.player_core import Player
from pushball.scenes.base_scene import BaseScene
from pushball.systems.physics.physics_objects import CharacterBody
from pushball.systems.physics.physics_world import PhysicsWorld
from pushball.ui.ui_manager import UIManager


DEFAULT_LEVEL = "level_01.json"

_REQUIRED_HUD_ELEMENTS = ("victory_label", "restart_button")

DEFAULT_LEVEL_CONFIG = {
    "world": {
        "width": Display.WIDTH,
        "height": Display.HEIGHT,
        "wall_thickness": Physics.WALL_THICKNESS,
        "damping": Physics.DAMPING,
        "iterations": Physics.ITERATIONS,
    },
    "player": {"name": BodyNames.PLAYER, "start": [Display.WIDTH * 0.2, Display.HEIGHT / 2]},
    "ball": {"name": BodyNames.BALL, "position": [Display.WIDTH / 2, Display.HEIGHT / 2],
             "radius": 16, "mass": 1.5},
    "crates": [],
    "pillars": [],
    "goal": {"name": Goal.REGION_NAME, "rect": [Display.WIDTH - 150, Display.HEIGHT / 2 - 70, 120, 140],
             "color": [60, 140, 80]},
    "hud": "level_hud.yaml",
}


class LevelScene(BaseScene):
    """Gameplay scene for one arena level."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, services):
        super().__init__(services)
        self.input_context = "gameplay"

        self.level_file = services.get_global("level_file", DEFAULT_LEVEL)
        self.rng = services.get_global("rng")

        self.cfg = None
        self.events = None
        self.world = None
        self.ui = None
        self.player = None
        self.goal_region = None
        self._goal_color = (60, 140, 80)
        self.goal_controller = None
        self.victory_label = None

    # ===========================================================
    # Lifecycle Hooks
    # ===========================================================

    def on_load(self, **scene_data):
        """Build the level from its config file."""
        DebugLogger.section(f"Loading level '{self.level_file}'")

        cfg = load_config(self.level_file, DEFAULT_LEVEL_CONFIG)
        self.cfg = cfg

        # ========================================
        # 1. Events & Physics
        # ========================================
        world_cfg = cfg["world"]
        self.events = EventManager()
        self.world = PhysicsWorld(
            self.events,
            damping=world_cfg["damping"],
            iterations=world_cfg["iterations"],
        )

        # ========================================
        # 2. Arena Contents
        # ========================================
        self._build_arena(cfg)

        # ========================================
        # 3. HUD
        # ========================================
        self.ui = UIManager(self.draw_manager)
        self.ui.load_hud(cfg["hud"])
        missing = [eid for eid in _REQUIRED_HUD_ELEMENTS if self.ui.get(eid) is None]
        if missing:
            DebugLogger.fail(f"{cfg['hud']} missing required elements: {missing}", category="ui")
            raise ValueError(f"Invalid HUD layout {cfg['hud']}: missing {missing}")

        self.victory_label = self.ui.get("victory_label")
        self.victory_label.visible = False

        # ========================================
        # 4. Player
        # ========================================
        player_cfg = cfg["player"]
        self.player = Player(
            self.world,
            self.input_manager,
            position=player_cfg["start"],
            name=player_cfg.get("name", BodyNames.PLAYER),
            rng=self.rng,
        )

        # ========================================
        # 5. Goal
        # ========================================
        self.goal_controller = GoalController(
            self.victory_label,
            self.services,
            region_name=self.goal_region.name,
            target_body=cfg["ball"].get("name", Goal.TARGET_BODY),
        )
        self.goal_controller.bind(self.events)

        DebugLogger.init_sub(f"{len(self.world.objects)} bodies in world")

    def _build_arena(self, cfg):
        world_cfg = cfg["world"]
        self.world.add_walls(world_cfg["width"], world_cfg["height"],
                             world_cfg["wall_thickness"], name=BodyNames.WALL)

        for pillar in cfg.get("pillars", []):
            self.world.add_static_box(pillar.get("name", BodyNames.PILLAR),
                                      pillar["position"], pillar["size"])

        for crate in cfg.get("crates", []):
            self.world.add_box(crate.get("name", BodyNames.CRATE), crate["position"],
                               crate["size"], mass=crate.get("mass", 2.0))

        ball = cfg["ball"]
        self.world.add_ball(
            ball.get("name", BodyNames.BALL),
            ball["position"],
            radius=ball["radius"],
            mass=ball.get("mass", 1.0),
            elasticity=ball.get("elasticity", 0.8),
            friction=ball.get("friction", 0.5),
            color=tuple(ball.get("color", (240, 200, 60))),
        )

        goal = cfg["goal"]
        self.goal_region = self.world.add_trigger_region(goal.get("name", Goal.REGION_NAME), goal["rect"])
        self._goal_color = tuple(goal.get("color", (60, 140, 80)))

    def on_enter(self):
        DebugLogger.state(f"Level '{self.level_file}' running", category="scene")

    def on_exit(self):
        """Drop subscriptions and every body so nothing leaks into the next instance."""
        if self.goal_controller is not None:
            self.goal_controller.unbind()
        if self.events is not None:
            self.events.clear_all()
        if self.world is not None:
            self.world.clear()
        if self.ui is not None:
            self.ui.clear()

    # ===========================================================
    # Restart
    # ===========================================================

    def request_restart(self, source: str = "ui"):
        """Announce a restart on this scene's event bus."""
        self.events.dispatch(RestartRequestedEvent(source=source))

    # ===========================================================
    # Update
    # ===========================================================

    def update(self, dt: float):
        """
        Advance one fixed step.

        Args:
            dt: Fixed step length in seconds
        """
        if self.input_manager.action_pressed("restart"):
            self.request_restart(source="keyboard")
            if not self.is_active:
                return

        controller = self.player.controller
        controller.process_input()
        controller.physics_process(dt)
        if not self.is_active:
            return

        self.player.update_animation(dt)
        self.ui.update(dt)

    # ===========================================================
    # Event Handling
    # ===========================================================

    def handle_event(self, event):
        """Route mouse input to the HUD; a restart click restarts the level."""
        action = self.ui.handle_event(event)
        if action == "restart":
            self.request_restart(source="ui")
            return True
        return action is not None

    # ===========================================================
    # Rendering
    # ===========================================================

    def draw(self, draw_manager):
        """Queue goal, bodies, player sprite and HUD."""
        x, y, w, h = self.goal_region.rect
        draw_manager.queue_shape("rect", self._goal_color, Layers.GOAL, rect=pygame.Rect(x, y, w, h))

        for obj in self.world.objects:
            if isinstance(obj, CharacterBody):
                if Debug.DRAW_PHYSICS_SHAPES:
                    shape = obj.shape
                    draw_manager.queue_shape("circle", (255, 80, 80), Layers.DEBUG,
                                             center=tuple(obj.position), radius=shape.radius, width=1)
                continue
            draw_manager.queue_physics_object(obj, Layers.PROPS)

        self.player.draw(draw_manager)
        self.ui.draw(draw_manager)
