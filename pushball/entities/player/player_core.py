"""
player_core.py
--------------
Assembles the player: physics body, slide mover, sprite, animator and
character controller, all configured from player.json.
"""

import random

import pygame

from pushball.core.debug.debug_logger import DebugLogger
from pushball.core.runtime.game_settings import Layers, Player as PlayerDefaults, Sprites
from pushball.core.services.config_manager import load_config
from pushball.entities.entity_types import BodyNames
from pushball.entities.player.character_controller import CharacterController
from pushball.graphics.animations.sprite_animator import DEFAULT_CLIPS, SpriteAnimator
from pushball.graphics.sprite_sheet import AnimatedSprite, build_character_sheet
from pushball.systems.physics.slide_mover import SlideMover


DEFAULT_PLAYER_CONFIG = {
    "core_attributes": {
        "speed": PlayerDefaults.SPEED,
        "radius": PlayerDefaults.RADIUS,
    },
    "impulse": {
        "spin_range": list(PlayerDefaults.SPIN_RANGE),
    },
    "animations": DEFAULT_CLIPS,
    "render": {
        "frame_size": list(Sprites.FRAME_SIZE),
        "color": [80, 170, 255],
    },
}


class Player:
    """The controllable character and everything it is wired to."""

    def __init__(self, world, input_manager, position, name: str = BodyNames.PLAYER,
                 cfg=None, rng=None):
        """
        Args:
            world: PhysicsWorld the body lives in
            input_manager: Held-action query for the controller
            position: Spawn position (body center)
            name: Body name
            cfg: Player config dict (loaded from player.json if None)
            rng: Random source for spin factors
        """
        # ========================================
        # 1. Load Config
        # ========================================
        if cfg is None:
            cfg = load_config("player.json", DEFAULT_PLAYER_CONFIG)
        self.cfg = cfg

        core = cfg["core_attributes"]
        render = cfg["render"]
        frame_size = tuple(render["frame_size"])
        color = tuple(render["color"])

        # ========================================
        # 2. Physics
        # ========================================
        self.body = world.add_character(name, position, radius=core["radius"], color=color)
        self.mover = SlideMover(world, self.body)

        # ========================================
        # 3. Render Setup
        # ========================================
        sheet = build_character_sheet(frame_size, color)
        self.sprite = AnimatedSprite(sheet, frame_size)
        self.animator = SpriteAnimator(self.sprite, cfg.get("animations"))

        # ========================================
        # 4. Controller
        # ========================================
        self.controller = CharacterController(
            input_manager,
            self.mover,
            self.sprite,
            self.animator,
            speed=core["speed"],
            spin_range=cfg["impulse"]["spin_range"],
            rng=rng or random.Random(),
        )
        self.animator.play(self.controller.state.value)

        DebugLogger.init_entry(f"Player '{name}'", f"at {tuple(position)}")

    # ===========================================================
    # Properties
    # ===========================================================

    @property
    def name(self) -> str:
        return self.body.name

    @property
    def position(self) -> pygame.Vector2:
        return self.mover.position

    # ===========================================================
    # Update / Draw
    # ===========================================================

    def update_animation(self, dt: float) -> None:
        self.animator.update(dt)

    def draw(self, draw_manager) -> None:
        """Queue the current sprite frame centered on the body."""
        image = self.sprite.image
        rect = image.get_rect(center=(round(self.position.x), round(self.position.y)))
        draw_manager.queue_draw(image, rect, Layers.PLAYER)
