"""
character_controller.py
-----------------------
Per-step behavior of the player character.

Responsibilities
----------------
- Sample directional input into a movement intent.
- Ask the slide mover to move the body and resolve collisions.
- Face the sprite along the intent and pick the idle/move clip.
- Shove reactive bodies the character runs into, with a random spin.

Collaborators are injected; the controller never looks anything up:

    input_source   action_held(name) -> bool
    mover          move_and_slide(velocity, dt) -> bool, velocity,
                   get_last_slide_collision() -> CollisionInfo | None
    sprite         row (writable facing row)
    animator       play(name) (idempotent)
"""

import random
from typing import Optional

import pygame

from pushball.core.debug.debug_logger import DebugLogger
from pushball.core.runtime.game_settings import Player as PlayerDefaults, Sprites
from pushball.entities.entity_types import MotionState
from pushball.entities.player.player_movement import (
    desired_velocity,
    direction_bucket,
    is_idle,
    reactive_impulse,
    read_move_intent,
    spin_torque,
)
from pushball.systems.physics.physics_objects import RigidBody


class CharacterController:
    """Input -> slide move -> facing/animation -> reactive impulse."""

    def __init__(self, input_source, mover, sprite, animator,
                 speed: float = PlayerDefaults.SPEED,
                 spin_range=PlayerDefaults.SPIN_RANGE,
                 idle_epsilon: float = PlayerDefaults.IDLE_VELOCITY_EPSILON,
                 directions: int = Sprites.DIRECTIONS,
                 rng: Optional[random.Random] = None):
        """
        Args:
            input_source: Held-action query (InputManager)
            mover: Slide-movement primitive (SlideMover)
            sprite: AnimatedSprite whose row encodes facing
            animator: SpriteAnimator playing named clips
            speed: Move speed in px/s
            spin_range: (min, max) multiplier for the spin kick
            idle_epsilon: Speed below which the character counts as idle
            directions: Facing rows on the sprite sheet
            rng: Random source for spin factors
        """
        self.input_source = input_source
        self.mover = mover
        self.sprite = sprite
        self.animator = animator

        self.speed = speed
        self.spin_range = (float(spin_range[0]), float(spin_range[1]))
        self.idle_epsilon = idle_epsilon
        self.directions = directions
        self.rng = rng or random.Random()

        self.intent = pygame.Vector2(0, 0)
        self.state = MotionState.IDLE
        self.last_impulse = None

    # ===========================================================
    # Input
    # ===========================================================

    def process_input(self) -> pygame.Vector2:
        """Recompute the movement intent from the four directional actions."""
        self.intent = read_move_intent(self.input_source)
        return self.intent

    # ===========================================================
    # Physics Step
    # ===========================================================

    def physics_process(self, dt: float) -> None:
        """
        Run one physics step for the character.

        Args:
            dt: Fixed step length in seconds
        """
        velocity = desired_velocity(self.intent, self.speed)
        collided = self.mover.move_and_slide(velocity, dt)

        if self.intent.length_squared() > 0:
            self.sprite.row = direction_bucket(self.intent, self.directions)

        resulting = self.mover.velocity
        new_state = MotionState.IDLE if is_idle(resulting, self.idle_epsilon) else MotionState.MOVING
        if new_state != self.state:
            DebugLogger.trace(f"{self.state.name} -> {new_state.name}", category="character")
        self.state = new_state
        self.animator.play(new_state.value)

        self.last_impulse = None
        if collided:
            self._push_collider(self.mover.get_last_slide_collision(), resulting)

    def _push_collider(self, collision, velocity: pygame.Vector2) -> None:
        """Shove the collided body if it is a reactive rigid body."""
        if collision is None:
            return

        body = collision.collider
        if not isinstance(body, RigidBody):
            return

        impulse = reactive_impulse(collision.normal, velocity)
        if impulse.length_squared() == 0:
            return

        torque = spin_torque(impulse, self.rng.uniform(*self.spin_range))

        body.apply_central_impulse(impulse)
        body.apply_torque_impulse(torque)
        self.last_impulse = impulse

        DebugLogger.trace(
            f"Pushed '{body.name}' impulse=({impulse.x:.1f}, {impulse.y:.1f}) torque={torque:.1f}",
            category="character"
        )
