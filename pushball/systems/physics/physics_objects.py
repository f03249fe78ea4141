"""
physics_objects.py
------------------
Named wrappers around pymunk bodies.

Controllers never touch pymunk directly. They see PhysicsObjects with a
name, a position and, for reactive bodies, impulse methods. The class of
a wrapper is what the character controller checks before shoving it:

    StaticBody     walls, pillars        never moves
    RigidBody      ball, crates          simulated, accepts impulses
    CharacterBody  the player            velocity driven by SlideMover
"""

import pygame
import pymunk

from pushball.core.debug.debug_logger import DebugLogger


class PhysicsObject:
    """Base wrapper: one pymunk body plus its collision shape."""

    __slots__ = ("name", "body", "shape", "color")

    def __init__(self, name: str, body: pymunk.Body, shape: pymunk.Shape, color=(200, 200, 200)):
        self.name = name
        self.body = body
        self.shape = shape
        self.color = tuple(color)

    @property
    def position(self) -> pygame.Vector2:
        return pygame.Vector2(self.body.position.x, self.body.position.y)

    @property
    def velocity(self) -> pygame.Vector2:
        return pygame.Vector2(self.body.velocity.x, self.body.velocity.y)

    @property
    def rotation(self) -> float:
        """Body angle in radians."""
        return self.body.angle

    @property
    def is_reactive(self) -> bool:
        return False

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r})"


class StaticBody(PhysicsObject):
    """Immovable obstacle."""

    __slots__ = ()


class RigidBody(PhysicsObject):
    """Dynamic body moved only by the simulation and by impulses."""

    __slots__ = ()

    @property
    def is_reactive(self) -> bool:
        return True

    @property
    def angular_velocity(self) -> float:
        return self.body.angular_velocity

    def apply_central_impulse(self, impulse) -> None:
        """
        Apply a linear impulse through the center of mass.

        Args:
            impulse: World-space impulse vector (mass * px/s)
        """
        impulse = (float(impulse[0]), float(impulse[1]))
        self.body.apply_impulse_at_world_point(impulse, self.body.position)
        DebugLogger.trace(f"{self.name}: impulse {impulse}", category="collision")

    def apply_torque_impulse(self, torque: float) -> None:
        """
        Apply an angular impulse.

        Args:
            torque: Angular impulse; positive spins clockwise on screen (y down)
        """
        self.body.angular_velocity += torque / self.body.moment
        DebugLogger.trace(f"{self.name}: torque impulse {torque:.1f}", category="collision")


class CharacterBody(PhysicsObject):
    """The player's kinematic body. Never rotates; velocity is set every physics step."""

    __slots__ = ()

    def set_velocity(self, velocity) -> None:
        self.body.velocity = (float(velocity[0]), float(velocity[1]))
