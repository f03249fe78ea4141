"""
slide_mover.py
--------------
Slide-movement primitive for the kinematic character body.

move_and_slide(velocity, dt) hands the velocity to pymunk and steps the
world once. The kinematic body shoves rigid bodies through the solver,
but pymunk never collides it with static bodies, so afterwards the mover
queries the space for static overlaps, pushes the body back out along
each contact normal, and removes the velocity component into those
surfaces. What is left slides along them.

Collision normals are reported the way gameplay code expects them:
pointing from the collider back toward the character.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

import pygame

from pushball.core.debug.debug_logger import DebugLogger
from pushball.systems.physics.physics_objects import CharacterBody, PhysicsObject


@dataclass(frozen=True)
class CollisionInfo:
    """One contact produced by the last move."""
    normal: pygame.Vector2
    position: pygame.Vector2
    collider: PhysicsObject

    @property
    def collider_name(self) -> str:
        return self.collider.name


class SlideMover:
    """Moves one CharacterBody through a PhysicsWorld."""

    MAX_DEPENETRATION_PASSES = 4

    def __init__(self, world, character: CharacterBody):
        """
        Args:
            world: PhysicsWorld owning the character
            character: The body this mover drives
        """
        self.world = world
        self.character = character
        self._collisions: List[CollisionInfo] = []

    # ===========================================================
    # Movement
    # ===========================================================

    def move_and_slide(self, velocity, dt: float) -> bool:
        """
        Move the character along velocity for one physics step.

        Args:
            velocity: Desired velocity in px/s
            dt: Step length in seconds

        Returns:
            True if the character touched any solid body this step
        """
        requested = pygame.Vector2(velocity[0], velocity[1])
        self.character.set_velocity(requested)
        self.world.step(dt)

        blocked = self._depenetrate()
        pushed = self._gather_contacts()
        self._collisions = blocked + pushed
        self.character.set_velocity(self._slide(requested, blocked))

        if self._collisions:
            DebugLogger.trace(
                f"{self.character.name} touching {[c.collider_name for c in self._collisions]}",
                category="collision"
            )
        return bool(self._collisions)

    @staticmethod
    def _slide(velocity: pygame.Vector2, blocked: List[CollisionInfo]) -> pygame.Vector2:
        """Drop the part of velocity that points into the blocking surfaces."""
        for hit in blocked:
            into = velocity.dot(hit.normal)
            if into < 0:
                velocity -= hit.normal * into
        return velocity

    def _depenetrate(self) -> List[CollisionInfo]:
        """Push the body out of static shapes; return one contact per obstacle."""
        body = self.character.body
        space = self.world.space
        hits: Dict[PhysicsObject, CollisionInfo] = {}

        for _ in range(self.MAX_DEPENETRATION_PASSES):
            moved = False
            for info in space.shape_query(self.character.shape):
                other = info.shape
                if other is None or other.sensor:
                    continue
                collider = self.world.object_for(other.body)
                if collider is None or collider.is_reactive or collider is self.character:
                    continue

                points = info.contact_point_set.points
                if not points:
                    continue
                deepest = min(points, key=lambda p: p.distance)
                contact = pygame.Vector2(deepest.point_b.x, deepest.point_b.y)

                # Query normals point from the character into the obstacle
                n = info.contact_point_set.normal
                normal = -pygame.Vector2(n.x, n.y)
                if normal.length_squared() == 0:
                    continue
                normal = normal.normalize()

                hits[collider] = CollisionInfo(normal=normal, position=contact, collider=collider)

                depth = -deepest.distance
                if depth > 0:
                    p = body.position
                    body.position = (p.x + normal.x * depth, p.y + normal.y * depth)
                    # Remaining overlaps were measured before this push; query again
                    moved = True
                    break

            if not moved:
                break

        space.reindex_shapes_for_body(body)
        return list(hits.values())

    @property
    def velocity(self) -> pygame.Vector2:
        """Velocity after the last move, minus what the blocking surfaces absorbed."""
        return self.character.velocity

    @property
    def position(self) -> pygame.Vector2:
        return self.character.position

    # ===========================================================
    # Collision Queries
    # ===========================================================

    def get_slide_collision_count(self) -> int:
        return len(self._collisions)

    def get_slide_collision(self, index: int) -> CollisionInfo:
        return self._collisions[index]

    def get_last_slide_collision(self) -> Optional[CollisionInfo]:
        """Most recent contact of the last move, or None if it was free."""
        if not self._collisions:
            return None
        return self._collisions[-1]

    def _gather_contacts(self) -> List[CollisionInfo]:
        """Contacts the solver created between the character and rigid bodies."""
        collisions = []
        body = self.character.body
        center = self.character.position

        def visit(arbiter):
            ours, other = arbiter.shapes
            if other.body is body:
                ours, other = other, ours
            if ours.sensor or other.sensor:
                return

            collider = self.world.object_for(other.body)
            if collider is None:
                return

            points = arbiter.contact_point_set.points
            if not points:
                return
            p = points[0].point_a if ours is arbiter.shapes[0] else points[0].point_b
            contact = pygame.Vector2(p.x, p.y)

            n = arbiter.normal
            normal = pygame.Vector2(n.x, n.y)
            if normal.length_squared() == 0:
                return
            normal = normal.normalize()
            # Orient the normal from the contact toward the character center
            if normal.dot(center - contact) < 0:
                normal = -normal

            collisions.append(CollisionInfo(normal=normal, position=contact, collider=collider))

        body.each_arbiter(visit)
        return collisions
