"""
Physics host exports.

pymunk does the solving; these modules adapt it to named objects,
trigger regions and a slide-movement primitive.
"""

from pushball.systems.physics.physics_objects import (
    PhysicsObject,
    StaticBody,
    RigidBody,
    CharacterBody,
)
from pushball.systems.physics.physics_world import PhysicsWorld, TriggerRegion
from pushball.systems.physics.slide_mover import SlideMover, CollisionInfo

__all__ = [
    'PhysicsObject',
    'StaticBody',
    'RigidBody',
    'CharacterBody',
    'PhysicsWorld',
    'TriggerRegion',
    'SlideMover',
    'CollisionInfo',
]
