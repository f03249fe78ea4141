"""
physics_world.py
----------------
Thin host around a pymunk Space for a top-down arena.

Responsibilities
----------------
- Create walls, static blocks, rigid bodies and the character body.
- Map pymunk bodies back to their named PhysicsObject wrappers.
- Track trigger regions (sensor shapes) and announce entries/exits
  through the scene's EventManager after every step.

The contact solver is pymunk's. Nothing here integrates motion.
"""

from typing import Dict, List, Optional, Set

import pymunk

from pushball.core.debug.debug_logger import DebugLogger
from pushball.core.runtime.game_settings import Physics
from pushball.core.services.event_manager import TriggerEnteredEvent, TriggerExitedEvent
from pushball.systems.physics.physics_objects import (
    CharacterBody,
    PhysicsObject,
    RigidBody,
    StaticBody,
)


class TriggerRegion:
    """Non-solid rectangle that reports overlapping bodies."""

    __slots__ = ("name", "body", "shape", "occupants", "rect")

    def __init__(self, name: str, body: pymunk.Body, shape: pymunk.Shape, rect):
        self.name = name
        self.body = body
        self.shape = shape
        self.rect = tuple(rect)
        self.occupants: Set[PhysicsObject] = set()

    def contains(self, obj: PhysicsObject) -> bool:
        return obj in self.occupants


class PhysicsWorld:
    """Owns the pymunk Space and every body in the current scene."""

    def __init__(self, events=None, damping: float = Physics.DAMPING,
                 iterations: int = Physics.ITERATIONS):
        """
        Args:
            events: EventManager receiving trigger events (optional)
            damping: Fraction of velocity bodies keep after one second
            iterations: Solver iterations per step
        """
        self.events = events
        self.space = pymunk.Space()
        self.space.gravity = (0, 0)
        self.space.damping = damping
        self.space.iterations = iterations

        self._objects: Dict[pymunk.Body, PhysicsObject] = {}
        self._triggers: Dict[str, TriggerRegion] = {}

        DebugLogger.init(f"PhysicsWorld created (damping={damping}, iterations={iterations})",
                         category="physics")

    # ===========================================================
    # Object Creation
    # ===========================================================

    def add_walls(self, width: float, height: float, thickness: float = Physics.WALL_THICKNESS,
                  name: str = "Wall") -> List[StaticBody]:
        """
        Enclose the arena with four static segments.

        Args:
            width: Arena width in pixels
            height: Arena height in pixels
            thickness: Wall thickness in pixels
            name: Name given to every wall body

        Returns:
            The four wall objects (top, bottom, left, right)
        """
        r = thickness / 2
        edges = [
            ((0, r), (width, r)),
            ((0, height - r), (width, height - r)),
            ((r, 0), (r, height)),
            ((width - r, 0), (width - r, height)),
        ]

        walls = []
        for a, b in edges:
            body = pymunk.Body(body_type=pymunk.Body.STATIC)
            shape = pymunk.Segment(body, a, b, r)
            shape.elasticity = 0.6
            shape.friction = 0.8
            walls.append(self._register(StaticBody(name, body, shape, color=(90, 96, 110))))

        DebugLogger.init_sub(f"Arena walls {width}x{height} (thickness {thickness})")
        return walls

    def add_static_box(self, name: str, position, size, color=(110, 116, 130)) -> StaticBody:
        """Add an immovable rectangular block centered at position."""
        body = pymunk.Body(body_type=pymunk.Body.STATIC)
        body.position = tuple(position)
        shape = pymunk.Poly.create_box(body, tuple(size))
        shape.elasticity = 0.6
        shape.friction = 0.8
        return self._register(StaticBody(name, body, shape, color=color))

    def add_ball(self, name: str, position, radius: float, mass: float = 1.0,
                 elasticity: float = 0.8, friction: float = 0.5, color=(240, 200, 60)) -> RigidBody:
        """Add a dynamic disc."""
        moment = pymunk.moment_for_circle(mass, 0, radius)
        body = pymunk.Body(mass, moment)
        body.position = tuple(position)
        shape = pymunk.Circle(body, radius)
        shape.elasticity = elasticity
        shape.friction = friction
        return self._register(RigidBody(name, body, shape, color=color))

    def add_box(self, name: str, position, size, mass: float = 2.0,
                elasticity: float = 0.3, friction: float = 0.7, color=(170, 120, 70)) -> RigidBody:
        """Add a dynamic rectangle (crate)."""
        size = tuple(size)
        moment = pymunk.moment_for_box(mass, size)
        body = pymunk.Body(mass, moment)
        body.position = tuple(position)
        shape = pymunk.Poly.create_box(body, size)
        shape.elasticity = elasticity
        shape.friction = friction
        return self._register(RigidBody(name, body, shape, color=color))

    def add_character(self, name: str, position, radius: float,
                      color=(80, 170, 255)) -> CharacterBody:
        """
        Add the player's body.

        Kinematic: it pushes rigid bodies but contact impulses never move it,
        and pymunk does not collide it with static bodies. SlideMover resolves
        those contacts itself.
        """
        body = pymunk.Body(body_type=pymunk.Body.KINEMATIC)
        body.position = tuple(position)
        shape = pymunk.Circle(body, radius)
        shape.elasticity = 0.0
        shape.friction = 0.0
        return self._register(CharacterBody(name, body, shape, color=color))

    def add_trigger_region(self, name: str, rect) -> TriggerRegion:
        """
        Add a sensor rectangle.

        Args:
            name: Region name carried by trigger events
            rect: (x, y, width, height) in world pixels, top-left origin
        """
        x, y, w, h = rect
        body = pymunk.Body(body_type=pymunk.Body.STATIC)
        body.position = (x + w / 2, y + h / 2)
        shape = pymunk.Poly.create_box(body, (w, h))
        shape.sensor = True
        self.space.add(body, shape)

        region = TriggerRegion(name, body, shape, rect)
        self._triggers[name] = region
        DebugLogger.init_sub(f"Trigger region '{name}' at {tuple(rect)}")
        return region

    def _register(self, obj: PhysicsObject) -> PhysicsObject:
        self.space.add(obj.body, obj.shape)
        self._objects[obj.body] = obj
        DebugLogger.trace(f"Added {obj!r}", category="physics")
        return obj

    # ===========================================================
    # Lookup
    # ===========================================================

    def object_for(self, body: pymunk.Body) -> Optional[PhysicsObject]:
        """Resolve a pymunk body to its wrapper (None for unknown/sensor bodies)."""
        return self._objects.get(body)

    def get_trigger(self, name: str) -> Optional[TriggerRegion]:
        return self._triggers.get(name)

    @property
    def objects(self) -> List[PhysicsObject]:
        return list(self._objects.values())

    def find(self, name: str) -> Optional[PhysicsObject]:
        """First object with the given name, or None."""
        for obj in self._objects.values():
            if obj.name == name:
                return obj
        return None

    # ===========================================================
    # Simulation
    # ===========================================================

    def step(self, dt: float) -> None:
        """Advance the space by dt and refresh trigger occupancy."""
        self.space.step(dt)
        self._update_triggers()

    def _update_triggers(self) -> None:
        for region in self._triggers.values():
            current = set()
            for info in self.space.shape_query(region.shape):
                shape = info.shape
                if shape is None or shape is region.shape or shape.sensor:
                    continue
                obj = self._objects.get(shape.body)
                if obj is not None:
                    current.add(obj)

            entered = current - region.occupants
            exited = region.occupants - current
            region.occupants = current

            for obj in exited:
                DebugLogger.state(f"'{obj.name}' left '{region.name}'", category="trigger")
                self._dispatch(TriggerExitedEvent(region=region.name, body_name=obj.name))

            for obj in entered:
                DebugLogger.state(f"'{obj.name}' entered '{region.name}'", category="trigger")
                self._dispatch(TriggerEnteredEvent(region=region.name, body_name=obj.name))

    def _dispatch(self, event) -> None:
        if self.events is not None:
            self.events.dispatch(event)

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def clear(self) -> None:
        """Remove every body and shape from the space."""
        for obj in list(self._objects.values()):
            self.space.remove(obj.body, obj.shape)
        for region in self._triggers.values():
            self.space.remove(region.body, region.shape)
        self._objects.clear()
        self._triggers.clear()
        DebugLogger.state("PhysicsWorld cleared", category="physics")
