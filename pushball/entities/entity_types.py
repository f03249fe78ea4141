"""Entity names and motion states."""

from enum import Enum


class BodyNames:
    """
    Names given to physics bodies in the level.

    Trigger events carry these names, so the goal controller compares
    against them rather than against object identity.
    """
    PLAYER = "Player"
    BALL = "Ball"
    WALL = "Wall"
    CRATE = "Crate"
    PILLAR = "Pillar"


class MotionState(Enum):
    """Character motion state, re-evaluated every physics step."""
    IDLE = "idle"
    MOVING = "move"
