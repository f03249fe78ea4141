"""
pushball/entities/__init__.py
-----------------------------
Entity module exports.

Exports:
    BodyNames    - Names carried by physics bodies and trigger events
    MotionState  - Character motion state (IDLE, MOVING)
"""

from pushball.entities.entity_types import BodyNames, MotionState

__all__ = [
    'BodyNames',
    'MotionState',
]
