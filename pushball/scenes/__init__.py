"""
Scene module exports.

Provides the base scene class and lifecycle states. Concrete scenes are
imported from their own modules.
"""

from pushball.scenes.scene_state import SceneState
from pushball.scenes.base_scene import BaseScene

__all__ = [
    'BaseScene',
    'SceneState',
]
