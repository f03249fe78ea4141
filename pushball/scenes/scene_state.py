"""
scene_state.py
--------------
Defines the lifecycle states a scene can be in.
"""

from enum import Enum


class SceneState(Enum):
    """Lifecycle states for scene management."""
    INACTIVE = "inactive"       # Not loaded, or already torn down
    LOADING = "loading"         # Building world and HUD
    ACTIVE = "active"           # Running normally
    EXITING = "exiting"         # Cleaning up before reload or switch
