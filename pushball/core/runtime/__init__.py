"""
Runtime configuration exports.

Provides game-wide constants. All exports are lightweight class
constants with no initialization overhead.
"""

from pushball.core.runtime.game_settings import (
    Display,
    Fonts,
    Physics,
    Layers,
    Player,
    Sprites,
    Goal,
    Debug,
)

__all__ = [
    # Display & Rendering
    'Display',
    'Fonts',
    'Layers',
    'Sprites',
    # Simulation
    'Physics',
    'Player',
    'Goal',
    # Debug
    'Debug',
]
