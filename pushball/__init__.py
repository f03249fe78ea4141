"""
Pushball
--------
Top-down physics toy: steer the character, shove the ball into the goal.
"""

__version__ = "0.1.0"
