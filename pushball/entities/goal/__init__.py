"""Goal detection and level restart."""

from pushball.entities.goal.goal_controller import GoalController

__all__ = ['GoalController']
