"""Rendering: draw queue, procedural sprite sheet and sprite animation."""

from pushball.graphics.draw_manager import DrawManager
from pushball.graphics.sprite_sheet import AnimatedSprite, build_character_sheet

__all__ = ['DrawManager', 'AnimatedSprite', 'build_character_sheet']
