"""Frame-clip animation."""

from pushball.graphics.animations.sprite_animator import SpriteAnimator, DEFAULT_CLIPS

__all__ = ['SpriteAnimator', 'DEFAULT_CLIPS']
