"""
button.py
---------
Interactive button element with hover and press states.
"""

from typing import Optional, Tuple

import pygame

from pushball.ui.ui_element import UIElement
from pushball.ui.ui_loader import register_element


@register_element('button')
class UIButton(UIElement):
    """Clickable button that reports its action string."""

    def __init__(self, config):
        """
        Initialize button.

        Args:
            config: Configuration dictionary
        """
        super().__init__(config)

        self.action = self.data_dict.get('action')

        base_rgb = self.color[:3]
        self.hover_color = tuple(min(c + 30, 255) for c in base_rgb)
        self.pressed_color = tuple(max(c - 40, 0) for c in base_rgb)

        # State
        self.is_hovered = False
        self.is_pressed = False

    def update(self, dt: float, mouse_pos: Tuple[int, int]):
        """Track hover/press state against the current mouse position."""
        if not self.enabled or not self.visible:
            self.is_hovered = False
            self.is_pressed = False
            return

        was_hovered, was_pressed = self.is_hovered, self.is_pressed
        self.is_hovered = self.rect.collidepoint(mouse_pos)
        self.is_pressed = self.is_hovered and pygame.mouse.get_pressed()[0]

        if was_hovered != self.is_hovered or was_pressed != self.is_pressed:
            self.mark_dirty()

    def handle_click(self, mouse_pos: Tuple[int, int]) -> Optional[str]:
        """Return this button's action if the click landed on it."""
        if self.enabled and self.visible and self.rect.collidepoint(mouse_pos):
            return self.action
        return None

    def _build_surface(self) -> pygame.Surface:
        """Build button surface."""
        surf = pygame.Surface(self.rect.size, pygame.SRCALPHA)

        if not self.enabled:
            color = (80, 80, 80)
        elif self.is_pressed:
            color = self.pressed_color
        elif self.is_hovered:
            color = self.hover_color
        else:
            color = self.color

        surf.fill(color)

        if self.border > 0:
            pygame.draw.rect(surf, self.border_color, surf.get_rect(), self.border)

        text_color = self.text_color
        if not self.enabled:
            text_color = tuple(c // 2 for c in text_color[:3])
        self._blit_text(surf, self.text, text_color)

        return surf
