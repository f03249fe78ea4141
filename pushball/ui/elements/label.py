"""
label.py
--------
Static text label element.
"""

import pygame

from pushball.ui.ui_element import UIElement
from pushball.ui.ui_loader import register_element


@register_element("label")
class UILabel(UIElement):
    """Text display element."""

    def set_text(self, text: str):
        text = str(text)
        if text != self.text:
            self.text = text
            self.mark_dirty()

    def _build_surface(self) -> pygame.Surface:
        """Build label surface."""
        surf = pygame.Surface(self.rect.size, pygame.SRCALPHA)

        if self.background:
            surf.fill(self.background)

        self._blit_text(surf, self.text, self.text_color)

        if self.border > 0:
            pygame.draw.rect(surf, self.border_color, surf.get_rect(), self.border)

        return surf
