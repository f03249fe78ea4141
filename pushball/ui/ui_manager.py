"""
ui_manager.py
-------------
Owns the HUD elements of a scene: loading, click routing and drawing.
"""

from typing import Dict, List, Optional

import pygame

from pushball.core.debug.debug_logger import DebugLogger
from pushball.ui.ui_element import UIElement
from pushball.ui.ui_loader import UILoader

# Element classes register themselves on import
from pushball.ui.elements import button, label  # noqa: F401


class UIManager:
    """Manages HUD elements for one scene."""

    def __init__(self, draw_manager=None, loader: Optional[UILoader] = None):
        """
        Args:
            draw_manager: DrawManager used by draw()
            loader: UILoader (default reads pushball/config/ui)
        """
        self.draw_manager = draw_manager
        self.loader = loader or UILoader()
        self.hud_elements: List[UIElement] = []
        self._by_id: Dict[str, UIElement] = {}
        self._mouse_pos = (-1, -1)

    # ===========================================================
    # Loading
    # ===========================================================

    def load_hud(self, filename: str) -> List[UIElement]:
        """
        Load HUD elements from a YAML layout, replacing the current HUD.

        Raises:
            FileNotFoundError: If the layout file does not exist
        """
        self.hud_elements = self.loader.load(filename)
        self._by_id = {el.id: el for el in self.hud_elements if el.id}
        DebugLogger.init_sub(f"HUD '{filename}' with {len(self.hud_elements)} elements")
        return self.hud_elements

    def get(self, element_id: str) -> Optional[UIElement]:
        """Find a HUD element by id."""
        return self._by_id.get(element_id)

    # ===========================================================
    # Input
    # ===========================================================

    def handle_event(self, event) -> Optional[str]:
        """
        Route a pygame event to the HUD.

        Returns:
            The action string of a clicked element, or None
        """
        if event.type == pygame.MOUSEMOTION:
            self._mouse_pos = event.pos
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._mouse_pos = event.pos
            for element in reversed(self.hud_elements):
                action = element.handle_click(event.pos)
                if action:
                    DebugLogger.action(f"'{element.id}' clicked -> {action}", category="ui")
                    return action
        return None

    # ===========================================================
    # Update / Draw
    # ===========================================================

    def update(self, dt: float):
        for element in self.hud_elements:
            element.update(dt, self._mouse_pos)

    def draw(self, draw_manager=None):
        """Queue visible HUD elements."""
        draw_manager = draw_manager or self.draw_manager
        if draw_manager is None:
            return
        for element in self.hud_elements:
            if element.visible:
                draw_manager.queue_draw(element.render_surface(), element.rect, element.layer)

    def clear(self):
        self.hud_elements = []
        self._by_id.clear()
