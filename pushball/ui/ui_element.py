"""
ui_element.py
-------------
Base class for HUD elements with surface caching and a dirty flag.
"""

from typing import Any, Dict, Optional, Tuple

import pygame

from pushball.core.runtime.game_settings import Fonts, Layers


class UIElement:
    """Base HUD element with cached rendering and a fixed screen rect."""

    _font_cache: Dict[Tuple[Optional[str], int], pygame.font.Font] = {}

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize element from config dictionary.

        Config structure:
            position: {offset, size}
            graphic: {color, background, text, font_size, text_color, border, visible, layer}
            data: {action}
        """
        self.id = config.get('id')
        self.type = config.get('type', 'element')

        position_dict = config.get('position', {})
        graphic_dict = config.get('graphic', {})
        self.data_dict = config.get('data', {})

        # === POSITION GROUP ===
        offset = position_dict.get('offset', [0, 0])
        width, height = position_dict.get('size', [100, 40])
        self.rect = pygame.Rect(int(offset[0]), int(offset[1]), int(width), int(height))

        # === VISUAL GROUP ===
        self.color = self._parse_color(graphic_dict.get('color', [100, 100, 100]))
        background_val = graphic_dict.get('background')
        self.background = self._parse_color(background_val) if background_val else None
        self.border = graphic_dict.get('border', 0)
        self.border_color = self._parse_color(graphic_dict.get('border_color', [255, 255, 255]))

        self.text = str(graphic_dict.get('text', ''))
        self.font_size = graphic_dict.get('font_size', Fonts.SIZE)
        self.text_color = self._parse_color(graphic_dict.get('text_color', [255, 255, 255]))

        # State
        self._visible = bool(graphic_dict.get('visible', True))
        self.enabled = bool(graphic_dict.get('enabled', True))
        self.layer = graphic_dict.get('layer', Layers.UI)

        # Caching
        self._font = None
        self._surface_cache: Optional[pygame.Surface] = None
        self._dirty = True

    # ===========================================================
    # State
    # ===========================================================

    @property
    def visible(self) -> bool:
        return self._visible

    @visible.setter
    def visible(self, value: bool):
        value = bool(value)
        if value != self._visible:
            self._visible = value
            self.mark_dirty()

    def mark_dirty(self):
        """Mark element as needing re-render."""
        self._dirty = True

    # ===========================================================
    # Helpers
    # ===========================================================

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = self._get_cached_font(self.font_size)
        return self._font

    @classmethod
    def _get_cached_font(cls, size: int) -> pygame.font.Font:
        """Get or create cached default font by size."""
        cache_key = (Fonts.DEFAULT, size)
        if cache_key not in cls._font_cache:
            if not pygame.font.get_init():
                pygame.font.init()
            cls._font_cache[cache_key] = pygame.font.Font(Fonts.DEFAULT, size)
        return cls._font_cache[cache_key]

    @staticmethod
    def _parse_color(color) -> Optional[Tuple[int, ...]]:
        """Parse color from list/tuple or '#rrggbb[aa]' hex string."""
        if color is None:
            return None

        if isinstance(color, str):
            hex_str = color.lstrip('#')
            if len(hex_str) in (6, 8):
                return tuple(int(hex_str[i:i + 2], 16) for i in range(0, len(hex_str), 2))
            return (255, 255, 255)

        return tuple(color)

    def _blit_text(self, surface: pygame.Surface, text: str, color) -> None:
        """Render text centered on surface."""
        if not text:
            return
        text_surf = self.font.render(text, True, color[:3])
        if len(color) == 4:
            text_surf.set_alpha(color[3])
        surface.blit(text_surf, text_surf.get_rect(center=surface.get_rect().center))

    # ===========================================================
    # Update / Input / Render
    # ===========================================================

    def update(self, dt: float, mouse_pos: Tuple[int, int]):
        """Per-frame update. Base elements are static."""

    def handle_click(self, mouse_pos: Tuple[int, int]) -> Optional[str]:
        """
        Handle mouse click.

        Returns:
            Action string if element was clicked, None otherwise
        """
        return None

    def render_surface(self) -> pygame.Surface:
        """Get rendered surface (cached if not dirty)."""
        if not self._dirty and self._surface_cache is not None:
            return self._surface_cache

        self._surface_cache = self._build_surface()
        self._dirty = False
        return self._surface_cache

    def _build_surface(self) -> pygame.Surface:
        """Build element surface. Override in subclasses for custom rendering."""
        surf = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        if self.background:
            surf.fill(self.background)
        if self.border > 0:
            pygame.draw.rect(surf, self.border_color, surf.get_rect(), self.border)
        return surf

    def __repr__(self):
        return f"<{self.__class__.__name__} id={self.id!r} visible={self.visible}>"
