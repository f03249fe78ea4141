"""
sprite_sheet.py
---------------
Procedural character sprite sheet and the sprite that displays it.

Sheet layout
------------
One row per facing direction, one column per animation frame:

    row 0  facing down
    row 1  facing left
    row 2  facing up
    row 3  facing right

Frames are drawn at startup so the game ships without binary assets.
"""

import math

import pygame

from pushball.core.runtime.game_settings import Sprites


# Facing vector for each row, matching player_movement.direction_bucket
ROW_FACINGS = (
    (0, 1),
    (-1, 0),
    (0, -1),
    (1, 0),
)


def build_character_sheet(frame_size=Sprites.FRAME_SIZE, color=(80, 170, 255),
                          frames: int = Sprites.FRAMES_PER_ROW) -> pygame.Surface:
    """
    Draw a 4-row character sheet.

    Each frame is a body disc with a facing marker; columns bob the body
    slightly so the walk cycle reads as motion.

    Args:
        frame_size: (width, height) of one frame
        color: Body RGB color
        frames: Columns per row

    Returns:
        pygame.Surface: Sheet of size (w * frames, h * 4) with per-pixel alpha
    """
    fw, fh = frame_size
    sheet = pygame.Surface((fw * frames, fh * len(ROW_FACINGS)), pygame.SRCALPHA)
    radius = min(fw, fh) // 2 - 3
    outline = tuple(max(c - 60, 0) for c in color)
    marker = (250, 250, 250)

    for row, (fx, fy) in enumerate(ROW_FACINGS):
        for col in range(frames):
            bob = round(2 * math.sin(col / frames * 2 * math.pi))
            cx = col * fw + fw // 2
            cy = row * fh + fh // 2 + bob

            pygame.draw.circle(sheet, color, (cx, cy), radius)
            pygame.draw.circle(sheet, outline, (cx, cy), radius, 2)

            nose = (cx + int(fx * radius * 0.6), cy + int(fy * radius * 0.6))
            pygame.draw.circle(sheet, marker, nose, max(radius // 4, 2))

    return sheet


class AnimatedSprite:
    """
    Displays one frame of a sheet, addressed by (column, row).

    The controller writes the row (facing); the animator writes the column.
    """

    __slots__ = ("sheet", "frame_size", "columns", "rows", "_column", "_row")

    def __init__(self, sheet: pygame.Surface, frame_size=Sprites.FRAME_SIZE):
        self.sheet = sheet
        self.frame_size = tuple(frame_size)
        self.columns = sheet.get_width() // self.frame_size[0]
        self.rows = sheet.get_height() // self.frame_size[1]
        self._column = 0
        self._row = 0

    @property
    def frame_coords(self) -> tuple:
        return self._column, self._row

    @property
    def row(self) -> int:
        return self._row

    @row.setter
    def row(self, value: int):
        self._row = int(value) % self.rows

    @property
    def column(self) -> int:
        return self._column

    @column.setter
    def column(self, value: int):
        self._column = int(value) % self.columns

    @property
    def image(self) -> pygame.Surface:
        """Current frame as a subsurface of the sheet."""
        fw, fh = self.frame_size
        return self.sheet.subsurface(pygame.Rect(self._column * fw, self._row * fh, fw, fh))
