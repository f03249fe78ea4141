"""
draw_manager.py
---------------
Centralized rendering manager for batching and layered draw calls.

Responsibilities:
- Maintain layered draw queue (surfaces and primitive shapes)
- Translate pymunk shapes of physics objects into primitive shapes
- Render queued items once per frame
"""

import pygame
import pymunk

from pushball.core.debug.debug_logger import DebugLogger
from pushball.core.runtime.game_settings import Display


class DrawManager:
    """Handles all rendering operations with layered batching."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, background_color=Display.BACKGROUND_COLOR):
        """Initialize draw manager with empty queues."""
        self.background_color = background_color

        # Layer queues
        self.surface_layers = {}  # {layer: [(surface, rect), ...]}
        self.shape_layers = {}    # {layer: [(shape_type, color, kwargs), ...]}
        self._layer_keys_cache = []
        self._layers_dirty = False

        DebugLogger.init_entry("DrawManager")

    # ===========================================================
    # Queueing
    # ===========================================================

    def clear(self):
        """Drop everything queued for the current frame."""
        for items in self.surface_layers.values():
            items.clear()
        for items in self.shape_layers.values():
            items.clear()

    def queue_draw(self, surface, rect, layer=0):
        """
        Queue a surface for drawing.

        Args:
            surface: pygame.Surface to draw
            rect: Position rectangle
            layer: Render layer (lower = first)
        """
        if surface is None or rect is None:
            DebugLogger.warn(f"Skipped invalid draw call at layer {layer}", category="drawing")
            return

        if layer not in self.surface_layers:
            self.surface_layers[layer] = []
            self._layers_dirty = True

        self.surface_layers[layer].append((surface, rect))

    def queue_shape(self, shape_type, color, layer=0, **kwargs):
        """
        Queue a primitive shape.

        Args:
            shape_type: "rect", "circle", "polygon" or "line"
            color: RGB(A) tuple
            layer: Render layer
            **kwargs: Shape params (rect, center/radius, points, start_pos/end_pos, width)
        """
        if layer not in self.shape_layers:
            self.shape_layers[layer] = []
            self._layers_dirty = True

        self.shape_layers[layer].append((shape_type, color, kwargs))

    def queue_physics_object(self, obj, layer=0, outline=None):
        """
        Queue a physics object's collision shape.

        Circles get a radius line so rotation is visible.

        Args:
            obj: PhysicsObject with .shape and .color
            layer: Render layer
            outline: Optional outline color
        """
        shape = obj.shape
        body = shape.body

        if isinstance(shape, pymunk.Circle):
            center = body.local_to_world(shape.offset)
            tip = body.local_to_world(shape.offset + pymunk.Vec2d(shape.radius, 0))
            self.queue_shape("circle", obj.color, layer, center=tuple(center), radius=shape.radius)
            self.queue_shape("line", outline or (30, 30, 30), layer,
                             start_pos=tuple(center), end_pos=tuple(tip), width=2)

        elif isinstance(shape, pymunk.Poly):
            points = [tuple(body.local_to_world(v)) for v in shape.get_vertices()]
            self.queue_shape("polygon", obj.color, layer, points=points)
            if outline:
                self.queue_shape("polygon", outline, layer, points=points, width=2)

        elif isinstance(shape, pymunk.Segment):
            a = body.local_to_world(shape.a)
            b = body.local_to_world(shape.b)
            self.queue_shape("line", obj.color, layer, start_pos=tuple(a), end_pos=tuple(b),
                             width=max(int(shape.radius * 2), 1))

        else:
            DebugLogger.warn(f"Cannot draw shape {type(shape).__name__}", category="drawing")

    # ===========================================================
    # Rendering
    # ===========================================================

    def render(self, target_surface, debug=False):
        """
        Render all queued items to target surface, then clear the queues.

        Args:
            target_surface: Main display surface
            debug: Log render stats if True
        """
        target_surface.fill(self.background_color)

        if self._layers_dirty:
            all_layers = set(self.surface_layers.keys()) | set(self.shape_layers.keys())
            self._layer_keys_cache = sorted(all_layers)
            self._layers_dirty = False

        for layer in self._layer_keys_cache:
            for shape_type, color, kwargs in self.shape_layers.get(layer, ()):
                self._draw_shape(target_surface, shape_type, color, **kwargs)

            surfaces = self.surface_layers.get(layer)
            if surfaces:
                target_surface.blits(surfaces)

        if debug:
            surface_count = sum(len(items) for items in self.surface_layers.values())
            shape_count = sum(len(items) for items in self.shape_layers.values())
            DebugLogger.state(f"Rendered {surface_count} surfaces and {shape_count} shapes",
                              category="drawing")

        self.clear()

    def _draw_shape(self, surface, shape_type, color, **kwargs):
        """Draw one primitive shape on surface."""
        width = kwargs.get("width", 0)

        if shape_type == "rect":
            pygame.draw.rect(surface, color, kwargs["rect"], width)
        elif shape_type == "circle":
            pygame.draw.circle(surface, color, kwargs["center"], kwargs["radius"], width)
        elif shape_type == "polygon":
            pygame.draw.polygon(surface, color, kwargs["points"], width)
        elif shape_type == "line":
            pygame.draw.line(surface, color, kwargs["start_pos"], kwargs["end_pos"], max(width, 1))
        else:
            DebugLogger.warn(f"Unknown shape type: {shape_type}", category="drawing")
