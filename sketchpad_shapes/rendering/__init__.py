"""
Rendering Layer
===============

Bounded Context: Canvas painting.

Responsibilities:
- Drawing surface contract (transform stack, paths, fill/stroke, text)
- Raster surface over numpy frames
- Full canvas repaint (grid + shapes)

Non-responsibilities:
- Geometry (handled by geometry)
- Selection and edits (handled by editor)

Design:
- Read-only passes over shape state
- Uses supervision drawing utilities
"""

from sketchpad_shapes.rendering.surface import FrameSurface, RenderSurface, parse_style
from sketchpad_shapes.rendering.canvas_renderer import CanvasRenderer

__all__ = [
    "CanvasRenderer",
    "FrameSurface",
    "RenderSurface",
    "parse_style",
]
