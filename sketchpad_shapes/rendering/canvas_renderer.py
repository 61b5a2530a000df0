"""
Canvas Renderer Module
======================

Full repaint of the editor canvas: background, grid, shapes (back to front).

Design:
- Read-only pass over shape state
- Shapes paint themselves through Shape.draw()
- Grid is display-only (no snapping)
"""

from typing import Iterable

from sketchpad_shapes.geometry.shapes import DEFAULT_STYLE, DrawStyle, Shape
from sketchpad_shapes.rendering.surface import RenderSurface


class CanvasRenderer:
    """
    Stateless renderer for the editor canvas.

    Usage:
        renderer = CanvasRenderer(grid_color="#dddddd", grid_line_width=0.5)
        renderer.render(surface, shapes, width=800, height=600, grid_size=5)
    """

    def __init__(
        self,
        grid_color: str = "#dddddd",
        grid_line_width: float = 0.5,
        style: DrawStyle = DEFAULT_STYLE,
    ):
        """
        Args:
            grid_color: Grid line colour
            grid_line_width: Grid line width
            style: Styling passed to every Shape.draw()
        """
        self.grid_color = grid_color
        self.grid_line_width = grid_line_width
        self.style = style

    def render(
        self,
        surface: RenderSurface,
        shapes: Iterable[Shape],
        width: int,
        height: int,
        grid_size: int,
    ) -> None:
        """
        Clear the surface, draw the grid, then every shape in insertion order.

        Args:
            surface: Target surface
            shapes: Shapes, bottom-most first
            width: Canvas width
            height: Canvas height
            grid_size: Grid spacing (> 0)
        """
        surface.clear()
        self.draw_grid(surface, width, height, grid_size)
        for shape in shapes:
            shape.draw(surface, self.style)

    def draw_grid(self, surface: RenderSurface, width: int, height: int, grid_size: int) -> None:
        """Draw vertical then horizontal grid lines every ``grid_size`` units."""
        if grid_size <= 0:
            return

        surface.save()
        surface.stroke_style = self.grid_color
        surface.line_width = self.grid_line_width

        for x in range(0, width, grid_size):
            surface.begin_path()
            surface.move_to(x, 0)
            surface.line_to(x, height)
            surface.stroke()

        for y in range(0, height, grid_size):
            surface.begin_path()
            surface.move_to(0, y)
            surface.line_to(width, y)
            surface.stroke()

        surface.restore()
