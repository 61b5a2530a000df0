"""
Canvas Editor Module
====================

Bounded Context: Direct-manipulation editing of the shape collection.

Design:
- Orchestrator: input events -> collection/shape edits -> repaint
- Single-threaded; every operation (including its repaint) runs to completion
- Rendering is a read-only pass after the mutation, never interleaved
- Bad input is dropped and logged, not raised

Dependencies:
- sketchpad_shapes.geometry (shapes, factory)
- sketchpad_shapes.editor (collection, panel snapshots, config)
- sketchpad_shapes.rendering (surface, renderer)
"""

from typing import Any, Optional, Tuple, Union

import numpy as np

from sketchpad_shapes.editor.collection import ShapeCollection
from sketchpad_shapes.editor.config import EditorConfig
from sketchpad_shapes.editor.panel import (
    QUICK_ROTATIONS,
    PropertyPanel,
    ShapeListEntry,
    build_list_entry,
    build_panel,
)
from sketchpad_shapes.geometry.factory import create_shape
from sketchpad_shapes.geometry.shapes import (
    TRIANGLE_SIDES,
    Shape,
    ShapeKind,
    Triangle,
    parse_number,
)
from sketchpad_shapes.logging import LogEvent, StructuredLogger, create_logger
from sketchpad_shapes.rendering.canvas_renderer import CanvasRenderer
from sketchpad_shapes.rendering.surface import FrameSurface, RenderSurface

DELETE_KEY = "Delete"


class CanvasEditor:
    """
    Interactive diagram editor state.

    Owns the shape collection, the drag state and the canvas settings, and
    repaints the surface after every change.

    Usage:
        editor = CanvasEditor()
        editor.create_shape("rectangle")      # at canvas center
        editor.pointer_down(420, 320)         # select + start drag
        editor.pointer_move(440, 330)
        editor.pointer_up()
        editor.update_property("width", "180")
        frame = editor.render()
    """

    def __init__(
        self,
        config: Optional[EditorConfig] = None,
        surface: Optional[RenderSurface] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        """
        Args:
            config: Editor configuration (defaults: 800x600 canvas, grid 5)
            surface: Drawing surface (defaults to a FrameSurface of canvas size)
            logger: Structured logger (defaults to component "editor")
        """
        self.config = config or EditorConfig()
        self.width = self.config.canvas_width
        self.height = self.config.canvas_height
        self.grid_size = self.config.grid_size

        self.shapes = ShapeCollection()
        self.surface = surface if surface is not None else FrameSurface(
            self.width, self.height, background=self.config.background_color
        )
        self.renderer = CanvasRenderer(
            grid_color=self.config.grid_color,
            grid_line_width=self.config.grid_line_width,
            style=self.config.draw_style(),
        )
        self.logger = logger or create_logger("editor")

        self._dragging = False
        self._drag_start: Tuple[float, float] = (0.0, 0.0)

        self.render()

    @property
    def selected(self) -> Optional[Shape]:
        return self.shapes.selected

    @property
    def is_dragging(self) -> bool:
        return self._dragging

    # ------------------------------------------------------------------
    # Shape lifecycle
    # ------------------------------------------------------------------

    def create_shape(
        self,
        kind: Union[ShapeKind, str],
        x: Optional[float] = None,
        y: Optional[float] = None,
    ) -> Optional[Shape]:
        """
        Create a shape and put it on top of the stack.

        Args:
            kind: "rectangle", "circle" or "triangle"
            x: Anchor x (default: canvas center)
            y: Anchor y (default: canvas center)

        Returns:
            The new shape, or None for an unknown kind
        """
        anchor_x = self.width / 2 if x is None else x
        anchor_y = self.height / 2 if y is None else y

        shape = create_shape(kind, anchor_x, anchor_y)
        if shape is None:
            self.logger.warning(
                event=LogEvent.SHAPE_CREATE_REJECTED,
                message=f"Unknown shape kind: {kind}",
                metadata={'kind': str(kind)},
            )
            return None

        self.shapes.add(shape)
        self.logger.info(
            event=LogEvent.SHAPE_CREATED,
            message=f"Created {shape.kind.value}",
            metadata={'shape_id': shape.id, 'x': shape.x, 'y': shape.y},
        )
        self.render()
        return shape

    def select_shape(self, shape: Optional[Shape]) -> None:
        """Select ``shape`` (e.g. from the shape list); None clears."""
        self.shapes.select(shape)
        self._log_selection()
        self.render()

    def delete_selected(self) -> Optional[Shape]:
        """Remove the selected shape; returns it, or None without selection."""
        shape = self.selected
        if shape is None:
            return None

        self.shapes.remove(shape)
        self._dragging = False
        self.logger.info(
            event=LogEvent.SHAPE_REMOVED,
            message=f"Removed {shape.name}",
            metadata={'shape_id': shape.id},
        )
        self.render()
        return shape

    def rename_shape(self, index: int, name: str) -> bool:
        """Rename the shape at list position ``index``; False if out of range."""
        shape = self.shapes.at(index)
        if shape is None:
            return False
        shape.name = str(name)
        self.render()
        return True

    # ------------------------------------------------------------------
    # Pointer / keyboard
    # ------------------------------------------------------------------

    def pointer_down(self, x: float, y: float) -> Optional[Shape]:
        """
        Select the topmost shape under the pointer and start dragging it.

        A click on empty canvas clears the selection.
        """
        hit = self.shapes.hit_test(x, y)
        self.shapes.select(hit)

        if hit is not None:
            self._dragging = True
            self._drag_start = (x, y)

        self._log_selection()
        self.render()
        return hit

    def pointer_move(self, x: float, y: float) -> bool:
        """
        Drag the selected shape by the pointer delta.

        Returns:
            True if a shape moved
        """
        shape = self.selected
        if not self._dragging or shape is None:
            return False

        dx = x - self._drag_start[0]
        dy = y - self._drag_start[1]
        shape.move_by(dx, dy)
        self._drag_start = (x, y)

        self.logger.debug(
            event=LogEvent.SHAPE_MOVED,
            message=f"Moved {shape.name}",
            metadata={'shape_id': shape.id, 'dx': dx, 'dy': dy},
        )
        self.render()
        return True

    def pointer_up(self) -> None:
        self._dragging = False

    def key_down(self, key: str) -> bool:
        """Handle a key press; Delete removes the selected shape."""
        if key == DELETE_KEY:
            return self.delete_selected() is not None
        return False

    # ------------------------------------------------------------------
    # Property panel
    # ------------------------------------------------------------------

    def update_property(self, field: str, value: Any) -> bool:
        """
        Apply a property-panel edit to the selected shape.

        Returns:
            True if applied; False without selection, for unknown fields,
            or for unparseable numbers (prior value kept)
        """
        shape = self.selected
        if shape is None:
            self.logger.warning(
                event=LogEvent.SHAPE_EDIT_IGNORED,
                message="No shape selected",
                metadata={'field': field},
            )
            return False

        applied = shape.set_property(field, value)
        if not applied:
            self.logger.warning(
                event=LogEvent.SHAPE_EDIT_IGNORED,
                message=f"Rejected {field} edit on {shape.kind.value}",
                metadata={'shape_id': shape.id, 'field': field, 'value': value},
            )
            return False

        self.logger.info(
            event=LogEvent.SHAPE_EDIT_APPLIED,
            message=f"Set {field} on {shape.name}",
            metadata={'shape_id': shape.id, 'field': field, 'value': value},
        )
        if isinstance(shape, Triangle) and field in TRIANGLE_SIDES and shape.was_repaired:
            self.logger.info(
                event=LogEvent.TRIANGLE_SIDES_REPAIRED,
                message="Triangle sides adjusted to stay valid",
                metadata={'shape_id': shape.id, 'sides': list(shape.sides)},
            )

        self.render()
        return True

    def set_quick_rotation(self, degrees: int) -> bool:
        """Snap the selected shape's rotation to 0, 90, 180 or 270 degrees."""
        if degrees not in QUICK_ROTATIONS:
            self.logger.warning(
                event=LogEvent.SHAPE_EDIT_IGNORED,
                message=f"Not a quick rotation: {degrees}",
                metadata={'field': 'rotation', 'value': degrees},
            )
            return False
        return self.update_property("rotation", degrees)

    def shape_list(self) -> Tuple[ShapeListEntry, ...]:
        """Rows of the shape list, bottom-most first."""
        return tuple(build_list_entry(index, shape) for index, shape in enumerate(self.shapes))

    def panel(self) -> PropertyPanel:
        """Property panel for the current selection."""
        return build_panel(self.selected)

    # ------------------------------------------------------------------
    # Canvas
    # ------------------------------------------------------------------

    def resize_canvas(self, width: Any, height: Any) -> bool:
        """Change the canvas size; non-positive or unparseable sizes are ignored."""
        new_width = _parse_positive_int(width)
        new_height = _parse_positive_int(height)
        if new_width is None or new_height is None:
            self.logger.warning(
                event=LogEvent.CANVAS_EDIT_IGNORED,
                message="Invalid canvas size",
                metadata={'width': width, 'height': height},
            )
            return False

        self.width = new_width
        self.height = new_height
        if isinstance(self.surface, FrameSurface):
            self.surface.resize(new_width, new_height)

        self.logger.info(
            event=LogEvent.CANVAS_RESIZED,
            message=f"Canvas resized to {new_width}x{new_height}",
            metadata={'width': new_width, 'height': new_height},
        )
        self.render()
        return True

    def set_grid_size(self, size: Any) -> bool:
        """Change the grid spacing; non-positive or unparseable sizes are ignored."""
        new_size = _parse_positive_int(size)
        if new_size is None:
            self.logger.warning(
                event=LogEvent.CANVAS_EDIT_IGNORED,
                message="Invalid grid size",
                metadata={'grid_size': size},
            )
            return False

        self.grid_size = new_size
        self.logger.info(
            event=LogEvent.CANVAS_GRID_CHANGED,
            message=f"Grid size set to {new_size}",
            metadata={'grid_size': new_size},
        )
        self.render()
        return True

    def render(self) -> Optional[np.ndarray]:
        """
        Repaint the whole canvas.

        Returns:
            The frame when painting on a FrameSurface, otherwise None
        """
        self.renderer.render(self.surface, self.shapes, self.width, self.height, self.grid_size)
        self.logger.debug(
            event=LogEvent.CANVAS_RENDERED,
            message="Canvas repainted",
            metadata={'shapes': len(self.shapes)},
        )
        if isinstance(self.surface, FrameSurface):
            return self.surface.frame
        return None

    def _log_selection(self) -> None:
        shape = self.selected
        self.logger.info(
            event=LogEvent.SHAPE_SELECTED,
            message=f"Selected {shape.name}" if shape else "Selection cleared",
            metadata={'shape_id': shape.id if shape else None},
        )

    def __repr__(self) -> str:
        return (
            f"CanvasEditor({self.width}x{self.height}, grid={self.grid_size}, "
            f"shapes={len(self.shapes)})"
        )


def _parse_positive_int(value: Any) -> Optional[int]:
    number = parse_number(value)
    if number is None:
        return None
    number = int(number)
    return number if number > 0 else None
