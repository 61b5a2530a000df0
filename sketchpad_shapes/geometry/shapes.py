"""
Geometric Shapes Module
========================

Editable diagram shapes and their rotation-aware geometry.

Design:
- Closed variant set (Rectangle, Circle, Triangle) behind one capability
  interface: center, bounding_box, contains_point, draw
- Rotation pivots on the geometric center, never the anchor
- Hit tests rotate the query point by -rotation instead of rotating the shape
- Edits are single-field sets over an explicit field whitelist per variant;
  bad input is dropped, never raised
- Drawing shares transform and label setup through module helpers
"""

import math
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Dict, FrozenSet, Optional, Tuple

import numpy as np

from sketchpad_shapes.geometry.color import to_rgba

if TYPE_CHECKING:
    from sketchpad_shapes.rendering.surface import RenderSurface

Point = Tuple[float, float]

DEFAULT_COLOR = "#000000"

TRIANGLE_MIN_SIDE = 10.0
TRIANGLE_MAX_SIDE = 200.0
TRIANGLE_SIDES = ("side_a", "side_b", "side_c")


class ShapeKind(str, Enum):
    """Shape variant tag (fixed at creation)."""
    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    TRIANGLE = "triangle"


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned box of the unrotated shape, placed in world coordinates.

    Attributes:
        x: Left edge
        y: Top edge
        width: Box width
        height: Box height
    """
    x: float
    y: float
    width: float
    height: float

    def to_dict(self) -> Dict[str, float]:
        """Serialize to dict."""
        return asdict(self)


@dataclass(frozen=True)
class DrawStyle:
    """
    Fixed styling applied by every shape's draw pass.

    Attributes:
        fill_opacity: Alpha injected into the fill colour
        selection_color: Outline colour of the selected shape
        selection_line_width: Outline width of the selected shape
        label_color: Name label colour
        label_font_size: Name label size (px)
        label_offset: Gap between the box top and the label baseline
    """
    fill_opacity: float = 0.5
    selection_color: str = "#0066ff"
    selection_line_width: float = 2
    label_color: str = "#000000"
    label_font_size: int = 14
    label_offset: float = 5


DEFAULT_STYLE = DrawStyle()


def parse_number(value: Any) -> Optional[float]:
    """
    Parse user input as a finite real.

    Returns:
        The float, or None when the input is not a finite number
    """
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def rotate_point(x: float, y: float, degrees: float) -> Point:
    """
    Rotate (x, y) about the origin by ``degrees`` (canvas orientation, y down).

    Works for any angle, including negative and > 360, without normalizing.
    """
    theta = degrees * math.pi / 180
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    return (x * cos_t - y * sin_t, x * sin_t + y * cos_t)


class Shape(ABC):
    """
    Capability interface shared by all shape variants.

    Common state:
        id: Opaque unique identifier (read-only)
        kind: Variant tag (class-level, read-only)
        name: Display label, defaults to the kind value
        x, y: Anchor point (NOT the geometric center)
        rotation: Degrees about center(), stored un-normalized
        color: Stored colour string (full opacity)
        is_selected: Transient selection flag (owned by ShapeCollection)
    """

    kind: ClassVar[ShapeKind]

    # Editable fields shared by every variant
    TEXT_FIELDS: ClassVar[FrozenSet[str]] = frozenset({"name", "color"})
    NUMERIC_FIELDS: ClassVar[FrozenSet[str]] = frozenset({"x", "y", "rotation"})
    # Extents that must stay strictly positive
    POSITIVE_FIELDS: ClassVar[FrozenSet[str]] = frozenset()

    def __init__(
        self,
        x: float,
        y: float,
        color: str = DEFAULT_COLOR,
        name: Optional[str] = None,
        shape_id: Optional[str] = None,
    ):
        self._id = shape_id or uuid.uuid4().hex[:12]
        self.name = name if name is not None else self.kind.value
        self.x = float(x)
        self.y = float(y)
        self.rotation = 0.0
        self.color = color
        self.is_selected = False

    @property
    def id(self) -> str:
        """Unique identifier assigned at creation."""
        return self._id

    @classmethod
    def editable_fields(cls) -> FrozenSet[str]:
        """All field names accepted by set_property()."""
        return cls.TEXT_FIELDS | cls.NUMERIC_FIELDS

    # ------------------------------------------------------------------
    # Capability interface
    # ------------------------------------------------------------------

    @abstractmethod
    def center(self) -> Point:
        """Geometric center (rotation pivot and label reference)."""

    @abstractmethod
    def bounding_box(self) -> BoundingBox:
        """Unrotated axis-aligned box in world coordinates."""

    @abstractmethod
    def contains_point(self, x: float, y: float) -> bool:
        """Rotation-aware point-in-shape test for a world-space point."""

    @abstractmethod
    def draw(self, surface: "RenderSurface", style: DrawStyle = DEFAULT_STYLE) -> None:
        """Paint the shape and its name label on ``surface``."""

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def set_property(self, field: str, value: Any) -> bool:
        """
        Apply a single-field edit.

        Text fields take the value as a string. Numeric fields parse it as a
        finite real; unparseable input leaves the prior value in place, as
        does a non-positive width, height or radius. Unknown field names
        are ignored.

        Args:
            field: Field name (see editable_fields())
            value: Raw user input

        Returns:
            True if the edit was applied, False if it was dropped
        """
        if field in self.TEXT_FIELDS:
            setattr(self, field, str(value))
            return True

        if field not in self.NUMERIC_FIELDS:
            return False

        number = parse_number(value)
        if number is None:
            return False
        if field in self.POSITIVE_FIELDS and number <= 0:
            return False

        self._set_numeric(field, number)
        return True

    def _set_numeric(self, field: str, number: float) -> None:
        setattr(self, field, number)

    def move_by(self, dx: float, dy: float) -> None:
        """Translate the anchor."""
        self.x += dx
        self.y += dy

    def to_local(self, x: float, y: float) -> Point:
        """
        Express a world point in the shape's unrotated, center-relative frame.

        The point is translated by -center() and rotated by -rotation.
        """
        cx, cy = self.center()
        return rotate_point(x - cx, y - cy, -self.rotation)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, name={self.name!r}, x={self.x}, y={self.y})"


# ----------------------------------------------------------------------
# Shared draw helpers
# ----------------------------------------------------------------------

def begin_draw(shape: Shape, surface: "RenderSurface", style: DrawStyle) -> None:
    """
    Open a shape draw pass: center/rotate the transform, set fill and
    selection styles, paint the un-rotated name label.

    Leaves one saved state on the surface; close it with finish_draw().
    """
    surface.save()
    cx, cy = shape.center()
    surface.translate(cx, cy)
    surface.rotate(shape.rotation * math.pi / 180)
    surface.fill_style = to_rgba(shape.color, style.fill_opacity)
    if shape.is_selected:
        surface.stroke_style = style.selection_color
        surface.line_width = style.selection_line_width

    # Label stays upright regardless of rotation
    surface.save()
    surface.rotate(-shape.rotation * math.pi / 180)
    surface.fill_style = style.label_color
    surface.font_size = style.label_font_size
    surface.text_align = "right"
    surface.text_baseline = "bottom"
    surface.fill_text(shape.name, 0, -shape.bounding_box().height / 2 - style.label_offset)
    surface.restore()


def finish_draw(shape: Shape, surface: "RenderSurface") -> None:
    """Fill the current path, outline it if selected, restore the transform."""
    surface.fill()
    if shape.is_selected:
        surface.stroke()
    surface.restore()


# ----------------------------------------------------------------------
# Variants
# ----------------------------------------------------------------------

class Rectangle(Shape):
    """
    Rectangle anchored at its unrotated top-left corner.

    center = anchor + (width/2, height/2)
    bounding_box origin = raw anchor
    """

    kind = ShapeKind.RECTANGLE
    NUMERIC_FIELDS = Shape.NUMERIC_FIELDS | {"width", "height"}
    POSITIVE_FIELDS = frozenset({"width", "height"})

    def __init__(self, x: float, y: float, width: float = 100, height: float = 50, **kwargs):
        super().__init__(x, y, **kwargs)
        self.width = float(width)
        self.height = float(height)

    def center(self) -> Point:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def bounding_box(self) -> BoundingBox:
        return BoundingBox(x=self.x, y=self.y, width=self.width, height=self.height)

    def contains_point(self, x: float, y: float) -> bool:
        local_x, local_y = self.to_local(x, y)
        return abs(local_x) <= self.width / 2 and abs(local_y) <= self.height / 2

    def draw(self, surface: "RenderSurface", style: DrawStyle = DEFAULT_STYLE) -> None:
        begin_draw(self, surface, style)
        surface.begin_path()
        surface.rect(-self.width / 2, -self.height / 2, self.width, self.height)
        finish_draw(self, surface)


class Circle(Shape):
    """
    Circle anchored at the top-left of its bounding square.

    center = anchor + (radius, radius)
    """

    kind = ShapeKind.CIRCLE
    NUMERIC_FIELDS = Shape.NUMERIC_FIELDS | {"radius"}
    POSITIVE_FIELDS = frozenset({"radius"})

    def __init__(self, x: float, y: float, radius: float = 25, **kwargs):
        super().__init__(x, y, **kwargs)
        self.radius = float(radius)

    def center(self) -> Point:
        return (self.x + self.radius, self.y + self.radius)

    def bounding_box(self) -> BoundingBox:
        return BoundingBox(x=self.x, y=self.y, width=self.radius * 2, height=self.radius * 2)

    def contains_point(self, x: float, y: float) -> bool:
        # Rotationally symmetric: no inverse rotation needed
        cx, cy = self.center()
        dx = x - cx
        dy = y - cy
        return dx * dx + dy * dy <= self.radius * self.radius

    def draw(self, surface: "RenderSurface", style: DrawStyle = DEFAULT_STYLE) -> None:
        begin_draw(self, surface, style)
        surface.begin_path()
        surface.arc(0, 0, self.radius, 0, math.pi * 2)
        finish_draw(self, surface)


class Triangle(Shape):
    """
    Triangle defined by its three side lengths (SSS).

    Local layout (origin at the anchor):
        V1 = (-A/2, 0)
        V2 = (+A/2, 0)
        angleB = acos((A² + C² - B²) / (2·A·C))
        V3 = V1 + C·(cos angleB, -sin angleB)

    Side lengths are kept valid after construction and every side edit:
    each side clamped to [10, 200], then the triangle inequality repaired
    sequentially (A+B vs C, then B+C vs A, then A+C vs B) by shrinking the
    offending side to one unit below the sum of the other two. The order is
    fixed and the repair is not symmetric in A, B and C.

    Attributes:
        side_a: Base (V1-V2)
        side_b: Right side (V2-V3)
        side_c: Left side (V1-V3)
        was_repaired: True if the last validation changed any side
    """

    kind = ShapeKind.TRIANGLE
    NUMERIC_FIELDS = Shape.NUMERIC_FIELDS | set(TRIANGLE_SIDES)

    def __init__(
        self,
        x: float,
        y: float,
        side_a: float = 50,
        side_b: float = 50,
        side_c: float = 50,
        **kwargs
    ):
        super().__init__(x, y, **kwargs)
        self.side_a = float(side_a)
        self.side_b = float(side_b)
        self.side_c = float(side_c)
        self.was_repaired = False
        self._validate_sides()

    @property
    def sides(self) -> Tuple[float, float, float]:
        """(side_a, side_b, side_c)."""
        return (self.side_a, self.side_b, self.side_c)

    def _validate_sides(self) -> None:
        before = self.sides

        self.side_a = max(TRIANGLE_MIN_SIDE, min(TRIANGLE_MAX_SIDE, self.side_a))
        self.side_b = max(TRIANGLE_MIN_SIDE, min(TRIANGLE_MAX_SIDE, self.side_b))
        self.side_c = max(TRIANGLE_MIN_SIDE, min(TRIANGLE_MAX_SIDE, self.side_c))

        if self.side_a + self.side_b <= self.side_c:
            self.side_c = self.side_a + self.side_b - 1
        if self.side_b + self.side_c <= self.side_a:
            self.side_a = self.side_b + self.side_c - 1
        if self.side_a + self.side_c <= self.side_b:
            self.side_b = self.side_a + self.side_c - 1

        self.was_repaired = self.sides != before

    def update_side(self, side: str, value: Any) -> bool:
        """
        Set one side length, then re-validate all three.

        Args:
            side: "side_a", "side_b" or "side_c"
            value: Raw user input

        Returns:
            True if applied, False if the side name or value was rejected
        """
        if side not in TRIANGLE_SIDES:
            return False
        number = parse_number(value)
        if number is None:
            return False
        setattr(self, side, number)
        self._validate_sides()
        return True

    def _set_numeric(self, field: str, number: float) -> None:
        if field in TRIANGLE_SIDES:
            self.update_side(field, number)
        else:
            super()._set_numeric(field, number)

    def _vertices(self) -> Tuple[Point, Point, Point]:
        a = self.side_a
        c = self.side_c
        cos_b = (a * a + c * c - self.side_b * self.side_b) / (2 * a * c)
        angle_b = math.acos(cos_b)

        x1 = -a / 2
        y1 = 0.0
        x2 = a / 2
        y2 = 0.0
        x3 = x1 + c * math.cos(angle_b)
        y3 = -c * math.sin(angle_b)
        return ((x1, y1), (x2, y2), (x3, y3))

    def local_vertices(self) -> np.ndarray:
        """3x2 array of V1, V2, V3 in the local frame."""
        return np.array(self._vertices(), dtype=float)

    def altitude(self) -> float:
        """Height over side A (Heron's formula)."""
        a, b, c = self.sides
        s = (a + b + c) / 2
        area = math.sqrt(s * (s - a) * (s - b) * (s - c))
        return (2 * area) / a

    def center(self) -> Point:
        (x1, _), (x2, _), (x3, y3) = self._vertices()
        return (
            self.x + (x1 + x2 + x3) / 3,
            self.y + (0 + 0 + y3) / 3,
        )

    def bounding_box(self) -> BoundingBox:
        (x1, y1), (x2, y2), (x3, y3) = self._vertices()
        min_x = min(x1, x2, x3)
        max_x = max(x1, x2, x3)
        min_y = min(y1, y2, y3)
        max_y = max(y1, y2, y3)
        return BoundingBox(
            x=self.x + min_x,
            y=self.y + min_y,
            width=max_x - min_x,
            height=max_y - min_y,
        )

    def contains_point(self, x: float, y: float) -> bool:
        px, py = self.to_local(x, y)
        (x1, y1), (x2, y2), (x3, y3) = self._vertices()

        denominator = (y2 - y3) * (x1 - x3) + (x3 - x2) * (y1 - y3)
        a1 = ((y2 - y3) * (px - x3) + (x3 - x2) * (py - y3)) / denominator
        b1 = ((y3 - y1) * (px - x3) + (x1 - x3) * (py - y3)) / denominator
        c1 = 1 - a1 - b1

        return 0 <= a1 <= 1 and 0 <= b1 <= 1 and 0 <= c1 <= 1

    def draw(self, surface: "RenderSurface", style: DrawStyle = DEFAULT_STYLE) -> None:
        begin_draw(self, surface, style)
        (x1, y1), (x2, y2), (x3, y3) = self._vertices()
        surface.begin_path()
        surface.move_to(x1, y1)
        surface.line_to(x2, y2)
        surface.line_to(x3, y3)
        surface.close_path()
        finish_draw(self, surface)
