"""
Geometry Layer
==============

Bounded Context: Shape model and spatial queries.

Responsibilities:
- Shape representation (Rectangle, Circle, Triangle)
- Center / bounding box / rotation-aware point containment
- Triangle side validity (clamp + sequential repair)
- Colour normalization for fills
- NO selection state ownership, NO canvas, NO pixels

Design Philosophy:
- One capability interface, closed variant set
- Pure queries; mutation only through single-field edits
- Silent rejection of bad input (no exceptions for user edits)
"""

from sketchpad_shapes.geometry.color import to_rgba
from sketchpad_shapes.geometry.shapes import (
    BoundingBox,
    Circle,
    DrawStyle,
    Rectangle,
    Shape,
    ShapeKind,
    Triangle,
)
from sketchpad_shapes.geometry.factory import create_shape

__all__ = [
    "BoundingBox",
    "Circle",
    "DrawStyle",
    "Rectangle",
    "Shape",
    "ShapeKind",
    "Triangle",
    "create_shape",
    "to_rgba",
]
