"""
Shape Factory
=============

Creates shapes from a kind tag and a world position, with variant defaults.
"""

from typing import Dict, Optional, Type, Union

from sketchpad_shapes.geometry.shapes import Circle, Rectangle, Shape, ShapeKind, Triangle

SHAPE_TYPES: Dict[ShapeKind, Type[Shape]] = {
    ShapeKind.RECTANGLE: Rectangle,
    ShapeKind.CIRCLE: Circle,
    ShapeKind.TRIANGLE: Triangle,
}


def parse_kind(kind: Union[ShapeKind, str]) -> Optional[ShapeKind]:
    """Resolve a kind tag; None if it names no known variant."""
    if isinstance(kind, ShapeKind):
        return kind
    try:
        return ShapeKind(str(kind).strip().lower())
    except ValueError:
        return None


def create_shape(kind: Union[ShapeKind, str], x: float, y: float) -> Optional[Shape]:
    """
    Create a shape of ``kind`` anchored at (x, y) with variant defaults.

    Defaults:
        rectangle: 100 x 50
        circle: radius 25
        triangle: sides 50 / 50 / 50

    Args:
        kind: ShapeKind or its string value ("rectangle", "circle", "triangle")
        x: Anchor x
        y: Anchor y

    Returns:
        New shape, or None for an unknown kind
    """
    resolved = parse_kind(kind)
    if resolved is None:
        return None
    return SHAPE_TYPES[resolved](x, y)
