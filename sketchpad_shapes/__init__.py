"""
Sketchpad Shapes v1.0
=====================

Bounded Context: Shape geometry and direct-manipulation editing for a 2D
diagram canvas.

Design Philosophy:
- Separation of Concerns: Geometry, Editor, Rendering separated
- Geometry is pure: containment and vertices never touch a surface
- Rendering is a read-only pass over the collection
- Pragmatismo > Purismo: supervision/OpenCV draw, we only transform

Architecture:

    sketchpad_shapes/
    ├── geometry/              # Pure geometry (no I/O)
    │   ├── color.py           # to_rgba colour conversion
    │   ├── shapes.py          # Shape, Rectangle, Circle, Triangle
    │   └── factory.py         # create_shape(kind, x, y)
    │
    ├── editor/                # Editing state (stateful)
    │   ├── collection.py      # ShapeCollection (order + selection)
    │   ├── panel.py           # Shape list / property panel snapshots
    │   ├── config.py          # EditorConfig (YAML)
    │   └── canvas.py          # CanvasEditor (orchestration)
    │
    ├── rendering/             # Drawing
    │   ├── surface.py         # RenderSurface, FrameSurface (numpy frame)
    │   └── canvas_renderer.py # Grid + shapes repaint
    │
    └── logging/               # Structured JSON logging

Usage:

    # 1. Geometry only
    from sketchpad_shapes import Rectangle

    rect = Rectangle(x=0, y=0, width=100, height=50)
    rect.rotation = 90
    rect.contains_point(50, 70)   # True

    # 2. Editor (pointer + panel operations)
    from sketchpad_shapes import CanvasEditor

    editor = CanvasEditor()
    triangle = editor.create_shape("triangle")
    editor.select_shape(triangle)
    editor.update_property("side_a", 150)   # repaired to 99

    # 3. Rendered frame (BGR numpy array)
    frame = editor.render()
"""

# Geometry Layer (pure)
from sketchpad_shapes.geometry import (
    BoundingBox,
    Circle,
    DrawStyle,
    Rectangle,
    Shape,
    ShapeKind,
    Triangle,
    create_shape,
    to_rgba,
)

# Editor Layer (stateful)
from sketchpad_shapes.editor import CanvasEditor, EditorConfig, ShapeCollection

# Rendering Layer
from sketchpad_shapes.rendering import CanvasRenderer, FrameSurface, RenderSurface

__all__ = [
    # Geometry
    "BoundingBox",
    "Circle",
    "DrawStyle",
    "Rectangle",
    "Shape",
    "ShapeKind",
    "Triangle",
    "create_shape",
    "to_rgba",
    # Editor
    "CanvasEditor",
    "EditorConfig",
    "ShapeCollection",
    # Rendering
    "CanvasRenderer",
    "FrameSurface",
    "RenderSurface",
]

__version__ = "1.0.0"
