"""
Editor layer: collection, selection, panel snapshots, configuration.

Stateful; mutated only through CanvasEditor operations.
"""

from sketchpad_shapes.editor.canvas import CanvasEditor
from sketchpad_shapes.editor.collection import ShapeCollection
from sketchpad_shapes.editor.config import EditorConfig
from sketchpad_shapes.editor.panel import (
    QUICK_ROTATIONS,
    PanelField,
    PropertyPanel,
    ShapeListEntry,
    build_list_entry,
    build_panel,
)

__all__ = [
    "CanvasEditor",
    "ShapeCollection",
    "EditorConfig",
    "QUICK_ROTATIONS",
    "PanelField",
    "PropertyPanel",
    "ShapeListEntry",
    "build_list_entry",
    "build_panel",
]
