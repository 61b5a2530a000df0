"""
Panel Snapshots Module
======================

Immutable views of editor state for the shape list and the property panel.

Design:
- Frozen dataclasses (value objects)
- Built by CanvasEditor after every change; never mutated by the UI
- UI writes go back through CanvasEditor.update_property()
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from sketchpad_shapes.geometry.shapes import Circle, Rectangle, Shape, Triangle

QUICK_ROTATIONS: Tuple[int, ...] = (0, 90, 180, 270)


def display_round(value: float) -> int:
    """Round half up (2.5 -> 3, -2.5 -> -2), as list and panel inputs show it."""
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class ShapeListEntry:
    """One row of the shape list (position rounded for display)."""

    index: int
    shape_id: str
    name: str
    x: int
    y: int
    selected: bool = False

    def __str__(self) -> str:
        marker = "*" if self.selected else " "
        return f"{marker} [{self.index}] {self.name}  X: {self.x}, Y: {self.y}"


@dataclass(frozen=True)
class PanelField:
    """
    One editable input of the property panel.

    Attributes:
        field: Name accepted by Shape.set_property()
        label: Display label
        value: Current value (number or colour string)
        input_type: "number" or "color"
        enabled: False on the empty-selection panel
    """

    field: str
    label: str
    value: Any
    input_type: str = "number"
    enabled: bool = True


@dataclass(frozen=True)
class PropertyPanel:
    """
    Property panel state.

    With no selection, the panel shows disabled position/rotation/colour
    inputs and no variant fields.
    """

    shape_id: Optional[str]
    kind: Optional[str]
    fields: Tuple[PanelField, ...] = ()
    quick_rotations: Tuple[int, ...] = QUICK_ROTATIONS
    can_delete: bool = False

    @property
    def enabled(self) -> bool:
        return self.shape_id is not None

    def values(self) -> Dict[str, Any]:
        """Map of field name to displayed value."""
        return {f.field: f.value for f in self.fields}


_VARIANT_FIELDS = {
    Rectangle: (("width", "Width"), ("height", "Height")),
    Circle: (("radius", "Radius"),),
    Triangle: (
        ("side_a", "Base (Side A)"),
        ("side_b", "Right Side (Side B)"),
        ("side_c", "Left Side (Side C)"),
    ),
}


def empty_panel() -> PropertyPanel:
    """Disabled panel shown when nothing is selected."""
    return PropertyPanel(
        shape_id=None,
        kind=None,
        fields=(
            PanelField("x", "Position X", math.nan, enabled=False),
            PanelField("y", "Position Y", math.nan, enabled=False),
            PanelField("rotation", "Rotation", math.nan, enabled=False),
            PanelField("color", "Color", "#000000", input_type="color", enabled=False),
        ),
    )


def build_panel(shape: Optional[Shape]) -> PropertyPanel:
    """Property panel for ``shape`` (or the empty panel)."""
    if shape is None:
        return empty_panel()

    common = (
        PanelField("x", "Position X", display_round(shape.x)),
        PanelField("y", "Position Y", display_round(shape.y)),
        PanelField("rotation", "Rotation", shape.rotation),
        PanelField("color", "Color", shape.color, input_type="color"),
    )
    variant = tuple(
        PanelField(name, label, getattr(shape, name))
        for name, label in _VARIANT_FIELDS.get(type(shape), ())
    )

    return PropertyPanel(
        shape_id=shape.id,
        kind=shape.kind.value,
        fields=common + variant,
        can_delete=True,
    )


def build_list_entry(index: int, shape: Shape) -> ShapeListEntry:
    return ShapeListEntry(
        index=index,
        shape_id=shape.id,
        name=shape.name,
        x=display_round(shape.x),
        y=display_round(shape.y),
        selected=shape.is_selected,
    )
