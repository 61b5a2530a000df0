"""
Test Canvas Editor
==================

Selection, hit-testing, dragging, property edits, panel snapshots and
configuration loading on a small in-memory canvas.

Usage:
    python test_editor.py
    pytest test_editor.py
"""

import math
import os
import tempfile

import pytest

from sketchpad_shapes import CanvasEditor, Circle, EditorConfig, Rectangle, ShapeCollection, Triangle
from sketchpad_shapes.editor.panel import build_list_entry, display_round


def make_editor() -> CanvasEditor:
    """Small canvas keeps every repaint cheap."""
    return CanvasEditor(EditorConfig(canvas_width=200, canvas_height=150, grid_size=10))


def test_collection_hit_test_order():
    """Topmost (last inserted) shape wins when shapes overlap."""
    print("\n" + "=" * 60)
    print("TEST: Collection hit-test order")
    print("=" * 60)

    collection = ShapeCollection()
    bottom = collection.add(Rectangle(x=0, y=0))
    middle = collection.add(Circle(x=25, y=0))
    top = collection.add(Rectangle(x=40, y=10, width=20, height=20))

    assert collection.hit_test(50, 20) is top
    assert collection.hit_test(50, 40) is middle
    assert collection.hit_test(5, 5) is bottom
    assert collection.hit_test(500, 500) is None
    print("✓ Reverse insertion order, None on empty space")

    assert collection.index_of(middle) == 1
    assert collection.at(3) is None
    assert collection.counts_by_kind() == {"rectangle": 2, "circle": 1}
    print("✓ Index lookup and per-kind counts")


def test_collection_selection():
    print("\n" + "=" * 60)
    print("TEST: Single selection")
    print("=" * 60)

    collection = ShapeCollection()
    first = collection.add(Rectangle(x=0, y=0))
    second = collection.add(Triangle(x=200, y=200))

    collection.select(first)
    collection.select(second)
    assert collection.selected is second
    assert [s.is_selected for s in collection] == [False, True]
    print("✓ At most one shape flagged")

    collection.select(Circle(x=0, y=0))
    assert collection.selected is None
    assert not any(s.is_selected for s in collection)
    print("✓ Non-member selection clears")

    collection.select(first)
    assert collection.remove(first)
    assert collection.selected_id is None
    assert not collection.remove(first)
    assert len(collection) == 1
    print("✓ Removing the selected shape clears the selection")


def test_create_shape_at_center():
    print("\n" + "=" * 60)
    print("TEST: Editor shape creation")
    print("=" * 60)

    editor = CanvasEditor()
    rect = editor.create_shape("rectangle")
    assert (rect.x, rect.y) == (400, 300)
    assert editor.selected is None
    print("✓ New shapes anchored at canvas center, unselected")

    assert editor.create_shape("hexagon") is None
    assert len(editor.shapes) == 1
    print("✓ Unknown kind rejected")


def test_pointer_select_and_drag():
    print("\n" + "=" * 60)
    print("TEST: Pointer selection and drag")
    print("=" * 60)

    editor = make_editor()
    rect = editor.create_shape("rectangle", 10, 10)
    circle = editor.create_shape("circle", 150, 50)

    assert editor.pointer_down(20, 20) is rect
    assert rect.is_selected and editor.is_dragging
    assert editor.pointer_move(30, 25)
    assert editor.pointer_move(40, 30)
    assert (rect.x, rect.y) == (30, 20)
    editor.pointer_up()
    assert not editor.is_dragging
    assert not editor.pointer_move(100, 100)
    assert (rect.x, rect.y) == (30, 20)
    print("✓ Drag moves the anchor by the pointer delta")

    assert editor.pointer_down(175, 75) is circle
    assert circle.is_selected and not rect.is_selected
    print("✓ Clicking another shape moves the selection")

    assert editor.pointer_down(5, 140) is None
    assert editor.selected is None
    assert not circle.is_selected
    assert not editor.pointer_move(10, 140)
    print("✓ Click on empty canvas clears the selection")


def test_delete_key():
    print("\n" + "=" * 60)
    print("TEST: Delete key")
    print("=" * 60)

    editor = make_editor()
    rect = editor.create_shape("rectangle", 10, 10)

    assert not editor.key_down("Delete")
    editor.select_shape(rect)
    assert not editor.key_down("Backspace")
    assert len(editor.shapes) == 1
    assert editor.key_down("Delete")
    assert len(editor.shapes) == 0
    assert editor.selected is None
    print("✓ Delete removes only the selected shape")


def test_update_property():
    print("\n" + "=" * 60)
    print("TEST: Property panel edits")
    print("=" * 60)

    editor = make_editor()
    assert not editor.update_property("x", 10)
    print("✓ No selection: edit dropped")

    triangle = editor.create_shape("triangle", 50, 100)
    editor.select_shape(triangle)
    assert editor.update_property("side_a", "150")
    assert triangle.sides == (99, 50, 50)
    assert editor.panel().values()["side_a"] == 99
    print("✓ Triangle side edit repaired and reflected in the panel")

    assert not editor.update_property("side_b", "abc")
    assert not editor.update_property("width", 10)
    assert triangle.side_b == 50
    print("✓ Unparseable or foreign fields ignored")

    assert editor.update_property("name", "Roof")
    assert editor.shape_list()[0].name == "Roof"
    print("✓ Name edit shows in the shape list")


def test_quick_rotation():
    print("\n" + "=" * 60)
    print("TEST: Quick rotation")
    print("=" * 60)

    editor = make_editor()
    rect = editor.create_shape("rectangle", 10, 10)
    editor.select_shape(rect)

    assert editor.set_quick_rotation(270)
    assert rect.rotation == 270
    assert not editor.set_quick_rotation(45)
    assert rect.rotation == 270
    print("✓ Only 0/90/180/270 accepted")


def test_canvas_settings():
    print("\n" + "=" * 60)
    print("TEST: Canvas size and grid")
    print("=" * 60)

    editor = make_editor()
    assert editor.resize_canvas(320, "240")
    assert (editor.width, editor.height) == (320, 240)
    assert editor.render().shape == (240, 320, 3)
    print("✓ Resize replaces the frame")

    assert not editor.resize_canvas(0, 100)
    assert not editor.resize_canvas("abc", 100)
    assert (editor.width, editor.height) == (320, 240)
    print("✓ Invalid sizes ignored")

    assert editor.set_grid_size("20")
    assert editor.grid_size == 20
    assert not editor.set_grid_size(-5)
    assert editor.grid_size == 20
    print("✓ Grid size must be positive")


def test_shape_list_and_panel():
    print("\n" + "=" * 60)
    print("TEST: Shape list and panel snapshots")
    print("=" * 60)

    assert display_round(2.5) == 3
    assert display_round(-2.5) == -2
    assert display_round(10.4) == 10

    editor = make_editor()
    first = editor.create_shape("rectangle", 10.5, 20.4)
    editor.create_shape("circle", 60, 60)
    editor.select_shape(first)

    rows = editor.shape_list()
    assert [row.index for row in rows] == [0, 1]
    assert (rows[0].x, rows[0].y) == (11, 20)
    assert rows[0].selected and not rows[1].selected
    assert str(rows[0]) == "* [0] rectangle  X: 11, Y: 20"
    assert build_list_entry(1, first).index == 1
    print("✓ List rows rounded and flagged")

    assert editor.rename_shape(1, "Wheel")
    assert editor.shapes.at(1).name == "Wheel"
    assert not editor.rename_shape(5, "Nope")
    print("✓ Rename by index; out of range ignored")

    panel = editor.panel()
    assert panel.enabled and panel.can_delete
    assert panel.kind == "rectangle"
    assert list(panel.values()) == ["x", "y", "rotation", "color", "width", "height"]
    print("✓ Rectangle panel fields")

    editor.select_shape(None)
    panel = editor.panel()
    assert not panel.enabled
    assert math.isnan(panel.values()["x"])
    assert panel.values()["color"] == "#000000"
    assert not any(f.enabled for f in panel.fields)
    print("✓ Empty panel disabled")


def test_editor_config():
    print("\n" + "=" * 60)
    print("TEST: Editor configuration")
    print("=" * 60)

    config = EditorConfig()
    assert (config.canvas_width, config.canvas_height, config.grid_size) == (800, 600, 5)
    assert config.draw_style().fill_opacity == 0.5

    for bad in (
        {"canvas_width": 0},
        {"grid_size": 0},
        {"fill_opacity": 1.5},
        {"selection_color": "not-a-colour"},
    ):
        with pytest.raises(ValueError):
            EditorConfig(**bad)
    print("✓ Invalid settings rejected")

    with tempfile.TemporaryDirectory() as folder:
        path = os.path.join(folder, "editor.yaml")
        with open(path, "w") as f:
            f.write("canvas_width: 1024\ngrid_size: 10\nselection_color: '#ff6600'\n")
        config = EditorConfig.from_yaml(path)
        assert config.canvas_width == 1024
        assert config.canvas_height == 600
        assert config.selection_color == "#ff6600"

        with open(path, "w") as f:
            f.write("canvas_depth: 3\n")
        with pytest.raises(ValueError):
            EditorConfig.from_yaml(path)

    with pytest.raises(FileNotFoundError):
        EditorConfig.from_yaml("does/not/exist.yaml")
    print("✓ YAML loading")


def main():
    """Run all tests."""
    print("\n🖱️  sketchpad_shapes - Editor Tests")
    print("=" * 60)

    try:
        test_collection_hit_test_order()
        test_collection_selection()
        test_create_shape_at_center()
        test_pointer_select_and_drag()
        test_delete_key()
        test_update_property()
        test_quick_rotation()
        test_canvas_settings()
        test_shape_list_and_panel()
        test_editor_config()

        print("\n" + "=" * 60)
        print("✅ ALL TESTS PASSED!")
        print("=" * 60)

    except AssertionError as e:
        print(f"\n❌ TEST FAILED: {e}")
        raise


if __name__ == "__main__":
    main()
