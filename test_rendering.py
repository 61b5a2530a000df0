"""
Test Rendering
==============

Draw-call order through a recording surface, and pixels on a FrameSurface.

Usage:
    python test_rendering.py
    pytest test_rendering.py
"""

import math

import numpy as np
import pytest

from sketchpad_shapes import CanvasRenderer, Circle, DrawStyle, FrameSurface, Rectangle, Triangle
from sketchpad_shapes.rendering.surface import RenderSurface, parse_style


class RecordingSurface(RenderSurface):
    """Records draw calls with the styles active at call time."""

    def __init__(self):
        super().__init__()
        self.calls = []
        self.stack = []

    def _record(self, name, *args):
        self.calls.append((name, args, self._style_snapshot()))

    def names(self):
        return [name for name, _, _ in self.calls]

    def find(self, name):
        return [call for call in self.calls if call[0] == name]

    @property
    def depth(self):
        return len(self.stack)

    def save(self):
        self.stack.append(self._style_snapshot())
        self._record("save")

    def restore(self):
        if self.stack:
            self._apply_snapshot(self.stack.pop())
        self._record("restore")

    def translate(self, tx, ty):
        self._record("translate", tx, ty)

    def rotate(self, angle):
        self._record("rotate", angle)

    def begin_path(self):
        self._record("begin_path")

    def move_to(self, x, y):
        self._record("move_to", x, y)

    def line_to(self, x, y):
        self._record("line_to", x, y)

    def close_path(self):
        self._record("close_path")

    def rect(self, x, y, width, height):
        self._record("rect", x, y, width, height)

    def arc(self, cx, cy, radius, start, end):
        self._record("arc", cx, cy, radius, start, end)

    def fill(self):
        self._record("fill")

    def stroke(self):
        self._record("stroke")

    def fill_text(self, text, x, y):
        self._record("fill_text", text, x, y)

    def clear(self):
        self._record("clear")


def test_rectangle_draw_sequence():
    """Label first, then the path, fill, and outline only when selected."""
    print("\n" + "=" * 60)
    print("TEST: Rectangle draw sequence")
    print("=" * 60)

    rect = Rectangle(x=0, y=0, width=100, height=50)
    rect.color = "#ff0000"
    rect.rotation = 90

    surface = RecordingSurface()
    rect.draw(surface)

    names = surface.names()
    assert names.index("fill_text") < names.index("rect") < names.index("fill")
    assert "stroke" not in names
    assert surface.depth == 0
    assert surface.text_align == "start" and surface.font_size == 10
    print("✓ Unselected: no outline, balanced save/restore")

    assert surface.find("translate")[0][1] == (50, 25)
    assert math.isclose(surface.find("rotate")[0][1][0], math.pi / 2)
    assert surface.find("rect")[0][1] == (-50, -25, 100, 50)
    print("✓ Drawn about the center with the shape rotation")

    _, (text, x, y), style = surface.find("fill_text")[0]
    assert (text, x, y) == ("rectangle", 0, -30)
    assert style["text_align"] == "right" and style["text_baseline"] == "bottom"
    assert style["fill_style"] == "#000000"
    assert style["font_size"] == 14
    print("✓ Label right/bottom aligned above the box")

    assert surface.find("fill")[0][2]["fill_style"] == "rgba(255, 0, 0, 0.5)"
    print("✓ Fill uses the colour at fill opacity")

    rect.is_selected = True
    surface = RecordingSurface()
    rect.draw(surface, DrawStyle(selection_color="#00ff00", selection_line_width=3))
    _, _, style = surface.find("stroke")[0]
    assert style["stroke_style"] == "#00ff00" and style["line_width"] == 3
    assert surface.names().index("fill") < surface.names().index("stroke")
    print("✓ Selected: outline after fill in the selection style")


def test_circle_and_triangle_paths():
    print("\n" + "=" * 60)
    print("TEST: Circle and triangle paths")
    print("=" * 60)

    surface = RecordingSurface()
    Circle(x=0, y=0, radius=25).draw(surface)
    assert surface.find("arc")[0][1] == (0, 0, 25, 0, math.pi * 2)
    assert surface.find("translate")[0][1] == (25, 25)
    print("✓ Circle arc around the center")

    triangle = Triangle(x=0, y=0)
    surface = RecordingSurface()
    triangle.draw(surface)
    names = surface.names()
    assert names.count("line_to") == 2
    assert names.index("move_to") < names.index("close_path") < names.index("fill")
    _, (_, _, label_y), _ = surface.find("fill_text")[0]
    assert math.isclose(label_y, -triangle.bounding_box().height / 2 - 5)
    print("✓ Triangle closed path; label above its bounding box")


def test_renderer_grid():
    print("\n" + "=" * 60)
    print("TEST: Grid rendering")
    print("=" * 60)

    renderer = CanvasRenderer(grid_color="#cccccc", grid_line_width=0.5)
    surface = RecordingSurface()
    renderer.render(surface, [], width=20, height=10, grid_size=5)

    assert surface.names()[0] == "clear"
    strokes = surface.find("stroke")
    assert len(strokes) == 6
    assert all(style["stroke_style"] == "#cccccc" for _, _, style in strokes)
    moves = [args for _, args, _ in surface.find("move_to")]
    assert moves == [(0, 0), (5, 0), (10, 0), (15, 0), (0, 0), (0, 5)]
    print("✓ Vertical then horizontal lines every grid step")

    surface = RecordingSurface()
    renderer.render(surface, [Rectangle(0, 0), Circle(0, 0)], width=20, height=10, grid_size=5)
    texts = [args[0] for _, args, _ in surface.find("fill_text")]
    assert texts == ["rectangle", "circle"]
    print("✓ Shapes painted in insertion order after the grid")


def test_parse_style():
    print("\n" + "=" * 60)
    print("TEST: Style parsing")
    print("=" * 60)

    color, alpha = parse_style("#ff0000")
    assert color.as_bgr() == (0, 0, 255) and alpha == 1.0
    color, alpha = parse_style("rgba(0, 128, 255, 0.5)")
    assert color.as_rgb() == (0, 128, 255) and alpha == 0.5
    color, _ = parse_style("rgb(300,20,30)")
    assert color.as_rgb() == (255, 20, 30)
    assert parse_style("red") is None
    assert parse_style("#zzzzzz") is None
    print("✓ Hex and rgb()/rgba() styles understood")


def test_frame_surface_pixels():
    print("\n" + "=" * 60)
    print("TEST: FrameSurface pixels")
    print("=" * 60)

    surface = FrameSurface(width=120, height=100)
    assert surface.frame.shape == (100, 120, 3)
    assert surface.frame.dtype == np.uint8
    assert (surface.frame == 255).all()
    print("✓ Blank frame in the background colour")

    rect = Rectangle(x=10, y=30, width=40, height=20)
    rect.color = "#ff0000"
    rect.draw(surface, DrawStyle(fill_opacity=1.0))
    assert tuple(surface.frame[40, 30]) == (0, 0, 255)
    assert tuple(surface.frame[90, 110]) == (255, 255, 255)
    print("✓ Opaque fill painted inside the rectangle only")

    surface.clear()
    rect.draw(surface)
    b, g, r = (int(v) for v in surface.frame[40, 30])
    assert r == 255 and 120 <= g <= 135 and 120 <= b <= 135
    print("✓ Half-opacity fill blended with the background")

    surface.translate(10, 0)
    surface.rotate(math.pi / 2)
    x, y = surface.to_device(5, 0)
    assert math.isclose(x, 10, abs_tol=1e-9) and math.isclose(y, 5)
    surface.save()
    surface.translate(100, 100)
    surface.restore()
    assert np.allclose(surface.transform[:2, 2], (10, 0))
    print("✓ Transform stack save/restore")

    with pytest.raises(ValueError):
        FrameSurface(10, 10, background="nope")
    print("✓ Unsupported background rejected")


def main():
    """Run all tests."""
    print("\n🎨 sketchpad_shapes - Rendering Tests")
    print("=" * 60)

    try:
        test_rectangle_draw_sequence()
        test_circle_and_triangle_paths()
        test_renderer_grid()
        test_parse_style()
        test_frame_surface_pixels()

        print("\n" + "=" * 60)
        print("✅ ALL TESTS PASSED!")
        print("=" * 60)

    except AssertionError as e:
        print(f"\n❌ TEST FAILED: {e}")
        raise


if __name__ == "__main__":
    main()
