"""
Render Surface Module
=====================

Drawing surface contract used by Shape.draw(), plus a raster implementation.

Design:
- RenderSurface: canvas-style API (transform stack, paths, fill/stroke, text)
- FrameSurface: paints on a BGR numpy frame through supervision drawing
  utilities; paths are flattened to polygons in device space
- Style strings the surface cannot parse are logged and skipped

Dependencies:
- supervision (draw_filled_polygon, draw_polygon, draw_line, draw_text, Color)
- opencv (text metrics, PNG export)
- numpy (frames, affine transforms)
"""

import logging
import math
import re
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

import cv2
import numpy as np
import supervision as sv

logger = logging.getLogger(__name__)

_RGB_PATTERN = re.compile(
    r"^rgba?\(\s*([-+\d.]+)\s*,\s*([-+\d.]+)\s*,\s*([-+\d.]+)\s*(?:,\s*([-+\d.]+)\s*)?\)$"
)

# Hershey simplex glyphs are ~22px tall at scale 1.0
_FONT = cv2.FONT_HERSHEY_SIMPLEX
_FONT_PIXELS_AT_SCALE_1 = 22.0

ARC_SEGMENTS_PER_RADIAN = 12


def parse_style(style: str) -> Optional[Tuple[sv.Color, float]]:
    """
    Parse a canvas style string into a colour and an alpha.

    Supports ``#rgb``, ``#rrggbb``, ``rgb(r, g, b)`` and ``rgba(r, g, b, a)``.

    Returns:
        (color, alpha) or None if the string is not understood
    """
    text = style.strip()

    if text.startswith('#'):
        try:
            return sv.Color.from_hex(text), 1.0
        except ValueError:
            return None

    match = _RGB_PATTERN.match(text)
    if match is None:
        return None

    try:
        r, g, b = (int(round(float(v))) for v in match.group(1, 2, 3))
        alpha = float(match.group(4)) if match.group(4) is not None else 1.0
    except ValueError:
        return None

    return (
        sv.Color(r=min(255, max(0, r)), g=min(255, max(0, g)), b=min(255, max(0, b))),
        min(1.0, max(0.0, alpha)),
    )


class RenderSurface(ABC):
    """
    Canvas-style drawing surface.

    Style attributes (saved and restored with the transform):
        fill_style, stroke_style: colour strings
        line_width: stroke width
        font_size: text size in px
        text_align: "left" | "right" | "center" | "start" | "end"
        text_baseline: "top" | "middle" | "bottom" | "alphabetic"
    """

    STYLE_ATTRIBUTES = (
        "fill_style", "stroke_style", "line_width",
        "font_size", "text_align", "text_baseline",
    )

    def __init__(self):
        self.fill_style = "#000000"
        self.stroke_style = "#000000"
        self.line_width = 1.0
        self.font_size = 10
        self.text_align = "start"
        self.text_baseline = "alphabetic"

    def _style_snapshot(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self.STYLE_ATTRIBUTES}

    def _apply_snapshot(self, snapshot: Dict[str, Any]) -> None:
        for name, value in snapshot.items():
            setattr(self, name, value)

    @abstractmethod
    def save(self) -> None:
        """Push transform and styles."""

    @abstractmethod
    def restore(self) -> None:
        """Pop transform and styles (no-op on an empty stack)."""

    @abstractmethod
    def translate(self, tx: float, ty: float) -> None:
        """Move the origin."""

    @abstractmethod
    def rotate(self, angle: float) -> None:
        """Rotate the axes by ``angle`` radians (clockwise on screen)."""

    @abstractmethod
    def begin_path(self) -> None:
        """Discard the current path."""

    @abstractmethod
    def move_to(self, x: float, y: float) -> None:
        """Start a new sub-path."""

    @abstractmethod
    def line_to(self, x: float, y: float) -> None:
        """Extend the current sub-path."""

    @abstractmethod
    def close_path(self) -> None:
        """Close the current sub-path."""

    @abstractmethod
    def rect(self, x: float, y: float, width: float, height: float) -> None:
        """Add a closed rectangle sub-path."""

    @abstractmethod
    def arc(self, cx: float, cy: float, radius: float, start: float, end: float) -> None:
        """Add an arc (radians, clockwise on screen) to the path."""

    @abstractmethod
    def fill(self) -> None:
        """Fill the current path with fill_style."""

    @abstractmethod
    def stroke(self) -> None:
        """Outline the current path with stroke_style and line_width."""

    @abstractmethod
    def fill_text(self, text: str, x: float, y: float) -> None:
        """Draw text at (x, y) honouring text_align and text_baseline."""

    @abstractmethod
    def clear(self) -> None:
        """Erase the whole surface."""


class FrameSurface(RenderSurface):
    """
    RenderSurface painting onto a BGR numpy frame.

    Design:
    - Affine transform stack (3x3 matrices)
    - Paths kept as device-space polylines; arcs sampled
    - Fill alpha comes from the style string (rgba)
    - Text is always drawn axis-aligned at its transformed anchor

    Usage:
        surface = FrameSurface(width=800, height=600)
        rectangle.draw(surface)
        cv2.imwrite("frame.png", surface.frame)
    """

    def __init__(self, width: int, height: int, background: str = "#ffffff"):
        """
        Args:
            width: Frame width (px)
            height: Frame height (px)
            background: Colour used by clear()
        """
        super().__init__()
        parsed = parse_style(background)
        if parsed is None:
            raise ValueError(f"Unsupported background colour: {background}")
        self._background = parsed[0]
        self.frame = self._blank(width, height)

        self._matrix = np.eye(3)
        self._stack: List[Tuple[np.ndarray, Dict[str, Any]]] = []
        self._subpaths: List[Tuple[List[Tuple[float, float]], bool]] = []

    def _blank(self, width: int, height: int) -> np.ndarray:
        frame = np.zeros((height, width, 3), dtype=np.uint8)
        frame[:] = self._background.as_bgr()
        return frame

    @property
    def width(self) -> int:
        return self.frame.shape[1]

    @property
    def height(self) -> int:
        return self.frame.shape[0]

    def resize(self, width: int, height: int) -> None:
        """Replace the frame with a blank one of the new size."""
        self.frame = self._blank(width, height)

    # ------------------------------------------------------------------
    # Transform stack
    # ------------------------------------------------------------------

    def save(self) -> None:
        self._stack.append((self._matrix.copy(), self._style_snapshot()))

    def restore(self) -> None:
        if not self._stack:
            return
        self._matrix, snapshot = self._stack.pop()
        self._apply_snapshot(snapshot)

    def translate(self, tx: float, ty: float) -> None:
        self._matrix = self._matrix @ np.array([
            [1.0, 0.0, tx],
            [0.0, 1.0, ty],
            [0.0, 0.0, 1.0],
        ])

    def rotate(self, angle: float) -> None:
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        self._matrix = self._matrix @ np.array([
            [cos_a, -sin_a, 0.0],
            [sin_a, cos_a, 0.0],
            [0.0, 0.0, 1.0],
        ])

    @property
    def transform(self) -> np.ndarray:
        """Current user-to-device matrix (copy)."""
        return self._matrix.copy()

    def to_device(self, x: float, y: float) -> Tuple[float, float]:
        """Map a user-space point to device pixels."""
        dx, dy, _ = self._matrix @ np.array([x, y, 1.0])
        return (float(dx), float(dy))

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    def begin_path(self) -> None:
        self._subpaths = []

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append(([self.to_device(x, y)], False))

    def line_to(self, x: float, y: float) -> None:
        if not self._subpaths or self._subpaths[-1][1]:
            self.move_to(x, y)
            return
        self._subpaths[-1][0].append(self.to_device(x, y))

    def close_path(self) -> None:
        if self._subpaths:
            points, _ = self._subpaths[-1]
            self._subpaths[-1] = (points, True)

    def rect(self, x: float, y: float, width: float, height: float) -> None:
        corners = [(x, y), (x + width, y), (x + width, y + height), (x, y + height)]
        self._subpaths.append(([self.to_device(px, py) for px, py in corners], True))

    def arc(self, cx: float, cy: float, radius: float, start: float, end: float) -> None:
        sweep = end - start
        segments = max(8, int(math.ceil(abs(sweep) * ARC_SEGMENTS_PER_RADIAN)))
        angles = np.linspace(start, end, segments + 1)
        points = [
            self.to_device(cx + radius * math.cos(a), cy + radius * math.sin(a))
            for a in angles
        ]
        if self._subpaths and not self._subpaths[-1][1]:
            self._subpaths[-1][0].extend(points)
        else:
            self._subpaths.append((points, False))

    @staticmethod
    def _as_polygon(points: List[Tuple[float, float]]) -> np.ndarray:
        return np.round(np.array(points, dtype=float)).astype(np.int32)

    def _thickness(self) -> int:
        return max(1, int(round(self.line_width)))

    # ------------------------------------------------------------------
    # Painting
    # ------------------------------------------------------------------

    def fill(self) -> None:
        parsed = parse_style(self.fill_style)
        if parsed is None:
            logger.warning("Skipping fill: unsupported fill style %r", self.fill_style)
            return
        color, alpha = parsed

        for points, _ in self._subpaths:
            if len(points) < 3:
                continue
            self.frame = sv.draw_filled_polygon(
                scene=self.frame,
                polygon=self._as_polygon(points),
                color=color,
                opacity=alpha,
            )

    def stroke(self) -> None:
        parsed = parse_style(self.stroke_style)
        if parsed is None:
            logger.warning("Skipping stroke: unsupported stroke style %r", self.stroke_style)
            return
        color, _ = parsed
        thickness = self._thickness()

        for points, closed in self._subpaths:
            if closed and len(points) >= 3:
                self.frame = sv.draw_polygon(
                    scene=self.frame,
                    polygon=self._as_polygon(points),
                    color=color,
                    thickness=thickness,
                )
                continue
            for (x0, y0), (x1, y1) in zip(points, points[1:]):
                self.frame = sv.draw_line(
                    scene=self.frame,
                    start=sv.Point(x=x0, y=y0),
                    end=sv.Point(x=x1, y=y1),
                    color=color,
                    thickness=thickness,
                )

    def fill_text(self, text: str, x: float, y: float) -> None:
        if not text:
            return
        parsed = parse_style(self.fill_style)
        if parsed is None:
            logger.warning("Skipping text: unsupported fill style %r", self.fill_style)
            return
        color, _ = parsed

        scale = self.font_size / _FONT_PIXELS_AT_SCALE_1
        thickness = 1
        (text_w, text_h), baseline = cv2.getTextSize(text, _FONT, scale, thickness)
        box_h = text_h + baseline

        anchor_x, anchor_y = self.to_device(x, y)

        if self.text_align in ("right", "end"):
            left = anchor_x - text_w
        elif self.text_align == "center":
            left = anchor_x - text_w / 2
        else:
            left = anchor_x

        if self.text_baseline == "bottom":
            top = anchor_y - box_h
        elif self.text_baseline == "top":
            top = anchor_y
        elif self.text_baseline == "middle":
            top = anchor_y - box_h / 2
        else:  # alphabetic
            top = anchor_y - text_h

        self.frame = sv.draw_text(
            scene=self.frame,
            text=text,
            text_anchor=sv.Point(x=left + text_w / 2, y=top + box_h / 2),
            text_color=color,
            text_scale=scale,
            text_thickness=thickness,
            text_padding=0,
            text_font=_FONT,
        )

    def clear(self) -> None:
        self.frame[:] = self._background.as_bgr()

    def save_png(self, path: str) -> None:
        """Write the current frame to disk."""
        if not cv2.imwrite(path, self.frame):
            raise IOError(f"Failed to write image: {path}")
