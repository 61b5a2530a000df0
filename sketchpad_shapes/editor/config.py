"""
Configuration schema for the canvas editor.

Canvas size, grid display and draw styling. Loaded from YAML and validated
at construction (frozen dataclass).
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Union

import yaml

from sketchpad_shapes.geometry.shapes import DrawStyle
from sketchpad_shapes.rendering.surface import parse_style


@dataclass(frozen=True)
class EditorConfig:
    """
    Editor configuration.

    Immutable after construction; runtime canvas resizes and grid changes
    live on the editor, not here.
    """

    # Canvas
    canvas_width: int = 800
    canvas_height: int = 600
    background_color: str = "#ffffff"

    # Grid (display only)
    grid_size: int = 5
    grid_color: str = "#dddddd"
    grid_line_width: float = 0.5

    # Shape styling
    fill_opacity: float = 0.5
    selection_color: str = "#0066ff"
    selection_line_width: float = 2
    label_color: str = "#000000"
    label_font_size: int = 14
    label_offset: float = 5

    def __post_init__(self):
        """Validate editor configuration."""
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ValueError(
                f"Canvas dimensions must be positive, got "
                f"{self.canvas_width}x{self.canvas_height}"
            )

        if self.grid_size <= 0:
            raise ValueError(f"grid_size must be > 0, got {self.grid_size}")

        if not 0.0 <= self.fill_opacity <= 1.0:
            raise ValueError(
                f"fill_opacity must be in [0.0, 1.0], got {self.fill_opacity}"
            )

        if self.grid_line_width <= 0 or self.selection_line_width <= 0:
            raise ValueError("Line widths must be > 0")

        if self.label_font_size <= 0:
            raise ValueError(f"label_font_size must be > 0, got {self.label_font_size}")

        for name in ("background_color", "grid_color", "selection_color", "label_color"):
            value = getattr(self, name)
            if parse_style(value) is None:
                raise ValueError(f"Invalid colour for {name}: {value!r}")

    def draw_style(self) -> DrawStyle:
        """Styling handed to Shape.draw()."""
        return DrawStyle(
            fill_opacity=self.fill_opacity,
            selection_color=self.selection_color,
            selection_line_width=self.selection_line_width,
            label_color=self.label_color,
            label_font_size=self.label_font_size,
            label_offset=self.label_offset,
        )

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "EditorConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            canvas_width: 1024
            canvas_height: 768
            grid_size: 10
            selection_color: "#ff6600"

        Unknown keys are rejected; missing keys keep their defaults.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the YAML is invalid or holds bad settings
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping, got {type(data).__name__}")

        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        return cls(**data)
