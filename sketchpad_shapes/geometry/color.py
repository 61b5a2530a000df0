"""
Color Normalization Module
==========================

Pure string conversion from stored shape colours to RGBA fill styles.

Design:
- Stored colour keeps full opacity (swatches, inputs)
- Fill style is derived at render time with a fixed opacity
- Unknown formats pass through untouched (the surface decides)
"""

import re

_HEX_DIGITS = re.compile(r"^[0-9a-fA-F]+$")


def format_number(value: float) -> str:
    """Format a number the way a canvas style string expects (1, 0.5, 0.25)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_rgba(color: str, opacity: float) -> str:
    """
    Convert a stored colour string to an ``rgba(...)`` fill style.

    Accepted inputs:
        - ``#rgb``: each nibble doubled, then as ``#rrggbb``
        - ``#rrggbb``: channels parsed as hex
        - ``rgb(r,g,b)``: opacity injected before the first ``)``,
          ``rgb`` renamed to ``rgba``; channel text kept verbatim

    Anything else (named colours, malformed hex) is returned unchanged.

    Args:
        color: Stored colour string
        opacity: Alpha to inject (0-1)

    Returns:
        RGBA style string, or ``color`` itself if unrecognized

    Example:
        >>> to_rgba("#fff", 0.5)
        'rgba(255, 255, 255, 0.5)'
        >>> to_rgba("rgb(10,20,30)", 0.5)
        'rgba(10,20,30, 0.5)'
    """
    alpha = format_number(opacity)

    if color.startswith('#'):
        hex_part = color[1:]
        if len(hex_part) == 3:
            hex_part = ''.join(h + h for h in hex_part)
        if len(hex_part) != 6 or not _HEX_DIGITS.match(hex_part):
            return color

        r = int(hex_part[0:2], 16)
        g = int(hex_part[2:4], 16)
        b = int(hex_part[4:6], 16)
        return f"rgba({r}, {g}, {b}, {alpha})"

    if color.startswith('rgb'):
        return color.replace(')', f", {alpha})", 1).replace('rgb', 'rgba', 1)

    return color
