"""
Structured Log Event Types
==========================

Bounded Context: Editor Event Taxonomy

This module defines typed event names for structured logging.

Design:
- Enum-based (prevents typos, enables autocomplete)
- Hierarchical naming (subject.action[.outcome])
- Searchable in log aggregators

Event Naming Convention:
    <subject>.<action>[.<outcome>]

    subject: shape, triangle, canvas, command
    action: created, selected, edit, rendered
    outcome: applied, ignored, failed

Example Log Query (jq):
    jq 'select(.event == "shape.edit.ignored") | .metadata.field' editor.log
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - shape.*: Shape lifecycle and edits
    - triangle.*: Triangle validity repair
    - canvas.*: Canvas-level operations
    - command.*: Scripted command execution
    """

    # ========== Shape Events ==========
    SHAPE_CREATED = "shape.created"
    """Shape created by the factory and added to the canvas."""

    SHAPE_CREATE_REJECTED = "shape.create.rejected"
    """Factory asked for an unknown shape kind."""

    SHAPE_SELECTED = "shape.selected"
    """Selection moved to a shape (or was cleared)."""

    SHAPE_REMOVED = "shape.removed"
    """Shape removed from the collection."""

    SHAPE_MOVED = "shape.moved"
    """Shape anchor moved by a pointer drag."""

    SHAPE_EDIT_APPLIED = "shape.edit.applied"
    """Single-field property edit applied."""

    SHAPE_EDIT_IGNORED = "shape.edit.ignored"
    """Property edit dropped (unknown field, unparseable value, no selection)."""

    # ========== Triangle Events ==========
    TRIANGLE_SIDES_REPAIRED = "triangle.sides.repaired"
    """Side lengths clamped or shrunk to keep a valid triangle."""

    # ========== Canvas Events ==========
    CANVAS_RESIZED = "canvas.resized"
    """Canvas dimensions changed."""

    CANVAS_GRID_CHANGED = "canvas.grid.changed"
    """Grid spacing changed."""

    CANVAS_EDIT_IGNORED = "canvas.edit.ignored"
    """Canvas size or grid change dropped (non-positive or unparseable)."""

    CANVAS_RENDERED = "canvas.rendered"
    """Full repaint finished."""

    # ========== Command Events ==========
    COMMAND_EXECUTED = "command.executed"
    """Scripted command executed against the editor."""

    COMMAND_FAILED = "command.failed"
    """Scripted command raised an error."""
