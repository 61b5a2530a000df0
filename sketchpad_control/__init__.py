"""
sketchpad_control - Command layer for the canvas editor

Bounded Context: Scripted editor input
Responsibilities:
  - Command registration and validation
  - Replaying command lists against a CanvasEditor

Architecture:
  - CommandRegistry: Explicit registration pattern
  - EditorSession: Binds editor operations to command names

Design Philosophy:
  - Explicit registration (fail-fast, no runtime surprises)
  - Clear error messages (lists available commands on error)
"""

from .registry import CommandRegistry, CommandNotAvailableError
from .session import EditorSession, commands_from_config

__all__ = [
    "CommandRegistry",
    "CommandNotAvailableError",
    "EditorSession",
    "commands_from_config",
]
