"""
Sketchpad CLI - Command-line interface for scripted editor sessions.

Replays a YAML command list against a fresh canvas editor and writes the
rendered canvas as a PNG.

Usage:
    sketchpad-cli run sessions/demo.yaml
    sketchpad-cli run sessions/demo.yaml --config editor.yaml --output out.png
    sketchpad-cli commands
"""

__version__ = "1.0.0"
