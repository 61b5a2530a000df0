"""
Sketchpad CLI - Main entry point.

Runs scripted editor sessions and renders the resulting canvas.
"""

import argparse
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import yaml

from sketchpad_control import EditorSession, commands_from_config
from sketchpad_shapes.editor import CanvasEditor, EditorConfig


def load_yaml_config(config_path: str) -> Any:
    """
    Load YAML file.

    Args:
        config_path: Path to YAML file

    Returns:
        Parsed YAML document

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If YAML is invalid
    """
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(path) as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}")


def get_target_run_folder(application_name: str) -> str:
    # runs/<application>/<timestamp>, created on demand
    target_run_folder = f"./runs/{application_name}/{datetime.now().strftime('%Y%m%d_%H%M%S')}"
    os.makedirs(target_run_folder, exist_ok=True)
    return target_run_folder


def run_session(
    session_path: str,
    config_path: Optional[str] = None,
    output_path: Optional[str] = None,
) -> CanvasEditor:
    """
    Replay a session file and save the rendered canvas.

    Args:
        session_path: Session YAML with a 'commands' list
        config_path: Optional EditorConfig YAML
        output_path: PNG path (default: ./runs/sketchpad/<timestamp>/canvas.png)

    Returns:
        The editor after the last command
    """
    config = EditorConfig.from_yaml(config_path) if config_path else EditorConfig()
    commands = commands_from_config(load_yaml_config(session_path))

    editor = CanvasEditor(config=config)
    session = EditorSession(editor)
    executed = session.run(commands)

    if output_path is None:
        output_path = os.path.join(get_target_run_folder("sketchpad"), "canvas.png")
    else:
        os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
    editor.render()
    editor.surface.save_png(output_path)

    print(f"✅ Executed {executed} commands")
    print(f"🖼️  Canvas saved to {output_path}")
    print(f"\nShapes ({len(editor.shapes)}):")
    for entry in editor.shape_list():
        print(f"  {entry}")
    counts = editor.shapes.counts_by_kind()
    if counts:
        print("\nBy kind: " + ", ".join(f"{kind}={count}" for kind, count in sorted(counts.items())))

    return editor


def print_commands() -> None:
    session = EditorSession()
    print("Available commands:")
    for name, description in sorted(session.registry.get_help().items()):
        print(f"  {name:<10} {description}")


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Sketchpad CLI - Replay scripted editor sessions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Replay a session and save the canvas under ./runs/sketchpad/
  sketchpad-cli run sessions/demo.yaml

  # Custom editor config and output file
  sketchpad-cli run sessions/demo.yaml --config editor.yaml --output canvas.png

  # List session commands
  sketchpad-cli commands
"""
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # run command
    run = subparsers.add_parser('run', help='Replay a session YAML')
    run.add_argument('session', help='Path to session YAML')
    run.add_argument('--config', default=None, help='Path to editor config YAML')
    run.add_argument('--output', default=None, help='Output PNG path')

    # commands command
    subparsers.add_parser('commands', help='List session commands')

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == 'run':
            run_session(args.session, args.config, args.output)

        elif args.command == 'commands':
            print_commands()

    except Exception as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
