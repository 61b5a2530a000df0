"""
EditorSession - Scripted command execution against a CanvasEditor

Bounded Context: Replaying editor input from a command list
Responsibilities:
  - Register editor operations as named commands
  - Validate payloads (missing keys fail fast)
  - Execute command lists in order, logging each step

Session YAML:
    commands:
      - {command: create, kind: rectangle}
      - {command: click, x: 400, y: 300}
      - {command: drag, x: 450, y: 320}
      - {command: release}
      - {command: set, field: width, value: 180}
"""

from typing import Any, Dict, Iterable, List, Optional

from sketchpad_shapes.editor.canvas import CanvasEditor
from sketchpad_shapes.logging import LogEvent, StructuredLogger, create_logger

from .registry import CommandRegistry


def _require(data: Dict[str, Any], *keys: str) -> List[Any]:
    missing = [key for key in keys if key not in data]
    if missing:
        raise ValueError(
            f"Command '{data.get('command', '?')}' missing keys: {', '.join(missing)}"
        )
    return [data[key] for key in keys]


def commands_from_config(config: Any) -> List[Dict[str, Any]]:
    """
    Extract the command list from a loaded session document.

    Accepts either a mapping with a ``commands`` list or a bare list.

    Raises:
        ValueError: If the document has no usable command list
    """
    if isinstance(config, dict):
        config = config.get('commands')

    if not isinstance(config, list):
        raise ValueError("Session must define a 'commands' list")

    for position, command in enumerate(config):
        if not isinstance(command, dict) or 'command' not in command:
            raise ValueError(f"Session entry {position} has no 'command' key")

    return config


class EditorSession:
    """
    Runs scripted commands against one editor.

    Example:
        session = EditorSession()
        session.run([
            {'command': 'create', 'kind': 'circle'},
            {'command': 'click', 'x': 425, 'y': 325},
            {'command': 'key', 'key': 'Delete'},
        ])
    """

    def __init__(
        self,
        editor: Optional[CanvasEditor] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        self.editor = editor or CanvasEditor()
        self.logger = logger or create_logger("session")
        self.registry = CommandRegistry()
        self._register_commands()

    def _register_commands(self) -> None:
        register = self.registry.register
        register('create', self._handle_create, "Create a shape (kind, optional x/y)")
        register('click', self._handle_click, "Pointer down at x/y (select + start drag)")
        register('drag', self._handle_drag, "Pointer move to x/y")
        register('release', self._handle_release, "Pointer up")
        register('select', self._handle_select, "Select shape by list index (omit to clear)")
        register('set', self._handle_set, "Set a property of the selected shape (field, value)")
        register('rotate', self._handle_rotate, "Quick rotation of the selected shape (degrees)")
        register('rename', self._handle_rename, "Rename shape by list index (index, name)")
        register('delete', self._handle_delete, "Delete the selected shape")
        register('key', self._handle_key, "Key press (key)")
        register('resize', self._handle_resize, "Resize the canvas (width, height)")
        register('grid', self._handle_grid, "Set the grid size (size)")

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _handle_create(self, data: Dict[str, Any]):
        (kind,) = _require(data, 'kind')
        return self.editor.create_shape(kind, data.get('x'), data.get('y'))

    def _handle_click(self, data: Dict[str, Any]):
        x, y = _require(data, 'x', 'y')
        return self.editor.pointer_down(float(x), float(y))

    def _handle_drag(self, data: Dict[str, Any]):
        x, y = _require(data, 'x', 'y')
        return self.editor.pointer_move(float(x), float(y))

    def _handle_release(self, data: Dict[str, Any]):
        self.editor.pointer_up()

    def _handle_select(self, data: Dict[str, Any]):
        index = data.get('index')
        shape = None if index is None else self.editor.shapes.at(int(index))
        self.editor.select_shape(shape)
        return shape

    def _handle_set(self, data: Dict[str, Any]):
        field, value = _require(data, 'field', 'value')
        return self.editor.update_property(field, value)

    def _handle_rotate(self, data: Dict[str, Any]):
        (degrees,) = _require(data, 'degrees')
        return self.editor.set_quick_rotation(degrees)

    def _handle_rename(self, data: Dict[str, Any]):
        index, name = _require(data, 'index', 'name')
        return self.editor.rename_shape(int(index), name)

    def _handle_delete(self, data: Dict[str, Any]):
        return self.editor.delete_selected()

    def _handle_key(self, data: Dict[str, Any]):
        (key,) = _require(data, 'key')
        return self.editor.key_down(key)

    def _handle_resize(self, data: Dict[str, Any]):
        width, height = _require(data, 'width', 'height')
        return self.editor.resize_canvas(width, height)

    def _handle_grid(self, data: Dict[str, Any]):
        (size,) = _require(data, 'size')
        return self.editor.set_grid_size(size)

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def execute(self, command: Dict[str, Any]) -> Any:
        """
        Execute one command payload.

        Raises:
            ValueError: If the payload has no 'command' or misses required keys
            CommandNotAvailableError: If the command is not registered
        """
        name = command.get('command')
        if not name:
            raise ValueError("Command payload has no 'command' key")

        try:
            result = self.registry.execute(name, command)
        except Exception as e:
            self.logger.error(
                event=LogEvent.COMMAND_FAILED,
                message=f"Command '{name}' failed: {e}",
                metadata={'command': name},
                exc_info=e,
            )
            raise

        self.logger.info(
            event=LogEvent.COMMAND_EXECUTED,
            message=f"Executed '{name}'",
            metadata={'command': name},
        )
        return result

    def run(self, commands: Iterable[Dict[str, Any]]) -> int:
        """
        Execute commands in order; stops at the first failure.

        Returns:
            Number of commands executed
        """
        executed = 0
        for command in commands:
            self.execute(command)
            executed += 1
        return executed
