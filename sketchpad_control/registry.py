"""
CommandRegistry - Explicit command registration

Bounded Context: Scripted editor commands
Responsibilities:
  - Register commands with handlers
  - Validate command existence before execution
  - Provide introspection (available_commands, get_help)

Threading: register() takes a lock; reads are lock-free snapshots
"""

import threading
from typing import Any, Callable, Dict, Optional, Set


class CommandNotAvailableError(Exception):
    """Raised when attempting to execute an unregistered command"""
    pass


class CommandRegistry:
    """
    Registry of editor commands with explicit registration.

    Handlers take the full command payload (a dict, possibly empty).

    Example:
        registry = CommandRegistry()
        registry.register('delete', lambda data: editor.delete_selected(),
                          "Delete the selected shape")

        try:
            registry.execute('delete')
        except CommandNotAvailableError as e:
            print(f"Command not available: {e}")
    """

    def __init__(self):
        self._commands: Dict[str, Callable[[Dict[str, Any]], Any]] = {}
        self._descriptions: Dict[str, str] = {}
        self._lock = threading.Lock()

    def register(
        self,
        command: str,
        handler: Callable[[Dict[str, Any]], Any],
        description: str,
    ) -> None:
        """
        Register a command with its handler function.

        Args:
            command: Command name (lowercase, no spaces)
            handler: Callable receiving the command payload
            description: Human-readable description for help text

        Raises:
            ValueError: If command already registered
        """
        with self._lock:
            if command in self._commands:
                raise ValueError(f"Command '{command}' already registered")

            self._commands[command] = handler
            self._descriptions[command] = description

    def execute(self, command: str, command_data: Optional[Dict[str, Any]] = None) -> Any:
        """
        Execute a registered command.

        Args:
            command: Command name to execute
            command_data: Command payload (defaults to an empty dict)

        Returns:
            Whatever the handler returns

        Raises:
            CommandNotAvailableError: If command not registered
        """
        if command not in self._commands:
            raise CommandNotAvailableError(
                f"Command '{command}' not available. "
                f"Available commands: {', '.join(sorted(self.available_commands))}"
            )

        handler = self._commands[command]
        return handler(command_data if command_data is not None else {})

    def is_available(self, command: str) -> bool:
        return command in self._commands

    @property
    def available_commands(self) -> Set[str]:
        """Snapshot of registered command names."""
        return set(self._commands.keys())

    def get_help(self) -> Dict[str, str]:
        """Snapshot of command name -> description."""
        return dict(self._descriptions)

    def count(self) -> int:
        return len(self._commands)
