"""
Structured JSON Logger
======================

Bounded Context: Editor observability

One JSON object per editor event, written through the standard ``logging``
module so handlers and levels stay configurable the usual way.

Record layout:
    {
        "timestamp": "2026-03-02T09:14:05.481223+00:00",
        "level": "WARNING",
        "component": "editor",
        "event": "shape.edit.ignored",
        "message": "Rejected width edit on rectangle",
        "metadata": {"shape_id": "9f3ac01b77e2", "field": "width", "value": "abc"}
    }

``metadata`` and ``exception`` keys are only present when given.
Non-JSON values in metadata are rendered with ``str()``.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .events import LogEvent

Metadata = Optional[Dict[str, Any]]


class StructuredLogger:
    """
    Event logger for one editor component.

    Usage:
        logger = StructuredLogger("editor")
        logger.info(LogEvent.SHAPE_CREATED, "Created circle", {'shape_id': shape.id})
    """

    def __init__(
        self,
        component: str,
        level: int = logging.INFO,
        logger_name: Optional[str] = None
    ):
        """
        Args:
            component: Value of the "component" key (e.g. "editor", "session")
            level: Initial level
            logger_name: Underlying logger name (default: sketchpad.<component>)
        """
        self.component = component
        self.logger = logging.getLogger(logger_name or f"sketchpad.{component}")
        self.logger.setLevel(level)

        # Attach once per logger name; repeated editors share the handler
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _build_entry(
        self,
        level: int,
        event: LogEvent,
        message: str,
        metadata: Metadata,
        exc_info: Optional[Exception],
    ) -> Dict[str, Any]:
        entry: Dict[str, Any] = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': logging.getLevelName(level),
            'component': self.component,
            'event': LogEvent(event).value,
            'message': message,
        }
        if metadata:
            entry['metadata'] = metadata
        if exc_info is not None:
            entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info),
            }
        return entry

    def log(
        self,
        level: int,
        event: LogEvent,
        message: str,
        metadata: Metadata = None,
        exc_info: Optional[Exception] = None,
    ) -> None:
        """Emit one record at ``level`` (skipped cheaply when disabled)."""
        if not self.logger.isEnabledFor(level):
            return

        entry = self._build_entry(level, event, message, metadata, exc_info)
        self.logger.log(level, json.dumps(entry, default=str))

    def debug(self, event: LogEvent, message: str, metadata: Metadata = None) -> None:
        """High-frequency events (drag steps, repaints)."""
        self.log(logging.DEBUG, event, message, metadata)

    def info(self, event: LogEvent, message: str, metadata: Metadata = None) -> None:
        self.log(logging.INFO, event, message, metadata)

    def warning(self, event: LogEvent, message: str, metadata: Metadata = None) -> None:
        """Dropped user input (unknown kind, bad value, no selection)."""
        self.log(logging.WARNING, event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Metadata = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Failures the caller re-raises (e.g. a session command).

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
            exc_info: Exception summarised under the "exception" key
        """
        self.log(logging.ERROR, event, message, metadata, exc_info)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)


class JSONFormatter(logging.Formatter):
    """Pass-through formatter: StructuredLogger messages are already JSON."""

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(component: str, level: int = logging.INFO) -> StructuredLogger:
    """
    Create a StructuredLogger for ``component``.

    Example:
        >>> logger = create_logger("session", level=logging.DEBUG)
    """
    return StructuredLogger(component=component, level=level)
