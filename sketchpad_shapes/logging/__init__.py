"""
Structured logging for the editor.

Shape lifecycle, edits, triangle repairs, repaints and scripted commands
are logged as JSON lines under ``sketchpad.<component>`` loggers.

    from sketchpad_shapes.logging import create_logger, LogEvent

    logger = create_logger("editor")
    logger.info(LogEvent.SHAPE_SELECTED, "Selected circle", {'shape_id': shape.id})
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
