"""
Structured Logging for Badger
=============================

Bounded Context: Observability

JSON-structured logging with typed events.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from badger_shape.logging import create_logger, LogEvent
    >>> logger = create_logger("cli")
    >>> logger.info(
    ...     event=LogEvent.RENDER_SAVED,
    ...     message="Saved badge image",
    ...     metadata={'path': 'runs/badge.png'}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
