"""
Structured JSON Logger
=====================

Bounded Context: Observability Infrastructure

Structured logger that outputs one JSON object per log line.

Architecture:
- Wraps Python's logging module
- Adds structured metadata
- Formats as JSON for stdout/file

Example:
    >>> logger = StructuredLogger(component="renderer")
    >>> logger.debug(
    ...     event=LogEvent.BADGE_DRAWN,
    ...     message="Badge drawn",
    ...     metadata={'badge_rect': [16, 16, 48, 48]}
    ... )

Output:
    {
        "timestamp": "2026-10-18T15:30:45.123456+00:00",
        "level": "DEBUG",
        "component": "renderer",
        "event": "badge.drawn",
        "message": "Badge drawn",
        "metadata": {"badge_rect": [16, 16, 48, 48]}
    }
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent


class StructuredLogger:
    """
    JSON structured logger.

    Attributes:
        component: Component name (e.g., "renderer", "cli")
        logger: Underlying Python logger instance
    """

    def __init__(
        self,
        component: str,
        level: int = logging.INFO,
        logger_name: Optional[str] = None
    ):
        """
        Initialize structured logger.

        Args:
            component: Component identifier (e.g., "renderer")
            level: Logging level (default: INFO)
            logger_name: Custom logger name (default: badger.<component>)
        """
        self.component = component
        self.logger_name = logger_name or f"badger.{component}"
        self.logger = logging.getLogger(self.logger_name)
        self.logger.setLevel(level)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _log(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        log_level = getattr(logging, level)
        # skip serialization for filtered levels (draw calls log per frame)
        if not self.logger.isEnabledFor(log_level):
            return

        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'component': self.component,
            'event': event.value,
            'message': message,
        }

        if metadata:
            log_entry['metadata'] = metadata

        if exc_info:
            log_entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        self.logger.log(
            log_level,
            json.dumps(log_entry, default=str),
            exc_info=exc_info if level == 'ERROR' else None
        )

    def debug(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log DEBUG level message."""
        self._log('DEBUG', event, message, metadata)

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log INFO level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
        """
        self._log('INFO', event, message, metadata)

    def warning(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log WARNING level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
        """
        self._log('WARNING', event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Log ERROR level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
            exc_info: Exception instance for traceback

        Example:
            >>> try:
            ...     BadgeConfig.from_yaml(path)
            ... except ValueError as e:
            ...     logger.error(
            ...         event=LogEvent.CONFIG_INVALID,
            ...         message="Invalid badge config",
            ...         exc_info=e,
            ...         metadata={'path': str(path)}
            ...     )
        """
        self._log('ERROR', event, message, metadata, exc_info)

    def is_enabled_for(self, level: int) -> bool:
        """True if a message at level would be emitted."""
        return self.logger.isEnabledFor(level)


class JSONFormatter(logging.Formatter):
    """
    Formatter used by StructuredLogger.

    Messages are already JSON; they are passed through unchanged.
    """

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(
    component: str,
    level: int = logging.INFO
) -> StructuredLogger:
    """
    Factory function to create configured StructuredLogger.

    Args:
        component: Component identifier
        level: Logging level (default: INFO)

    Returns:
        Configured StructuredLogger instance
    """
    return StructuredLogger(component=component, level=level)
