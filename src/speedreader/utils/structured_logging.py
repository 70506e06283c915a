"""
Structured Logging Utilities

This module provides structured logging for Speed Reader. Structured logging
adds key-value context to log messages in a consistent format.

Standard output belongs to the frame stream, so every handler configured here
writes to standard error, and the default level keeps the reader silent.

Usage:
    from speedreader.utils.structured_logging import get_logger, log_operation

    logger = get_logger(__name__)
    logger.info("Parsed input", words=1200)

    # Output: 2026-01-15 10:30:45 - INFO - speedreader.cli - Parsed input | words=1200
"""

import logging
import json
import os
import sys
import time
import threading
from typing import Any, Dict
from contextlib import contextmanager

LOG_LEVEL_ENV_VAR = "SPEEDREADER_LOG_LEVEL"

DEFAULT_LOG_LEVEL = logging.WARNING

# Log level mapping for string-to-int conversion
_LOG_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Maximum length for string values in logs
MAX_VALUE_LENGTH = 200


def _get_configured_log_level() -> int:
    """Get log level from the environment, falling back to WARNING."""
    env_level = os.environ.get(LOG_LEVEL_ENV_VAR, "").upper()
    return _LOG_LEVEL_MAP.get(env_level, DEFAULT_LOG_LEVEL)


def _sanitize_value(value: Any) -> Any:
    """Truncate long strings so a whole book never lands in a log line."""
    if isinstance(value, str) and len(value) > MAX_VALUE_LENGTH:
        return value[:MAX_VALUE_LENGTH] + "...[truncated]"
    return value


def _format_context(context: Dict[str, Any]) -> str:
    """Format context dictionary for log output.

    Args:
        context: Dictionary of context key-value pairs

    Returns:
        Formatted string for log message
    """
    if not context:
        return ""

    parts = []
    for key, value in context.items():
        sanitized = _sanitize_value(value)

        if isinstance(sanitized, str):
            if ' ' in sanitized or '"' in sanitized:
                parts.append(f'{key}="{sanitized}"')
            else:
                parts.append(f'{key}={sanitized}')
        elif isinstance(sanitized, (list, dict)):
            parts.append(f'{key}={json.dumps(sanitized)}')
        else:
            parts.append(f'{key}={sanitized}')

    return " | " + " ".join(parts)


class StructuredLogger:
    """A logger wrapper that supports structured context in log messages.

    Attributes:
        name: The logger name
        logger: The underlying Python logger
    """

    def __init__(self, name: str):
        self.name = name
        self.logger = logging.getLogger(name)

    def _log(self, level: int, message: str, exc_info: bool = False, **kwargs) -> None:
        context_str = _format_context(kwargs)
        self.logger.log(level, f"{message}{context_str}", exc_info=exc_info)

    def debug(self, message: str, **kwargs) -> None:
        """Log a debug message with context."""
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        """Log an info message with context."""
        self._log(logging.INFO, message, **kwargs)

    def error(self, message: str, exc_info: bool = False, **kwargs) -> None:
        """Log an error message with context.

        Args:
            message: Error message
            exc_info: If True, include exception info
            **kwargs: Context key-value pairs
        """
        self._log(logging.ERROR, message, exc_info=exc_info, **kwargs)


# Logger cache
_loggers: Dict[str, StructuredLogger] = {}
_loggers_lock = threading.Lock()


def get_logger(name: str) -> StructuredLogger:
    """Get or create a structured logger.

    Args:
        name: Logger name (usually __name__)

    Returns:
        StructuredLogger instance
    """
    with _loggers_lock:
        if name not in _loggers:
            _loggers[name] = StructuredLogger(name)
        return _loggers[name]


@contextmanager
def log_operation(
    logger: StructuredLogger,
    operation_name: str,
    **context
):
    """Context manager for logging an operation with timing.

    Args:
        logger: Logger to use
        operation_name: Name of the operation
        **context: Additional context to include

    Example:
        with log_operation(logger, "presentation", words=120):
            loop.run()
    """
    start_time = time.perf_counter()
    logger.info(f"Starting {operation_name}", **context)

    try:
        yield
        elapsed = time.perf_counter() - start_time
        logger.info(
            f"Completed {operation_name}",
            duration_ms=round(elapsed * 1000, 2),
            status="success",
            **context
        )
    except Exception as e:
        elapsed = time.perf_counter() - start_time
        logger.error(
            f"Failed {operation_name}",
            duration_ms=round(elapsed * 1000, 2),
            status="error",
            error=str(e),
            **context
        )
        raise


def configure_logging(level: int = None, format_string: str = None) -> None:
    """Configure the root logger to write structured records to standard error.

    Args:
        level: Logging level (if None, reads SPEEDREADER_LOG_LEVEL)
        format_string: Custom format string
    """
    if level is None:
        level = _get_configured_log_level()

    if format_string is None:
        format_string = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_string,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

