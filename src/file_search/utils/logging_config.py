"""Logging configuration for the file search utility."""

import logging
import sys
from typing import Optional, TextIO


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    include_timestamp: bool = True,
    stream: Optional[TextIO] = None
) -> None:
    """
    Set up logging for the file search utility.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string
        include_timestamp: Whether to include timestamps
        stream: Output stream, stdout if not given
    """
    if format_string is None:
        if include_timestamp:
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_string = "%(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=format_string,
        stream=stream or sys.stdout,
        force=True
    )

    logging.getLogger("file_search").setLevel(getattr(logging, level.upper()))

    logger = logging.getLogger(__name__)
    logger.debug(f"Logging configured with level: {level}")


class StructuredLogger:
    """Logger that appends key=value context to every message."""

    def __init__(self, name: str):
        """Wrap the named standard logger with empty context."""
        self.logger = logging.getLogger(name)
        self.context = {}

    def with_context(self, **kwargs) -> 'StructuredLogger':
        """Return a copy of this logger with extra context."""
        new_logger = StructuredLogger(self.logger.name)
        new_logger.context = {**self.context, **kwargs}
        return new_logger

    def _format_message(self, message: str) -> str:
        """Append context as a bracketed key=value list."""
        if not self.context:
            return message

        context_str = " ".join([f"{k}={v}" for k, v in self.context.items()])
        return f"{message} [{context_str}]"

    def info(self, message: str) -> None:
        """Log an info message with the bound context."""
        self.logger.info(self._format_message(message))

    def warning(self, message: str) -> None:
        """Log a warning with the bound context."""
        self.logger.warning(self._format_message(message))
