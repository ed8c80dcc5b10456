"""
ChromaSort Structured Logging
Centralized logging configuration using loguru.
"""
import sys
import time
from contextlib import contextmanager
from typing import Dict, Any, Iterator, Optional

from loguru import logger

from chromasort.config import config


class StructuredLogger:
    """Structured logger for ChromaSort services."""

    def __init__(self, level: Optional[str] = None, serialize: Optional[bool] = None):
        """Initialize structured logger with a single stdout sink."""
        self.level = level or config.LOG_LEVEL
        self.serialize = config.LOG_JSON if serialize is None else serialize
        self._configure_logger()

    def _configure_logger(self):
        """Replace loguru's default handler with the ChromaSort format."""
        logger.remove()
        logger.add(
            sys.stdout,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message} | {extra}",
            level=self.level,
            serialize=self.serialize
        )

    def _log(self, level: str, message: str, extra: Optional[Dict[str, Any]]):
        if extra:
            logger.bind(**extra).log(level, message)
        else:
            logger.log(level, message)

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log info message with optional extra data."""
        self._log("INFO", message, extra)

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log warning message with optional extra data."""
        self._log("WARNING", message, extra)

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log error message with optional extra data."""
        self._log("ERROR", message, extra)

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log debug message with optional extra data."""
        self._log("DEBUG", message, extra)

    @contextmanager
    def timed(self, operation: str, **extra: Any) -> Iterator[Dict[str, Any]]:
        """
        Log the duration of a block at debug level.

        The yielded dict can be filled with extra fields by the caller;
        they are merged into the final log record.
        """
        fields: Dict[str, Any] = dict(extra)
        start = time.perf_counter()
        try:
            yield fields
        finally:
            fields["duration_ms"] = round((time.perf_counter() - start) * 1000, 3)
            self.debug(f"{operation} finished", fields)


# Global logger instance
_logger: Optional[StructuredLogger] = None


def get_logger() -> StructuredLogger:
    """Get or create global logger instance."""
    global _logger
    if _logger is None:
        _logger = StructuredLogger()
    return _logger
